from . utils.alphabet import select_alphabet, to_upper
from . import vigenere

def shift_row(alphabet, shift):
    """
    The cipher row for the plain row alphabet: alphabet rotated left by shift.

    shift_row('abcdef', 2) --> 'cdefab'
    """
    shift %= len(alphabet)
    return alphabet[shift:] + alphabet[:shift]

def shift_table(language, shift):
    """
    Header row with the plain letters and the cipher row for shift.
    The first column holds the row labels (empty for the header).
    """
    alphabet = select_alphabet(language)
    return [[''] + list(alphabet), [str(shift)] + list(shift_row(alphabet, shift))]

def keyword_table(language, keyword):
    """
    Same layout as shift_table, with one row for each letter of keyword,
    labelled with the uppercase letter.
    """
    alphabet = select_alphabet(language)
    table = [[''] + list(alphabet)]
    for letter, shift in zip(keyword, vigenere.key_shifts(language, keyword)):
        table.append([to_upper(letter)] + list(shift_row(alphabet, shift)))
    return table
