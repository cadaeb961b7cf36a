from .. errors import UnknownLanguageError

ALPHABET_EN = 'abcdefghijklmnopqrstuvwxyz'
ALPHABET_RU = 'абвгдеёжзийклмнопрстуфхцчшщъыьэюя'

LANGUAGES = ('en', 'ru')
ALPHABETS = { 'en': ALPHABET_EN, 'ru': ALPHABET_RU }

# uppercase -> lowercase and back, only for the letters of the two alphabets
_LOWER = { c.upper(): c for c in ALPHABET_EN + ALPHABET_RU }
_UPPER = { c: u for u, c in _LOWER.items() }


def is_upper(char):
    return char in _LOWER

def to_upper(char):
    return _UPPER.get(char, char)

def to_lower(char):
    return _LOWER.get(char, char)

def restore_case(original, char):
    """
    Returns char uppercased if original was an uppercase letter
    """
    return to_upper(char) if is_upper(original) else char

def index_of(alphabet, char):
    """
    Case-insensitive position of char within alphabet, None when it is not a letter of it.
    """
    if len(char) != 1:
        return None
    pos = alphabet.find(to_lower(char))
    return pos if pos >= 0 else None

def select_alphabet(language):
    try:
        return ALPHABETS[language]
    except KeyError:
        raise UnknownLanguageError(language, LANGUAGES) from None
