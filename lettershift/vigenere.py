import logging
from itertools import cycle
from . utils.alphabet import ALPHABETS, index_of, restore_case, select_alphabet
from . errors import InvalidKeyError

logger = logging.getLogger("lettershift")

def verify_key(language, key):
    """
    A key is valid when it is not empty and all of its letters belong
    (case-insensitively) to the alphabet of the given language.
    """
    if not isinstance(language, str) or not isinstance(key, str):
        return False
    if not language or not key:
        return False
    alphabet = ALPHABETS.get(language)
    if alphabet is None:
        return False
    return all(index_of(alphabet, k) is not None for k in key)

def key_shifts(language, key):
    alphabet = select_alphabet(language)
    shifts = [index_of(alphabet, k) for k in key]
    if None in shifts:
        raise InvalidKeyError(key, language)
    return shifts

def _transform(language, message, key, direction):
    # the key only advances on letters of the selected alphabet
    alphabet = select_alphabet(language)
    n = len(alphabet)
    shifts = cycle(key_shifts(language, key))
    skipped = 0
    result = []
    for char in message:
        pos = index_of(alphabet, char)
        if pos is None:
            skipped += 1
            result.append(char)
            continue
        result.append(restore_case(char, alphabet[(pos + direction * next(shifts)) % n]))
    logger.debug(f"Vigenere ({language}) processed {len(message)} characters, {skipped} left untouched")
    return "".join(result)

def encode(language, message, key):
    """
    Encodes message with the running key, both taken from the alphabet of language ('en' or 'ru').

    >>> encode('en', 'ATTACKATDAWN', 'LEMON')
    'LXFOPVEFRNHR'
    """
    if not language or not message or not key:
        return ""
    return _transform(language, message, key, 1)

def decode(language, message, key):
    if not language or not message or not key:
        return ""
    return _transform(language, message, key, -1)
