import logging
from . utils.alphabet import ALPHABET_EN, ALPHABET_RU, index_of, restore_case

logger = logging.getLogger("lettershift")

MIN_KEY = 1
# a larger shift is redundant for both alphabets
MAX_KEY = len(ALPHABET_RU)

def verify_key(key):
    if isinstance(key, bool) or not isinstance(key, int):
        return False
    return MIN_KEY <= key <= MAX_KEY

def locate(char):
    """
    Finds the alphabet char belongs to, Latin letters are tested first.
    Returns the (alphabet, position) pair or (None, None) for any other character.
    """
    for alphabet in (ALPHABET_EN, ALPHABET_RU):
        pos = index_of(alphabet, char)
        if pos is not None:
            return alphabet, pos
    return None, None

def encode(message, key):
    """
    Shifts every Latin or Cyrillic letter of message forward by key positions,
    each within its own alphabet. Other characters are kept as they are.

    >>> encode("Hello, World!", 3)
    'Khoor, Zruog!'
    """
    if not message:
        return ""
    logger.debug(f"Caesar encoding {len(message)} characters with key {key}")
    def substitute(char):
        alphabet, pos = locate(char)
        if alphabet is None:
            return char
        return restore_case(char, alphabet[(pos + key) % len(alphabet)])
    return "".join(substitute(char) for char in message)

def decode(message, key):
    """
    Inverse of encode. The key is reduced modulo the size of each character's
    alphabet, so keys above 26 still work on Latin text.
    """
    if not message:
        return ""
    logger.debug(f"Caesar decoding {len(message)} characters with key {key}")
    def substitute(char):
        alphabet, pos = locate(char)
        if alphabet is None:
            return char
        n = len(alphabet)
        return restore_case(char, alphabet[(pos - key % n) % n])
    return "".join(substitute(char) for char in message)
