__version__ = '0.1.0'

from . caesar import encode as caesar_encode, decode as caesar_decode
from . vigenere import verify_key as vigenere_verify_key, encode as vigenere_encode, decode as vigenere_decode
from . errors import LetterShiftError, UnknownLanguageError, InvalidKeyError, ConfigError

__all__ = ['caesar_encode', 'caesar_decode', 'vigenere_verify_key', 'vigenere_encode', 'vigenere_decode',
           'LetterShiftError', 'UnknownLanguageError', 'InvalidKeyError', 'ConfigError']
