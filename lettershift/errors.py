class LetterShiftError(Exception):
    pass


class UnknownLanguageError(LetterShiftError, ValueError):
    def __init__(self, language, choices):
        super().__init__(f'Unknown language "{language}", expected one of {", ".join(choices)}')
        self.language = language


class InvalidKeyError(LetterShiftError, ValueError):
    def __init__(self, key, language):
        super().__init__(f'Key "{key}" contains characters outside the "{language}" alphabet')
        self.key = key
        self.language = language


class ConfigError(LetterShiftError):
    pass
