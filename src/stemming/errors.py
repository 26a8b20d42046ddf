"""Exceptions raised by the stemming package."""


class InvalidWordError(ValueError):
    """Token is empty or not made of lowercase ASCII letters"""

    def __init__(self, word: str):
        self.word = word
        super().__init__(
            f"Invalid word {word!r}: expected a non-empty lowercase ASCII alphabetic token"
        )


class IrregularTableError(ValueError):
    """Irregular-form table could not be parsed"""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


def is_valid_word(word) -> bool:
    """True if ``word`` is a non-empty lowercase ASCII alphabetic string."""
    return (
        isinstance(word, str)
        and word != ""
        and word.isascii()
        and word.isalpha()
        and word.islower()
    )


def validate_word(word) -> str:
    """Return ``word`` unchanged or raise InvalidWordError."""
    if not is_valid_word(word):
        raise InvalidWordError(word)
    return word
