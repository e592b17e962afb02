from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kinds of cipher failures reported to callers."""

    INVALID_KEY = "invalid_key"
    EMPTY_KEY = "empty_key"
    WEAK_KEY = "weak_key"
    EMPTY_TEXT = "empty_text"
    NO_LETTERS = "no_letters"
    TEXT_TOO_SHORT = "text_too_short"
    INVALID_CIPHER_TEXT = "invalid_cipher_text"
    ENGINE_NOT_FOUND = "engine_not_found"
    TEXT_TOO_LONG = "text_too_long"


class CipherError(ValueError):
    """Base exception for all cipher errors."""

    kind: ErrorKind

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidKeyError(CipherError):
    """Raised when a key fails validation."""

    kind = ErrorKind.INVALID_KEY


class EmptyKeyError(CipherError):
    """Raised when a substitution key is empty."""

    kind = ErrorKind.EMPTY_KEY

    def __init__(self) -> None:
        super().__init__("Empty key")


class WeakKeyError(CipherError):
    """Raised when every character of a multi-character key is the same."""

    kind = ErrorKind.WEAK_KEY

    def __init__(self, key: str):
        super().__init__("Weak key", {"key_length": len(key)})


class EmptyTextError(CipherError):
    """Raised when the input text is empty, before or after filtering."""

    kind = ErrorKind.EMPTY_TEXT


class NoLettersError(CipherError):
    """Raised when the input text contains no letters."""

    kind = ErrorKind.NO_LETTERS

    def __init__(self) -> None:
        super().__init__("Text contains no letters")


class TextTooShortError(CipherError):
    """Raised when the text is not longer than the column count."""

    kind = ErrorKind.TEXT_TOO_SHORT

    def __init__(self, length: int, columns: int):
        super().__init__(
            f"Text length {length} must be greater than the key ({columns} columns)",
            {"length": length, "columns": columns},
        )


class InvalidCipherTextError(CipherError):
    """Raised when ciphertext contains a character outside the uppercase alphabet."""

    kind = ErrorKind.INVALID_CIPHER_TEXT

    def __init__(self, position: int):
        super().__init__("Invalid cipher text", {"position": position})


class EngineNotFoundError(CipherError):
    """Raised when requested cipher engine is not found."""

    kind = ErrorKind.ENGINE_NOT_FOUND

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
