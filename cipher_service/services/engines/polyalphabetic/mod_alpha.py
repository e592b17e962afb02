import logging
from typing import ClassVar

from cipher_service.core.exceptions import (
    EmptyKeyError,
    EmptyTextError,
    InvalidCipherTextError,
    InvalidKeyError,
    WeakKeyError,
)
from cipher_service.models.schemas import CipherFamily, CipherType
from cipher_service.services.engines.base import CipherEngine
from cipher_service.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

RUSSIAN_ALPHABET = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"


@EngineRegistry.register
class ModAlphaCipher(CipherEngine):
    """
    Modular alphabet cipher over the 33-letter Russian alphabet.

    A Vigenère-style polyalphabetic substitution: each letter's position is
    shifted by the position of the corresponding letter of a repeating
    keyword, modulo the alphabet size.

    Encryption filters the open text down to Russian letters. Decryption is
    strict and rejects anything that is not uppercase ciphertext.
    """

    name = "Modular Alphabet Cipher"
    cipher_type = CipherType.MOD_ALPHA
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher over the Russian alphabet where each letter "
        "is shifted by the position of the matching letter of a repeating "
        "keyword, modulo 33."
    )

    ALPHABET: ClassVar[str] = RUSSIAN_ALPHABET
    LOWER_ALPHABET: ClassVar[str] = RUSSIAN_ALPHABET.lower()
    ALPHA_NUM: ClassVar[dict[str, int]] = {c: i for i, c in enumerate(RUSSIAN_ALPHABET)}

    def __init__(self, key: str):
        key_text = self._get_valid_key(key)

        if len(key_text) > 1 and len(set(key_text)) == 1:
            raise WeakKeyError(key_text)

        self._key_text = key_text
        self._key = tuple(self._to_indices(key_text))
        logger.debug("Modular alphabet cipher created with key of length %d", len(self._key))

    @classmethod
    def from_key(cls, key: int | str) -> "ModAlphaCipher":
        """Build from a keyword."""
        if not isinstance(key, str):
            raise InvalidKeyError("Key must be a word", {"key": repr(key)})
        return cls(key)

    @property
    def key(self) -> tuple[int, ...]:
        return self._key

    @property
    def key_text(self) -> str:
        return self._key_text

    @property
    def key_value(self) -> str:
        return self._key_text

    def encrypt(self, plaintext: str) -> str:
        """Shift each letter forward by the key letter's position."""
        work = self._to_indices(self._get_valid_open_text(plaintext))
        size = len(self.ALPHABET)
        key_len = len(self._key)

        return "".join(
            self.ALPHABET[(v + self._key[i % key_len]) % size]
            for i, v in enumerate(work)
        )

    def decrypt(self, ciphertext: str) -> str:
        """Shift each letter back by the key letter's position."""
        work = self._to_indices(self._get_valid_cipher_text(ciphertext))
        size = len(self.ALPHABET)
        key_len = len(self._key)

        return "".join(
            self.ALPHABET[(v + size - self._key[i % key_len]) % size]
            for i, v in enumerate(work)
        )

    def explain(self) -> str:
        """Generate human-readable explanation."""
        shift_desc = ", ".join(f"{c}={i}" for c, i in zip(self._key_text, self._key))

        return (
            f"Modular alphabet cipher with keyword '{self._key_text}' "
            f"(length {len(self._key)}). Letter shifts: {shift_desc}. "
            f"Each letter is shifted by the corresponding key letter's "
            f"position in the {len(self.ALPHABET)}-letter alphabet."
        )

    def _to_indices(self, text: str) -> list[int]:
        """Convert validated uppercase text to alphabet positions."""
        return [self.ALPHA_NUM[c] for c in text]

    def _is_letter(self, c: str) -> bool:
        return c in self.ALPHA_NUM or c in self.LOWER_ALPHABET

    def _get_valid_key(self, key: str) -> str:
        """Validate the keyword and uppercase it."""
        if not key:
            raise EmptyKeyError()

        for position, c in enumerate(key):
            if not self._is_letter(c):
                raise InvalidKeyError("Invalid key", {"position": position})

        return key.upper()

    def _get_valid_open_text(self, text: str) -> str:
        """Keep alphabet letters only, uppercase."""
        result = "".join(c.upper() for c in text if self._is_letter(c))
        if not result:
            raise EmptyTextError("Empty open text")
        return result

    def _get_valid_cipher_text(self, text: str) -> str:
        """Require uppercase alphabet letters only."""
        if not text:
            raise EmptyTextError("Empty cipher text")

        for position, c in enumerate(text):
            if c not in self.ALPHA_NUM:
                raise InvalidCipherTextError(position)

        return text
