import logging
import string
from typing import ClassVar

from cipher_service.core.exceptions import (
    EmptyTextError,
    InvalidKeyError,
    NoLettersError,
    TextTooShortError,
)
from cipher_service.models.schemas import CipherFamily, CipherType
from cipher_service.services.engines.base import CipherEngine
from cipher_service.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@EngineRegistry.register
class TableRouteCipher(CipherEngine):
    """
    Table route transposition cipher.

    The text is written into a table row by row, left to right, then read
    out column by column starting from the rightmost column, each column
    from the bottom row up. Cells left empty in a partial last row are
    skipped.

    Example with 3 columns and "HELLO":

            0 1 2
            ─────
            H E L
            L O .

    Read: col 2 -> L, col 1 -> OE, col 0 -> LH, giving "LOELH".
    """

    name = "Table Route Cipher"
    cipher_type = CipherType.TABLE_ROUTE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where the text is written into a table "
        "by rows and read out by columns from right to left, bottom to top. "
        "The key is the number of columns."
    )

    LETTERS: ClassVar[str] = string.ascii_letters

    def __init__(self, columns: int):
        self._columns = self._get_valid_key(columns)
        logger.debug("Table route cipher created with %d columns", self._columns)

    @classmethod
    def from_key(cls, key: int | str) -> "TableRouteCipher":
        """Build from a column count given as an int or a decimal string."""
        if isinstance(key, str):
            key_str = key.strip()
            if not (key_str.isascii() and key_str.isdigit()):
                raise InvalidKeyError(
                    "Key must be an integer number of columns",
                    {"key": key},
                )
            key = int(key_str)
        return cls(key)

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def key_value(self) -> int:
        return self._columns

    def encrypt(self, plaintext: str) -> str:
        """Write rows left to right, read columns right to left, bottom to top."""
        text = self._get_valid_text(plaintext)
        rows = self._rows_for(len(text))

        table = [
            list(text[r * self._columns:(r + 1) * self._columns])
            for r in range(rows)
        ]

        result = []
        for col in range(self._columns - 1, -1, -1):
            for row in range(rows - 1, -1, -1):
                if col < len(table[row]):
                    result.append(table[row][col])

        return "".join(result)

    def decrypt(self, ciphertext: str) -> str:
        """Write columns right to left, bottom to top, then read rows left to right."""
        text = self._get_valid_text(ciphertext)
        length = len(text)
        rows = self._rows_for(length)

        # Only the first `length` cells in row order hold characters
        filled = [
            [r * self._columns + c < length for c in range(self._columns)]
            for r in range(rows)
        ]
        table = [[""] * self._columns for _ in range(rows)]

        chars = iter(text)
        for col in range(self._columns - 1, -1, -1):
            for row in range(rows - 1, -1, -1):
                if filled[row][col]:
                    table[row][col] = next(chars)

        return "".join(
            table[row][col]
            for row in range(rows)
            for col in range(self._columns)
            if filled[row][col]
        )

    def explain(self) -> str:
        """Generate human-readable explanation."""
        return (
            f"Table route cipher with {self._columns} columns. "
            f"The text is written into the table row by row, left to right, "
            f"and read column by column from right to left, each column "
            f"from the bottom row to the top."
        )

    def _rows_for(self, length: int) -> int:
        """Number of table rows for a normalized text of the given length."""
        if length <= self._columns:
            raise TextTooShortError(length, self._columns)
        return (length + self._columns - 1) // self._columns

    @staticmethod
    def _get_valid_key(columns: int) -> int:
        """Validate the column count."""
        if isinstance(columns, bool) or not isinstance(columns, int):
            raise InvalidKeyError(
                "Key must be an integer number of columns",
                {"key": repr(columns)},
            )
        if columns <= 0:
            raise InvalidKeyError("Key must be positive", {"key": columns})
        return columns

    def _get_valid_text(self, text: str) -> str:
        """Keep letters only, uppercase."""
        if not text:
            raise EmptyTextError("Text is empty")

        result = "".join(c.upper() for c in text if c in self.LETTERS)
        if not result:
            raise NoLettersError()
        return result
