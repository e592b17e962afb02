"""Transposition cipher engines."""

from cipher_service.services.engines.transposition.table_route import TableRouteCipher

__all__ = [
    "TableRouteCipher",
]
