"""Polyalphabetic cipher engines."""

from cipher_service.services.engines.polyalphabetic.mod_alpha import ModAlphaCipher

__all__ = [
    "ModAlphaCipher",
]
