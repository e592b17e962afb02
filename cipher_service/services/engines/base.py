from abc import ABC, abstractmethod

from cipher_service.models.schemas import CipherFamily, CipherType


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine is constructed once per key and validates the key in its
    constructor. Each cipher implementation must provide:
    - from_key(): Build an engine from a raw key value
    - encrypt(): Encrypt plaintext
    - decrypt(): Decrypt ciphertext
    - explain(): Generate human-readable explanation

    Engines never mutate their state after construction, so a single
    instance can be shared between callers.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    @classmethod
    @abstractmethod
    def from_key(cls, key: int | str) -> "CipherEngine":
        """
        Build an engine from a raw key.

        Args:
            key: The key as received from the caller

        Returns:
            Engine instance bound to the validated key

        Raises:
            CipherError: If the key cannot be parsed or fails validation
        """
        pass

    @property
    @abstractmethod
    def key_value(self) -> int | str:
        """The validated key in its canonical form."""
        pass

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext with the engine's key.

        Args:
            plaintext: The plaintext to encrypt

        Returns:
            Ciphertext

        Raises:
            CipherError: If the plaintext fails validation
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext with the engine's key.

        Args:
            ciphertext: The ciphertext to decrypt

        Returns:
            Plaintext

        Raises:
            CipherError: If the ciphertext fails validation
        """
        pass

    @abstractmethod
    def explain(self) -> str:
        """
        Generate human-readable explanation of the keyed transform.

        Returns:
            Explanation string
        """
        pass
