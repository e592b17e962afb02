import logging
from typing import Type

from cipher_service.core.exceptions import EngineNotFoundError
from cipher_service.models.schemas import CipherFamily, CipherType
from cipher_service.services.engines.base import CipherEngine

logger = logging.getLogger(__name__)


class EngineRegistry:
    """
    Registry for cipher engines.

    Maps cipher types to engine classes and builds keyed engine instances.
    Engines are bound to a key at construction, so the registry hands out
    new instances rather than caching them.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class TableRouteCipher(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType) -> Type[CipherEngine]:
        """
        Get the engine class for the specified cipher type.

        Raises:
            EngineNotFoundError: If no engine is registered for the type
        """
        if cipher_type not in self._engines:
            raise EngineNotFoundError(str(cipher_type))
        return self._engines[cipher_type]

    def build(self, cipher_type: CipherType, key: int | str) -> CipherEngine:
        """
        Build an engine instance bound to a key.

        Args:
            cipher_type: The type of cipher
            key: Raw key value, parsed by the engine

        Returns:
            Engine instance

        Raises:
            EngineNotFoundError: If no engine is registered for the type
            CipherError: If the key is rejected by the engine
        """
        engine_class = self.get_engine_class(cipher_type)
        logger.debug("Building %s engine", cipher_type.value)
        return engine_class.from_key(key)

    def get_engine_classes_by_family(self, family: CipherFamily) -> list[Type[CipherEngine]]:
        """Get all engine classes belonging to a cipher family."""
        return [
            engine_class
            for engine_class in self._engines.values()
            if engine_class.cipher_family == family
        ]

    def get_all_engine_classes(self) -> list[Type[CipherEngine]]:
        """Get all registered engine classes."""
        return list(self._engines.values())

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cipher_service.services.engines.polyalphabetic import mod_alpha  # noqa: F401
    from cipher_service.services.engines.transposition import table_route  # noqa: F401


# Load engines when module is imported
_load_engines()
