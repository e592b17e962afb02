"""
Tests for the cipher engine registry.
"""
import pytest

from cipher_service.core.exceptions import EngineNotFoundError, InvalidKeyError
from cipher_service.models.schemas import CipherFamily, CipherType
from cipher_service.services.engines.polyalphabetic import ModAlphaCipher
from cipher_service.services.engines.registry import EngineRegistry
from cipher_service.services.engines.transposition import TableRouteCipher


class TestCipherRegistry:
    """Test the cipher registry."""

    @pytest.fixture
    def registry(self):
        return EngineRegistry()

    def test_all_ciphers_registered(self):
        """Verify all expected ciphers are registered."""
        registered = EngineRegistry.list_registered()

        for cipher_type in CipherType:
            assert cipher_type in registered, f"{cipher_type} not registered"
            assert EngineRegistry.is_registered(cipher_type)

    def test_get_engine_classes_by_family(self, registry):
        """Test getting engine classes by cipher family."""
        poly = registry.get_engine_classes_by_family(CipherFamily.POLYALPHABETIC)
        trans = registry.get_engine_classes_by_family(CipherFamily.TRANSPOSITION)

        assert poly == [ModAlphaCipher]
        assert trans == [TableRouteCipher]

    def test_build_table_route(self, registry):
        engine = registry.build(CipherType.TABLE_ROUTE, "3")

        assert isinstance(engine, TableRouteCipher)
        assert engine.encrypt("HELLO") == "LOELH"

    def test_build_mod_alpha(self, registry):
        engine = registry.build(CipherType.MOD_ALPHA, "Б")

        assert isinstance(engine, ModAlphaCipher)
        assert engine.encrypt("А") == "Б"

    def test_build_rejects_invalid_key(self, registry):
        with pytest.raises(InvalidKeyError):
            registry.build(CipherType.TABLE_ROUTE, "three")

    def test_unregistered_type(self, registry, monkeypatch):
        """Lookups of unregistered types raise EngineNotFoundError."""
        monkeypatch.setattr(EngineRegistry, "_engines", {})

        with pytest.raises(EngineNotFoundError):
            registry.build(CipherType.TABLE_ROUTE, 3)
