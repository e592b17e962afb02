"""Tests for the cipher HTTP API."""

import pytest
from fastapi.testclient import TestClient

from cipher_service.core.config import get_settings
from cipher_service.main import create_app


class TestCipherApi:
    """Test suite for the /encrypt, /decrypt and /ciphers endpoints."""

    @pytest.fixture
    def client(self):
        with TestClient(create_app()) as client:
            yield client

    @pytest.fixture
    def prefix(self):
        return get_settings().api_v1_prefix

    def test_list_ciphers(self, client, prefix):
        response = client.get(f"{prefix}/ciphers")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert {item["cipher_type"] for item in body["items"]} == {"table_route", "mod_alpha"}

    def test_encrypt_table_route(self, client, prefix):
        response = client.post(
            f"{prefix}/encrypt",
            json={"cipher_type": "table_route", "key": 3, "text": "hello"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["result"] == "LOELH"
        assert body["key_used"] == 3
        assert "3 columns" in body["explanation"]

    def test_decrypt_table_route_string_key(self, client, prefix):
        response = client.post(
            f"{prefix}/decrypt",
            json={"cipher_type": "table_route", "key": "3", "text": "LOELH"},
        )

        assert response.status_code == 200
        assert response.json()["result"] == "HELLO"

    def test_mod_alpha_roundtrip(self, client, prefix):
        encrypted = client.post(
            f"{prefix}/encrypt",
            json={"cipher_type": "mod_alpha", "key": "бв", "text": "Привет!"},
        )
        assert encrypted.status_code == 200
        assert encrypted.json()["result"] == "РТЙДЁФ"
        assert encrypted.json()["key_used"] == "БВ"

        decrypted = client.post(
            f"{prefix}/decrypt",
            json={"cipher_type": "mod_alpha", "key": "бв", "text": "РТЙДЁФ"},
        )
        assert decrypted.status_code == 200
        assert decrypted.json()["result"] == "ПРИВЕТ"

    @pytest.mark.parametrize(
        ("path", "payload", "kind"),
        [
            ("encrypt", {"cipher_type": "table_route", "key": 0, "text": "HELLO"}, "invalid_key"),
            ("encrypt", {"cipher_type": "table_route", "key": 5, "text": "WORLD"}, "text_too_short"),
            ("encrypt", {"cipher_type": "table_route", "key": 3, "text": "12345"}, "no_letters"),
            ("decrypt", {"cipher_type": "table_route", "key": 3, "text": ""}, "empty_text"),
            ("encrypt", {"cipher_type": "mod_alpha", "key": "", "text": "А"}, "empty_key"),
            ("encrypt", {"cipher_type": "mod_alpha", "key": "ААА", "text": "А"}, "weak_key"),
            ("encrypt", {"cipher_type": "mod_alpha", "key": 7, "text": "А"}, "invalid_key"),
            ("decrypt", {"cipher_type": "mod_alpha", "key": "БВ", "text": "ртй"}, "invalid_cipher_text"),
        ],
    )
    def test_cipher_errors(self, client, prefix, path, payload, kind):
        """Cipher errors are reported as 400 with their kind."""
        response = client.post(f"{prefix}/{path}", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == kind

    def test_unknown_cipher_type(self, client, prefix):
        response = client.post(
            f"{prefix}/encrypt",
            json={"cipher_type": "caesar", "key": 3, "text": "HELLO"},
        )

        assert response.status_code == 422

    def test_text_too_long(self, client, prefix, monkeypatch):
        monkeypatch.setattr(get_settings(), "max_text_length", 4)

        response = client.post(
            f"{prefix}/encrypt",
            json={"cipher_type": "table_route", "key": 3, "text": "HELLO"},
        )

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "text_too_long"
        assert "maximum length" in detail["message"]
        assert detail["details"] == {"length": 5, "max_length": 4}

    def test_debug_setting_applied(self, monkeypatch):
        """The debug flag from settings is passed to the application."""
        monkeypatch.setattr(get_settings(), "debug", True)

        assert create_app().debug is True
