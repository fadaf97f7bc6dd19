"""
Books API: Configuration and Startup Tests
============================================

What:  Settings parsing, credential validation, store initialization and the
       lifespan handler.
"""

from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from books_api import database
from books_api.config import Settings
from books_api.exceptions import StoreUnavailableError


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("FIREBASE_CREDENTIALS", raising=False)
        monkeypatch.delenv("BOOKS_COLLECTION", raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3001
        assert settings.books_collection == "Books"
        assert settings.firebase_credentials == "./serviceAccountKey.json"
        assert settings.cors_origins_list == ["*"]

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).port == 8080

    def test_invalid_port_rejected(self, monkeypatch):
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_cors_origins_split(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        assert Settings(_env_file=None).cors_origins_list == ["http://a.test", "http://b.test"]

    def test_validate_credentials_missing_file(self, tmp_path):
        settings = Settings(_env_file=None, firebase_credentials=str(tmp_path / "missing.json"))
        with pytest.raises(ValueError, match="FIREBASE_CREDENTIALS"):
            settings.validate_credentials()

    def test_validate_credentials_existing_file(self, tmp_path):
        key_file = tmp_path / "sa.json"
        key_file.write_text("{}")
        Settings(_env_file=None, firebase_credentials=str(key_file)).validate_credentials()


class TestStoreLifecycle:

    def test_get_store_before_init_raises(self, monkeypatch):
        monkeypatch.setattr(database, "_store", None)
        with pytest.raises(StoreUnavailableError):
            database.get_store()

    def test_init_store_is_created_once(self, monkeypatch):
        monkeypatch.setattr(database, "_store", None)
        fake_store = MagicMock()

        with patch.object(
            database.FirestoreStore, "from_service_account", return_value=fake_store
        ) as factory:
            first = database.init_store()
            second = database.init_store()

        factory.assert_called_once()
        assert first is second is fake_store
        assert database.get_store() is fake_store


class TestLifespan:

    @pytest.mark.asyncio
    async def test_missing_credentials_keeps_server_up(self, monkeypatch):
        from books_api.main import app, lifespan

        monkeypatch.setattr(database, "_store", None)

        with patch("books_api.main.setup_logging"), \
                patch("books_api.main.init_store") as init:
            async with lifespan(app):
                pass

        # ./does-not-exist/serviceAccountKey.json (conftest) fails validation
        init.assert_not_called()

    @pytest.mark.asyncio
    async def test_valid_credentials_initialize_store(self, monkeypatch, tmp_path):
        from books_api.main import app, lifespan, settings

        key_file = tmp_path / "sa.json"
        key_file.write_text("{}")
        monkeypatch.setattr(settings, "firebase_credentials", str(key_file))

        with patch("books_api.main.setup_logging"), \
                patch("books_api.main.init_store") as init:
            async with lifespan(app):
                pass

        init.assert_called_once_with()
