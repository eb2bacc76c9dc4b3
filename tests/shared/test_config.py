"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Protus API"
        assert settings.debug is False
        assert settings.port == 4001
        assert settings.host == "0.0.0.0"
        assert settings.frontend_url == "http://localhost:3000"
        assert settings.data_store == "supabase"
        assert settings.otp_ttl_minutes == 5
        assert settings.session_ttl_days == 30

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000", "DATA_STORE": "memory"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.data_store == "memory"

    def test_rejects_unknown_data_store(self):
        """DATA_STORE must name a known backend."""
        with patch.dict(os.environ, {"DATA_STORE": "dynamo"}):
            with pytest.raises(Exception):
                Settings(_env_file=None)

    def test_loads_google_config_from_env(self):
        with patch.dict(os.environ, {
            "GOOGLE_CLIENT_ID": "client-id",
            "GOOGLE_CLIENT_SECRET": "client-secret",
            "GOOGLE_REDIRECT_URI": "https://api.example.com/auth/google/callback",
        }):
            settings = Settings(_env_file=None)
            assert settings.google_client_id == "client-id"
            assert settings.google_client_secret == "client-secret"
            assert settings.google_redirect_uri == "https://api.example.com/auth/google/callback"


class TestGoogleConfigured:
    def test_requires_both_credentials(self):
        """Google login needs both the client id and the secret."""
        assert Settings(_env_file=None, google_client_id="id", google_client_secret="secret").google_configured
        assert not Settings(_env_file=None, google_client_id="id").google_configured
        assert not Settings(_env_file=None, google_client_secret="secret").google_configured


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance on repeated calls."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
