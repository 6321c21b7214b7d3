"""
Tests for settings loading.
"""

import pytest
from pydantic import ValidationError


class TestSettings:
    """Tests for achilles_auth.config.Settings."""

    def test_defaults(self, test_settings):
        assert test_settings.port == 5001
        assert test_settings.jwt_algorithm == "HS256"
        assert test_settings.jwt_access_token_expire_minutes == 30
        assert test_settings.otp_length == 6
        assert test_settings.otp_expire_minutes == 5
        assert test_settings.email_host is None

    def test_reads_environment(self, monkeypatch):
        from achilles_auth.config import Settings
        
        monkeypatch.setenv("DATABASE_URL", "mongodb://db:27017")
        monkeypatch.setenv("JWT_SECRET", "from-env")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("EMAIL_HOST", "smtp.example.com")
        monkeypatch.setenv("EMAIL_PORT", "465")
        
        settings = Settings(_env_file=None)
        
        assert settings.database_url == "mongodb://db:27017"
        assert settings.jwt_secret == "from-env"
        assert settings.port == 8080
        assert settings.email_host == "smtp.example.com"
        assert settings.email_port == 465

    @pytest.mark.parametrize("missing", ["DATABASE_URL", "JWT_SECRET"])
    def test_missing_required_setting_fails(self, monkeypatch, missing):
        """Store URL and signing secret are fatal at startup when absent."""
        from achilles_auth.config import Settings
        
        monkeypatch.setenv("DATABASE_URL", "mongodb://db:27017")
        monkeypatch.setenv("JWT_SECRET", "from-env")
        monkeypatch.delenv(missing)
        
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_mail_sender_falls_back_to_user(self, test_settings):
        settings = test_settings.model_copy(update={"email_user": "bot@example.com"})
        
        assert settings.mail_sender == "bot@example.com"
        
        settings = settings.model_copy(update={"email_from": "noreply@example.com"})
        
        assert settings.mail_sender == "noreply@example.com"
