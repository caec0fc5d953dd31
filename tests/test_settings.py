"""Tests for simplejwt settings."""

import pytest
from pydantic import ValidationError

from simplejwt.build import Build
from simplejwt.parse import Parse
from simplejwt.settings import JWTSettings, get_settings
from simplejwt.validator import ClaimValidator


class TestSettings:
    """Tests for JWTSettings and get_settings()."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.token_type == "JWT"
        assert settings.algorithm == "HS256"
        assert settings.secret_min_length == 12
        assert settings.leeway == 0

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("SIMPLEJWT_TOKEN_TYPE", "at+jwt")
        monkeypatch.setenv("SIMPLEJWT_ALGORITHM", "hs512")
        monkeypatch.setenv("SIMPLEJWT_LEEWAY", "30")
        get_settings.cache_clear()

        settings = get_settings()
        assert settings.token_type == "at+jwt"
        assert settings.algorithm == "HS512"
        assert settings.leeway == 30

    def test_builder_uses_settings(self, monkeypatch):
        monkeypatch.setenv("SIMPLEJWT_ALGORITHM", "HS384")
        monkeypatch.setenv("SIMPLEJWT_TOKEN_TYPE", "at+jwt")
        get_settings.cache_clear()
        assert Build().get_header() == {"alg": "HS384", "typ": "at+jwt"}

    def test_parser_uses_leeway(self, monkeypatch, secret):
        now = 1_700_000_000
        jwt = (
            Build(validator=ClaimValidator(clock=lambda: now))
            .set_secret(secret)
            .set_expiration(now + 1)
            .build()
        )
        monkeypatch.setenv("SIMPLEJWT_LEEWAY", "30")
        get_settings.cache_clear()
        Parse(validator=ClaimValidator(clock=lambda: now + 20)).validate_expiration(jwt)

    @pytest.mark.parametrize("algorithm", ["none", "RS256", "ES256"])
    def test_rejects_non_hmac_algorithm(self, algorithm):
        with pytest.raises(ValidationError, match="Unsupported algorithm"):
            JWTSettings(algorithm=algorithm)

    def test_rejects_negative_values(self):
        with pytest.raises(ValidationError):
            JWTSettings(leeway=-1)
        with pytest.raises(ValidationError):
            JWTSettings(secret_min_length=0)
