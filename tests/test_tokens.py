"""Tests for simplejwt one-call token helpers."""

import time

import pytest

from simplejwt.build import Build
from simplejwt.encoders import EncodeHS256, b64url_encode
from simplejwt.errors import ExpiredClaimError, InvalidAudienceError, InvalidSecretError
from simplejwt.parse import Parse
from simplejwt.tokens import (
    builder,
    create_token,
    custom_payload,
    get_header,
    get_payload,
    parser,
    validate_expiration,
    validate_not_before,
    validate_token,
)
from simplejwt.validator import ClaimValidator


class TestCreateToken:
    """Tests for create_token()."""

    def test_basic_create(self, secret):
        expiration = int(time.time()) + 3600
        token = create_token(42, secret, expiration, "app")
        payload = get_payload(token)
        assert payload["uid"] == 42
        assert payload["exp"] == expiration
        assert payload["iss"] == "app"
        assert abs(payload["iat"] - int(time.time())) <= 2

    def test_weak_secret(self):
        with pytest.raises(InvalidSecretError):
            create_token(1, "weak", int(time.time()) + 3600, "app")

    def test_past_expiration(self, secret):
        with pytest.raises(ExpiredClaimError):
            create_token(1, secret, int(time.time()) - 10, "app")


class TestCustomPayload:
    """Tests for custom_payload()."""

    def test_claims_passed_through(self, secret):
        expiration = int(time.time()) + 3600
        token = custom_payload(
            {"sub": "user-42", "role": "admin", "exp": expiration, "aud": ["a.com"]},
            secret,
        )
        payload = get_payload(token)
        assert payload["sub"] == "user-42"
        assert payload["role"] == "admin"
        assert payload["exp"] == expiration
        assert payload["aud"] == ["a.com"]

    def test_auto_adds_iat(self, secret):
        payload = get_payload(custom_payload({"sub": "x"}, secret))
        assert abs(payload["iat"] - int(time.time())) <= 2

    def test_preserves_existing_iat(self, secret):
        payload = get_payload(custom_payload({"iat": 12345}, secret))
        assert payload["iat"] == 12345

    def test_expired(self, secret):
        with pytest.raises(ExpiredClaimError):
            custom_payload({"exp": int(time.time()) - 1}, secret)

    def test_invalid_audience(self, secret):
        with pytest.raises(InvalidAudienceError):
            custom_payload({"aud": 42}, secret)


class TestValidateToken:
    """Tests for validate_token()."""

    def test_valid(self, secret):
        token = create_token(1, secret, int(time.time()) + 3600, "app")
        assert validate_token(token, secret) is True
        assert validate_token(token, secret, check_expiration=True) is True

    def test_wrong_secret(self, secret):
        token = create_token(1, secret, int(time.time()) + 3600, "app")
        assert validate_token(token, "Different!Secret99") is False

    def test_malformed(self, secret):
        assert validate_token("not.a.valid.token.at.all", secret) is False
        assert validate_token("only-one-part", secret) is False
        assert validate_token("@@@.@@@.@@@", secret) is False

    def test_expiration_opt_in(self, secret):
        """An expired token still has a valid signature."""
        past = 1_700_000_000
        jwt = (
            Build(validator=ClaimValidator(clock=lambda: past - 10))
            .set_secret(secret)
            .set_expiration(past)
            .build()
        )
        assert validate_token(jwt.get_token(), secret) is True
        assert validate_token(jwt.get_token(), secret, check_expiration=True) is False

    def test_no_exp_with_expiration_check(self, secret):
        token = custom_payload({"sub": "x"}, secret)
        assert validate_token(token, secret, check_expiration=True) is False

    def test_deeply_nested_segments(self, secret):
        """Pathologically nested JSON is reported as invalid."""
        header = "eyJhbGciOiJIUzI1NiJ9"
        nested = b64url_encode(b'{"a":' + b"[" * 200_000 + b"]" * 200_000 + b"}")
        signed = f"{header}.{nested}"
        token = f"{signed}.{EncodeHS256().sign(signed, secret)}"
        assert validate_token(token, secret, check_expiration=True) is False

        bad_header = f"{nested}.{header}"
        token = f"{bad_header}.{EncodeHS256().sign(bad_header, secret)}"
        assert validate_token(token, secret) is False


class TestClaimHelpers:
    """Tests for get_header(), validate_expiration(), validate_not_before()."""

    def test_get_header(self, secret):
        token = create_token(1, secret, int(time.time()) + 3600, "app")
        assert get_header(token) == {"alg": "HS256", "typ": "JWT"}

    def test_validate_expiration(self, secret):
        token = create_token(1, secret, int(time.time()) + 3600, "app")
        assert validate_expiration(token) is True
        assert validate_expiration(custom_payload({"sub": "x"}, secret)) is False

    def test_validate_not_before(self, secret):
        now = int(time.time())
        assert validate_not_before(custom_payload({"nbf": now - 10}, secret)) is True
        assert validate_not_before(custom_payload({"nbf": now + 3600}, secret)) is False
        assert validate_not_before(custom_payload({"sub": "x"}, secret)) is False

    def test_deeply_nested_payload(self):
        nested = b64url_encode(b'{"a":' + b"[" * 200_000 + b"]" * 200_000 + b"}")
        token = f"eyJhbGciOiJIUzI1NiJ9.{nested}.c2ln"
        assert validate_expiration(token) is False
        assert validate_not_before(token) is False

    def test_numeric_date_helpers(self, secret):
        """Fractional exp and nbf are NumericDates, strings are not."""
        now = time.time()

        def token(key, value):
            return Build().set_secret(secret).set_payload_claim(key, value).build().get_token()

        assert validate_expiration(token("exp", now + 3600.5)) is True
        assert validate_expiration(token("exp", now - 10.5)) is False
        assert validate_expiration(token("exp", str(int(now) + 3600))) is False
        assert validate_not_before(token("nbf", now - 10.5)) is True
        assert validate_not_before(token("nbf", "yesterday")) is False

    def test_factories(self):
        assert isinstance(builder(), Build)
        assert isinstance(parser(), Parse)
        assert builder() is not builder()
