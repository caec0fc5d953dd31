"""
Fluent JSON Web Token builder.

Helper setters cover the registered claims of RFC 7519, e.g. ``set_issuer``
sets the "iss" payload claim. Every setter returns the builder so calls
can be chained:

    jwt = (
        Build()
        .set_secret("Str0ng!Secret123")
        .set_issuer("app")
        .set_expiration(int(time.time()) + 3600)
        .build()
    )

https://tools.ietf.org/html/rfc7519
"""

from typing import Any

from simplejwt._logging import get_logger, mask_claims
from simplejwt.encoders import Encoder, encoder_for
from simplejwt.errors import (
    ExpiredClaimError,
    InvalidAudienceError,
    InvalidSecretError,
)
from simplejwt.jwt import Jwt
from simplejwt.secret import SecretValidator, StrongSecret
from simplejwt.settings import get_settings
from simplejwt.validator import ClaimValidator

logger = get_logger(__name__)


class Build:
    """
    Accumulates header and payload claims and signs them into a Jwt.

    A builder holds mutable state; use one per token, or call ``reset``
    between tokens. Do not share an instance between threads.

    Args:
        token_type: Value of the "typ" header claim.
        validator: Claim validator used for expiration and audience checks.
        secret_validator: Secret strength policy.
        encoder: Encoder which decides the signing algorithm.
    """

    def __init__(
        self,
        token_type: str | None = None,
        validator: ClaimValidator | None = None,
        secret_validator: SecretValidator | None = None,
        encoder: Encoder | None = None,
    ):
        settings = get_settings()
        self._type = token_type if token_type is not None else settings.token_type
        self._validator = validator or ClaimValidator()
        self._secret_validator = secret_validator or StrongSecret()
        self._encoder = encoder or encoder_for(settings.algorithm)
        self._header: dict[str, Any] = {}
        self._payload: dict[str, Any] = {}
        self._secret = ""

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def set_content_type(self, content_type: str) -> "Build":
        """Set the "cty" header claim, e.g. "JWT" for a nested token."""
        self._header["cty"] = content_type
        return self

    def set_header_claim(self, key: str, value: Any) -> "Build":
        self._header[key] = value
        return self

    def get_header(self) -> dict[str, Any]:
        """
        Header claims with "alg" and "typ" applied.

        The computed "alg" and "typ" always replace custom values set for
        those keys.
        """
        header = dict(self._header)
        header["alg"] = self._encoder.get_algorithm()
        header["typ"] = self._type
        return header

    # ------------------------------------------------------------------
    # Secret
    # ------------------------------------------------------------------

    def set_secret(self, secret: str) -> "Build":
        """
        Set the signing secret.

        Raises:
            InvalidSecretError: If the secret fails the strength policy.
        """
        if not self._secret_validator.validate(secret):
            raise InvalidSecretError("Invalid secret.")
        self._secret = secret
        return self

    # ------------------------------------------------------------------
    # Payload
    # ------------------------------------------------------------------

    def set_issuer(self, issuer: str) -> "Build":
        """Who issued the token, a string or URI."""
        self._payload["iss"] = issuer
        return self

    def set_subject(self, subject: str) -> "Build":
        """Who the token is for, e.g. a user id."""
        self._payload["sub"] = subject
        return self

    def set_audience(self, audience: str | list[str]) -> "Build":
        """
        Set the principals expected to process the token.

        Raises:
            InvalidAudienceError: If audience is not a string or a sequence
                of strings.
        """
        if not self._validator.audience(audience):
            raise InvalidAudienceError("Invalid Audience claim.")
        self._payload["aud"] = audience if isinstance(audience, str) else list(audience)
        return self

    def set_expiration(self, timestamp: int) -> "Build":
        """
        Set the time after which the token must be rejected.

        Raises:
            ExpiredClaimError: If the timestamp is not an integer or is not
                in the future.
        """
        if not self._validator.timestamp(timestamp):
            raise ExpiredClaimError("Expiration claim is not a valid timestamp.")
        if not self._validator.expiration(timestamp):
            raise ExpiredClaimError("Expiration claim has expired.")
        self._payload["exp"] = timestamp
        return self

    def set_not_before(self, not_before: int) -> "Build":
        self._payload["nbf"] = not_before
        return self

    def set_issued_at(self, issued_at: int) -> "Build":
        self._payload["iat"] = issued_at
        return self

    def set_jwt_id(self, jwt_id: str) -> "Build":
        self._payload["jti"] = jwt_id
        return self

    def set_payload_claim(self, key: str, value: Any) -> "Build":
        """Set a private claim, e.g. a user id or role."""
        self._payload[key] = value
        return self

    def get_payload(self) -> dict[str, Any]:
        return dict(self._payload)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def build(self) -> Jwt:
        """
        Encode header and payload, sign them and return the token.

        Builder state is not modified, a failed build can be retried after
        fixing the offending input.

        Raises:
            InvalidSecretError: If no valid secret has been set.
            BuildError: If a claim value is not JSON serializable.
        """
        if not self._secret or not self._secret_validator.validate(self._secret):
            raise InvalidSecretError("Invalid secret.")

        header = self.get_header()
        payload = self.get_payload()
        header_b64 = self._encoder.encode(header)
        payload_b64 = self._encoder.encode(payload)
        signature = self._encoder.sign(f"{header_b64}.{payload_b64}", self._secret)

        logger.debug(
            "Built %s token with claims %s",
            header["alg"],
            mask_claims(payload),
        )
        return Jwt(f"{header_b64}.{payload_b64}.{signature}", self._secret)

    def reset(self) -> "Build":
        """Clear header, payload and secret so the builder can be reused."""
        self._header = {}
        self._payload = {}
        self._secret = ""
        return self
