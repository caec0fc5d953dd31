"""
Token parsing and validation.

Splits a token into its three segments, decodes header and payload and
checks the signature and claims. Signature and claim checks raise a
``ValidateError`` subclass on failure. Expiration is only checked when
``validate_expiration`` is called.
"""

import hmac
import math
from typing import Any, Iterable

from simplejwt._logging import get_logger
from simplejwt.encoders import Encoder, encoder_for
from simplejwt.errors import (
    AlgorithmError,
    AudienceMismatchError,
    ExpiredClaimError,
    InvalidClaimError,
    InvalidSecretError,
    MissingClaimError,
    NotBeforeError,
    SignatureInvalidError,
    StructureError,
)
from simplejwt.jwt import Jwt
from simplejwt.parsed import Parsed
from simplejwt.secret import SecretValidator, StrongSecret
from simplejwt.settings import get_settings
from simplejwt.validator import ClaimValidator

logger = get_logger(__name__)


def _token_string(token: str | Jwt) -> str:
    if isinstance(token, Jwt):
        return token.get_token()
    return token


class Parse:
    """
    Parser for token strings or ``Jwt`` instances.

    Args:
        encoder: Pin verification to one algorithm. When omitted the
            algorithm named in the token header is used, restricted to the
            HMAC family.
        validator: Claim validator, holds the clock.
        secret_validator: Secret policy applied before verifying.
        leeway: Clock skew tolerance in seconds for exp and nbf checks.
    """

    def __init__(
        self,
        encoder: Encoder | None = None,
        validator: ClaimValidator | None = None,
        secret_validator: SecretValidator | None = None,
        leeway: int | None = None,
    ):
        settings = get_settings()
        self._encoder = encoder
        self._decoder = encoder or encoder_for(settings.algorithm)
        self._validator = validator or ClaimValidator()
        self._secret_validator = secret_validator or StrongSecret()
        self._leeway = settings.leeway if leeway is None else leeway

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def split(self, token: str | Jwt) -> tuple[str, str, str]:
        """
        Split a token into header, payload and signature segments.

        Raises:
            StructureError: Unless the token is exactly three non-empty
                segments.
        """
        token = _token_string(token)
        if not self._validator.structure(token):
            raise StructureError("Token is invalid.")
        header_b64, payload_b64, signature_b64 = token.split(".")
        return header_b64, payload_b64, signature_b64

    def decode_header(self, token: str | Jwt) -> dict[str, Any]:
        return self._decoder.decode(self.split(token)[0])

    def decode_payload(self, token: str | Jwt) -> dict[str, Any]:
        return self._decoder.decode(self.split(token)[1])

    def get_signature(self, token: str | Jwt) -> str:
        """Raw signature segment, compared as an opaque string."""
        return self.split(token)[2]

    # ------------------------------------------------------------------
    # Signature
    # ------------------------------------------------------------------

    def verify_signature(self, token: str | Jwt, secret: str) -> None:
        """
        Recompute the signature and compare it in constant time.

        Raises:
            StructureError: If the token is not three segments.
            DecodeError: If the header is not valid base64url JSON.
            InvalidSecretError: If the secret fails the strength policy.
            AlgorithmError: If the header algorithm is not accepted.
            SignatureInvalidError: If the signatures differ.
        """
        header_b64, payload_b64, signature_b64 = self.split(token)
        header = self._decoder.decode(header_b64)

        if not self._secret_validator.validate(secret):
            raise InvalidSecretError("Invalid secret.")

        encoder = self._signing_encoder(header.get("alg"))
        expected = encoder.sign(f"{header_b64}.{payload_b64}", secret)

        if not hmac.compare_digest(expected.encode("ascii"), signature_b64.encode("utf-8")):
            logger.warning("Signature mismatch for %s token", encoder.get_algorithm())
            raise SignatureInvalidError("Signature is invalid.")

    def _signing_encoder(self, algorithm: Any) -> Encoder:
        if self._encoder is not None:
            if algorithm != self._encoder.get_algorithm():
                raise AlgorithmError(
                    f"Algorithm claim is not valid: expected "
                    f"{self._encoder.get_algorithm()}, got {algorithm}"
                )
            return self._encoder
        if not self._validator.algorithm(algorithm):
            raise AlgorithmError(f"Algorithm claim is not valid: {algorithm}")
        return encoder_for(algorithm)

    def validate(self, jwt: Jwt) -> "Parse":
        """Check structure and signature of a Jwt against its own secret."""
        self.verify_signature(jwt, jwt.get_secret())
        return self

    # ------------------------------------------------------------------
    # Claims
    # ------------------------------------------------------------------

    def validate_expiration(self, token: str | Jwt) -> "Parse":
        """
        Raises:
            MissingClaimError: If there is no exp claim.
            InvalidClaimError: If exp is not a NumericDate.
            ExpiredClaimError: If the token has expired.
        """
        payload = self.decode_payload(token)
        if "exp" not in payload:
            raise MissingClaimError("Expiration claim is not set.")
        exp = self._numeric_date(payload["exp"], "Expiration")
        if not self._validator.expiration(exp, self._leeway):
            raise ExpiredClaimError("Expiration claim has expired.")
        return self

    def validate_not_before(self, token: str | Jwt) -> "Parse":
        """
        Raises:
            MissingClaimError: If there is no nbf claim.
            InvalidClaimError: If nbf is not a NumericDate.
            NotBeforeError: If the token may not be used yet.
        """
        payload = self.decode_payload(token)
        if "nbf" not in payload:
            raise MissingClaimError("Not Before claim is not set.")
        nbf = self._numeric_date(payload["nbf"], "Not Before")
        if not self._validator.not_before(nbf, self._leeway):
            raise NotBeforeError("Not Before claim has not elapsed.")
        return self

    def _numeric_date(self, value: Any, name: str) -> int:
        # Rounding up keeps "exp > now" and "nbf <= now" exact for whole-second clocks
        if not self._validator.numeric_date(value):
            raise InvalidClaimError(f"{name} claim is not a valid NumericDate.")
        return math.ceil(value)

    def validate_audience(self, token: str | Jwt, expected: str) -> "Parse":
        """
        Raises:
            MissingClaimError: If there is no aud claim.
            AudienceMismatchError: If expected is not in the aud claim.
        """
        payload = self.decode_payload(token)
        if "aud" not in payload:
            raise MissingClaimError("Audience claim is not set.")
        if not self._validator.audience_contains(payload["aud"], expected):
            raise AudienceMismatchError(
                "Audience claim does not contain provided StringOrURI."
            )
        return self

    def validate_algorithm(
        self,
        token: str | Jwt,
        allowed: Iterable[str] | None = None,
    ) -> "Parse":
        """
        Raises:
            AlgorithmError: If the alg header is missing or not allowed.
        """
        algorithm = self.decode_header(token).get("alg")
        if not self._validator.algorithm(algorithm, allowed):
            raise AlgorithmError(f"Algorithm claim is not valid: {algorithm}")
        return self

    def parse(self, token: str | Jwt) -> Parsed:
        """Decode a token into a Parsed view. Does not verify it."""
        header_b64, payload_b64, signature_b64 = self.split(token)
        return Parsed(
            token=_token_string(token),
            header=self._decoder.decode(header_b64),
            payload=self._decoder.decode(payload_b64),
            signature=signature_b64,
            clock=self._validator.now,
        )
