"""
simplejwt - Build, sign, parse and validate JSON Web Tokens.

HMAC signed tokens (HS256, HS384, HS512) with a fluent builder, a parser
with opt-in claim validation and a secret strength policy.

    from simplejwt import Build, Parse

    jwt = (
        Build()
        .set_secret("Str0ng!Secret123")
        .set_issuer("app")
        .set_expiration(int(time.time()) + 3600)
        .build()
    )
    Parse().validate(jwt).validate_expiration(jwt)
"""

from simplejwt.build import Build
from simplejwt.encoders import (
    Encoder,
    EncodeHS256,
    EncodeHS384,
    EncodeHS512,
    encoder_for,
)
from simplejwt.errors import (
    JWTError,
    BuildError,
    ValidateError,
    StructureError,
    DecodeError,
    SignatureInvalidError,
    ExpiredClaimError,
    NotBeforeError,
    MissingClaimError,
    InvalidClaimError,
    InvalidSecretError,
    InvalidAudienceError,
    AudienceMismatchError,
    AlgorithmError,
)
from simplejwt.jwt import Jwt
from simplejwt.parse import Parse
from simplejwt.parsed import Parsed
from simplejwt.secret import (
    SecretValidator,
    StrongSecret,
    SecretStrength,
    check_secret,
)
from simplejwt.settings import JWTSettings, get_settings
from simplejwt.tokens import (
    builder,
    parser,
    create_token,
    custom_payload,
    validate_token,
    get_header,
    get_payload,
    validate_expiration,
    validate_not_before,
)
from simplejwt.validator import ClaimValidator

__version__ = "0.1.0"

__all__ = [
    # Builder / parser
    "Build",
    "Parse",
    "Parsed",
    "Jwt",
    # Encoders
    "Encoder",
    "EncodeHS256",
    "EncodeHS384",
    "EncodeHS512",
    "encoder_for",
    # Validation
    "ClaimValidator",
    "SecretValidator",
    "StrongSecret",
    "SecretStrength",
    "check_secret",
    # Configuration
    "JWTSettings",
    "get_settings",
    # Helpers
    "builder",
    "parser",
    "create_token",
    "custom_payload",
    "validate_token",
    "get_header",
    "get_payload",
    "validate_expiration",
    "validate_not_before",
    # Errors
    "JWTError",
    "BuildError",
    "ValidateError",
    "StructureError",
    "DecodeError",
    "SignatureInvalidError",
    "ExpiredClaimError",
    "NotBeforeError",
    "MissingClaimError",
    "InvalidClaimError",
    "InvalidSecretError",
    "InvalidAudienceError",
    "AudienceMismatchError",
    "AlgorithmError",
]
