"""
One-call token helpers.

Thin functions over ``Build`` and ``Parse`` for the common cases: create a
token for a user id, create one from a dict of claims, validate a token.
Defaults (algorithm, token type, leeway) come from ``get_settings()``.
"""

import time
from typing import Any, Mapping

from simplejwt.build import Build
from simplejwt.errors import JWTError
from simplejwt.parse import Parse


def builder() -> Build:
    """New builder with configured defaults."""
    return Build()


def parser() -> Parse:
    """New parser with configured defaults."""
    return Parse()


def create_token(
    user_id: Any,
    secret: str,
    expiration: int,
    issuer: str,
) -> str:
    """
    Create a token for a user.

    The payload holds "iat" (now), "uid", "exp" and "iss".

    Raises:
        InvalidSecretError: If the secret fails the strength policy.
        ExpiredClaimError: If expiration is not in the future.
    """
    return (
        builder()
        .set_secret(secret)
        .set_issued_at(int(time.time()))
        .set_payload_claim("uid", user_id)
        .set_expiration(expiration)
        .set_issuer(issuer)
        .build()
        .get_token()
    )


def custom_payload(payload: Mapping[str, Any], secret: str) -> str:
    """
    Create a token from a dict of claims.

    "exp" and "aud" are validated as in the builder; "iat" is added when
    not present.

    Raises:
        InvalidSecretError: If the secret fails the strength policy.
        ExpiredClaimError: If "exp" is not in the future.
        InvalidAudienceError: If "aud" is not a string or list of strings.
    """
    build = builder().set_secret(secret)
    if "iat" not in payload:
        build.set_issued_at(int(time.time()))

    for key, value in payload.items():
        if key == "exp":
            build.set_expiration(value)
        elif key == "aud":
            build.set_audience(value)
        else:
            build.set_payload_claim(key, value)

    return build.build().get_token()


def validate_token(token: str, secret: str, check_expiration: bool = False) -> bool:
    """
    Check structure and signature, and optionally expiry.

    Returns False instead of raising for any token error.
    """
    p = parser()
    try:
        p.verify_signature(token, secret)
        if check_expiration:
            p.validate_expiration(token)
    except JWTError:
        return False
    return True


def get_header(token: str) -> dict[str, Any]:
    """Decode the header without verification."""
    return parser().decode_header(token)


def get_payload(token: str) -> dict[str, Any]:
    """
    Decode the payload without verification.

    Useful for inspecting claims before deciding which secret to use.
    """
    return parser().decode_payload(token)


def validate_expiration(token: str) -> bool:
    """False if the token has no exp claim or has expired."""
    try:
        parser().validate_expiration(token)
    except JWTError:
        return False
    return True


def validate_not_before(token: str) -> bool:
    """False if the token has no nbf claim or may not be used yet."""
    try:
        parser().validate_not_before(token)
    except JWTError:
        return False
    return True
