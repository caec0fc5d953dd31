"""
Exception classes for simplejwt.

Every error carries a stable integer ``code`` so callers can switch on the
failure without matching message text. Messages never include the secret.
"""


class JWTError(Exception):
    """Base exception for JWT operations."""

    code = 0

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class BuildError(JWTError):
    """Token could not be built."""
    pass


class ValidateError(JWTError):
    """Token failed parsing or validation."""
    pass


class StructureError(ValidateError):
    """Token is not three non-empty dot separated segments."""
    code = 1


class DecodeError(ValidateError):
    """Segment is not base64url encoded JSON object."""
    code = 2


class SignatureInvalidError(ValidateError):
    """Recomputed signature does not match the token signature."""
    code = 3


class ExpiredClaimError(BuildError, ValidateError):
    """Expiration claim is not in the future."""
    code = 4


class NotBeforeError(ValidateError):
    """Not before claim has not elapsed yet."""
    code = 5


class MissingClaimError(ValidateError):
    """A claim required by a validation step is absent."""
    code = 6


class InvalidClaimError(ValidateError):
    """A registered claim holds a value of the wrong type."""
    code = 7


class InvalidSecretError(BuildError, ValidateError):
    """Secret does not satisfy the secret strength policy."""
    code = 9


class InvalidAudienceError(BuildError):
    """Audience is neither a string nor a sequence of strings."""
    code = 10


class AudienceMismatchError(ValidateError):
    """Audience claim does not contain the expected value."""
    code = 11


class AlgorithmError(ValidateError):
    """Algorithm is unsupported or not allowed."""
    code = 12
