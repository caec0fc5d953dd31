"""
Signing secret strength policy.

A secret is accepted when it is long enough and mixes upper-case,
lower-case, digit and special characters. Validators answer with a
boolean; turning a refusal into an error is up to the caller.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from simplejwt.settings import get_settings


class SecretValidator(ABC):
    """Interface for secret validation, enables custom policies."""

    @abstractmethod
    def validate(self, secret: str) -> bool:
        """Return True if the secret may be used to sign or verify."""


@dataclass
class SecretStrength:
    """Result of secret strength analysis."""
    length: int
    min_length: int
    has_upper: bool
    has_lower: bool
    has_digit: bool
    has_special: bool
    feedback: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return (
            self.length >= self.min_length
            and self.has_upper
            and self.has_lower
            and self.has_digit
            and self.has_special
        )


def check_secret(secret: str, min_length: int | None = None) -> SecretStrength:
    """
    Analyze a secret against the strength rules.

    Args:
        secret: Secret to analyze.
        min_length: Minimum length; defaults to the configured value.

    Returns:
        SecretStrength with the outcome of every rule and feedback for the
        rules that failed.
    """
    if min_length is None:
        min_length = get_settings().secret_min_length

    if not isinstance(secret, str):
        return SecretStrength(
            length=0, min_length=min_length,
            has_upper=False, has_lower=False,
            has_digit=False, has_special=False,
            feedback=["Secret must be a string."],
        )

    strength = SecretStrength(
        length=len(secret),
        min_length=min_length,
        has_upper=bool(re.search(r"[A-Z]", secret)),
        has_lower=bool(re.search(r"[a-z]", secret)),
        has_digit=bool(re.search(r"\d", secret)),
        has_special=bool(re.search(r"[^A-Za-z0-9]", secret)),
    )

    if strength.length < min_length:
        strength.feedback.append(f"Use at least {min_length} characters.")
    if not strength.has_upper:
        strength.feedback.append("Add an upper-case letter.")
    if not strength.has_lower:
        strength.feedback.append("Add a lower-case letter.")
    if not strength.has_digit:
        strength.feedback.append("Add a digit.")
    if not strength.has_special:
        strength.feedback.append("Add a special character.")

    return strength


class StrongSecret(SecretValidator):
    """
    Default secret policy.

    Example:
        StrongSecret().validate("Str0ng!Secret123")  # True
        StrongSecret().validate("short")             # False
    """

    def __init__(self, min_length: int | None = None):
        self.min_length = min_length

    def validate(self, secret: str) -> bool:
        return check_secret(secret, self.min_length).valid
