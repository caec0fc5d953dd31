"""Logging helpers.

The library only emits records; configuring handlers is left to the
application. Claim values are masked before they reach a log record.
"""

import logging
from typing import Any, Mapping

LOGGER_NAME = "simplejwt"

# Claim names whose values are never logged in clear
SENSITIVE_FIELDS = {
    "password", "secret", "token", "key", "credential", "authorization",
    "api_key", "apikey", "access_token", "refresh_token", "session",
    "cookie", "private_key", "secret_key",
}

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def mask_claims(claims: Mapping[str, Any]) -> dict[str, Any]:
    """Mask sensitive values in a claim mapping."""
    masked = {}
    for key, value in claims.items():
        key_lower = str(key).lower()
        if any(s in key_lower for s in SENSITIVE_FIELDS):
            if isinstance(value, str) and len(value) > 8:
                masked[key] = f"{value[:4]}...{value[-4:]}"
            else:
                masked[key] = "[REDACTED]"
        elif isinstance(value, Mapping):
            masked[key] = mask_claims(value)
        else:
            masked[key] = value
    return masked
