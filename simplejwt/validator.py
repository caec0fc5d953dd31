"""
Claim validation predicates.

Every check returns a boolean and never raises, so rules can be tested on
their own. Builders and parsers turn a False into the matching error.
"""

import math
import time
from typing import Any, Callable, Iterable

from simplejwt.settings import SUPPORTED_ALGORITHMS


def _now() -> int:
    return int(time.time())


def _is_timestamp(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_numeric_date(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class ClaimValidator:
    """
    Structural and temporal checks for tokens and claims.

    Args:
        clock: Returns the current Unix time in seconds. Inject a fixed
            clock to make time based checks deterministic.
    """

    def __init__(self, clock: Callable[[], int] | None = None):
        self._clock = clock or _now

    def now(self) -> int:
        return self._clock()

    def timestamp(self, value: Any) -> bool:
        """True for an integer Unix timestamp."""
        return _is_timestamp(value)

    def numeric_date(self, value: Any) -> bool:
        """True for any finite number, integer or not (RFC 7519 NumericDate)."""
        return _is_numeric_date(value)

    def expiration(self, timestamp: Any, leeway: int = 0) -> bool:
        """True if the expiration time has not been reached yet."""
        if not _is_timestamp(timestamp):
            return False
        return timestamp + leeway > self.now()

    def not_before(self, timestamp: Any, leeway: int = 0) -> bool:
        """True if the not before time has elapsed."""
        if not _is_timestamp(timestamp):
            return False
        return timestamp <= self.now() + leeway

    def issued_at(self, timestamp: Any, leeway: int = 0) -> bool:
        """True if the issued at time is not in the future."""
        return self.not_before(timestamp, leeway)

    def structure(self, token: Any) -> bool:
        """True if the token is three non-empty dot separated segments."""
        if not isinstance(token, str):
            return False
        parts = token.split(".")
        return len(parts) == 3 and all(parts)

    def audience(self, audience: Any) -> bool:
        """True for a string or a list/tuple of strings."""
        if isinstance(audience, str):
            return True
        if isinstance(audience, (list, tuple)):
            return all(isinstance(item, str) for item in audience)
        return False

    def audience_contains(self, audience: Any, expected: str) -> bool:
        """True if the audience claim is, or lists, the expected value."""
        if isinstance(audience, str):
            return audience == expected
        if self.audience(audience):
            return expected in audience
        return False

    def algorithm(self, algorithm: Any, allowed: Iterable[str] | None = None) -> bool:
        """True if the algorithm is allowed. "none" is never allowed."""
        if not isinstance(algorithm, str) or algorithm.lower() == "none":
            return False
        allowed = SUPPORTED_ALGORITHMS if allowed is None else tuple(allowed)
        return algorithm in allowed
