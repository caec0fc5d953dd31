"""Read-only view over a parsed token."""

import math
from dataclasses import dataclass, field
from typing import Any, Callable

from simplejwt.validator import _is_numeric_date


@dataclass(frozen=True)
class Parsed:
    """Decoded header and payload of a token with claim accessors."""
    token: str
    header: dict[str, Any]
    payload: dict[str, Any]
    signature: str
    clock: Callable[[], int] = field(repr=False, compare=False)

    def get_token(self) -> str:
        return self.token

    def get_header(self) -> dict[str, Any]:
        return dict(self.header)

    def get_payload(self) -> dict[str, Any]:
        return dict(self.payload)

    def get_signature(self) -> str:
        return self.signature

    def get_algorithm(self) -> str | None:
        return self.header.get("alg")

    def get_type(self) -> str | None:
        return self.header.get("typ")

    def get_content_type(self) -> str | None:
        return self.header.get("cty")

    def get_issuer(self) -> str | None:
        return self.payload.get("iss")

    def get_subject(self) -> str | None:
        return self.payload.get("sub")

    def get_audience(self) -> str | list[str] | None:
        return self.payload.get("aud")

    def get_expiration(self) -> int | None:
        return self.payload.get("exp")

    def get_not_before(self) -> int | None:
        return self.payload.get("nbf")

    def get_issued_at(self) -> int | None:
        return self.payload.get("iat")

    def get_jwt_id(self) -> str | None:
        return self.payload.get("jti")

    def get_expires_in(self) -> int:
        """Seconds until expiry, 0 when expired or no exp claim."""
        exp = self.get_expiration()
        if not _is_numeric_date(exp):
            return 0
        return max(math.ceil(exp) - self.clock(), 0)

    def get_uses_in(self) -> int:
        """Seconds until the token may be used, 0 when usable now."""
        nbf = self.get_not_before()
        if not _is_numeric_date(nbf):
            return 0
        return max(math.ceil(nbf) - self.clock(), 0)
