"""The built token and the secret that signed it."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Jwt:
    """
    Immutable token value.

    Example:
        jwt = builder.build()
        jwt.get_token()    # "eyJ...header.eyJ...payload.signature"
        jwt.get_payload()  # {"iss": "app", ...}
    """
    token: str
    secret: str = field(repr=False)

    def get_token(self) -> str:
        return self.token

    def get_secret(self) -> str:
        return self.secret

    def get_header(self) -> dict[str, Any]:
        """Decoded header, not verified."""
        return self._parser().decode_header(self.token)

    def get_payload(self) -> dict[str, Any]:
        """Decoded payload, not verified."""
        return self._parser().decode_payload(self.token)

    def get_signature(self) -> str:
        return self._parser().get_signature(self.token)

    @staticmethod
    def _parser():
        from simplejwt.parse import Parse

        return Parse()

    def __str__(self) -> str:
        return self.token
