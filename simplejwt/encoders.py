"""
Token segment encoding and HMAC signing.

Each segment of a token is compact JSON, base64url encoded without
padding. Signatures are HMAC digests over ``header_segment.payload_segment``
computed with ``cryptography``'s HMAC primitive.
"""

import base64
import binascii
import json
import re
from abc import ABC, abstractmethod
from typing import Any, Mapping

from cryptography.hazmat.primitives import hashes, hmac as crypto_hmac

from simplejwt.errors import AlgorithmError, BuildError, DecodeError

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    """Base64url encode without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(segment: str) -> bytes:
    """Base64url decode, restoring padding.

    Raises:
        DecodeError: If the segment holds characters outside the base64url
            alphabet or has an impossible length.
    """
    if not isinstance(segment, str) or not _B64URL_RE.fullmatch(segment):
        raise DecodeError("Segment is not valid base64url")
    padding = 4 - (len(segment) % 4)
    if padding != 4:
        segment += "=" * padding
    try:
        return base64.urlsafe_b64decode(segment)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Segment is not valid base64url: {e}") from e


class Encoder(ABC):
    """
    Encodes claim sets and signs them.

    Subclasses provide the algorithm name and the keyed hash. Instances hold
    no state and can be shared between builders, parsers and threads.
    """

    @abstractmethod
    def get_algorithm(self) -> str:
        """Algorithm identifier written to the "alg" header claim."""

    @abstractmethod
    def sign(self, signing_input: str, secret: str) -> str:
        """Sign an encoded ``header.payload`` string, return base64url."""

    def encode(self, claims: Mapping[str, Any]) -> str:
        """Serialize claims to compact JSON and base64url encode them.

        Key order is preserved, so equal ordered mappings always give the
        same segment.
        """
        try:
            raw = json.dumps(
                dict(claims),
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            ).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            raise BuildError(f"Claims are not JSON serializable: {e}") from e
        return b64url_encode(raw)

    def decode(self, segment: str) -> dict[str, Any]:
        """Decode a base64url JSON segment into a claim dict."""
        raw = b64url_decode(segment)
        try:
            claims = json.loads(raw.decode("utf-8"))
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"Segment is not valid JSON: {e}") from e
        if not isinstance(claims, dict):
            raise DecodeError(
                f"Segment must be a JSON object, got {type(claims).__name__}"
            )
        return claims

    def signature(
        self,
        header: Mapping[str, Any],
        payload: Mapping[str, Any],
        secret: str,
    ) -> str:
        """Compute the token signature for a header and payload."""
        return self.sign(f"{self.encode(header)}.{self.encode(payload)}", secret)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class HMACEncoder(Encoder):
    """HMAC signing, the hash is chosen by subclasses."""

    ALGORITHM = ""
    HASH_ALGORITHM: type[hashes.HashAlgorithm] = hashes.SHA256

    def get_algorithm(self) -> str:
        return self.ALGORITHM

    def sign(self, signing_input: str, secret: str) -> str:
        h = crypto_hmac.HMAC(secret.encode("utf-8"), self.HASH_ALGORITHM())
        h.update(signing_input.encode("utf-8"))
        return b64url_encode(h.finalize())


class EncodeHS256(HMACEncoder):
    """HMAC-SHA256."""
    ALGORITHM = "HS256"
    HASH_ALGORITHM = hashes.SHA256


class EncodeHS384(HMACEncoder):
    """HMAC-SHA384."""
    ALGORITHM = "HS384"
    HASH_ALGORITHM = hashes.SHA384


class EncodeHS512(HMACEncoder):
    """HMAC-SHA512."""
    ALGORITHM = "HS512"
    HASH_ALGORITHM = hashes.SHA512


ENCODERS: dict[str, type[Encoder]] = {
    "HS256": EncodeHS256,
    "HS384": EncodeHS384,
    "HS512": EncodeHS512,
}


def encoder_for(algorithm: str) -> Encoder:
    """
    Get an encoder for an algorithm name.

    Raises:
        AlgorithmError: If the algorithm is not in the HMAC family.
    """
    try:
        return ENCODERS[algorithm]()
    except (KeyError, TypeError):
        raise AlgorithmError(
            f"Unsupported algorithm: {algorithm}. Use one of {', '.join(ENCODERS)}."
        ) from None
