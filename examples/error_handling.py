#!/usr/bin/env python3
"""
Error Handling Example

Demonstrates handling builder and parser errors with simplejwt.
"""

import time

from simplejwt import (
    Build,
    Parse,
    JWTError,
    ExpiredClaimError,
    InvalidAudienceError,
    InvalidSecretError,
    SignatureInvalidError,
    StructureError,
)

SECRET = "Str0ng!Secret123"


def main():
    print("simplejwt Error Handling Example")
    print("=" * 50)

    # Example 1: Builder input errors
    print("\n1. Builder errors...")
    build = Build()

    try:
        build.set_secret("weak")
    except InvalidSecretError as e:
        print(f"   Secret refused (code {e.code}): {e}")

    try:
        build.set_expiration(int(time.time()) - 60)
    except ExpiredClaimError as e:
        print(f"   Expiration refused (code {e.code}): {e}")

    try:
        build.set_audience(42)
    except InvalidAudienceError as e:
        print(f"   Audience refused (code {e.code}): {e}")

    # State is untouched by the failures, fix and retry
    jwt = build.set_secret(SECRET).set_issuer("example-app").build()
    print(f"   Built after fixing input: {jwt.get_token()[:40]}...")

    # Example 2: Parser errors
    print("\n2. Parser errors...")
    header_b64, payload_b64, signature_b64 = jwt.get_token().split(".")
    last = "B" if payload_b64.endswith("A") else "A"
    tampered = f"{header_b64}.{payload_b64[:-1]}{last}.{signature_b64}"

    for label, token in (("malformed", "not-a-token"), ("tampered", tampered)):
        try:
            Parse().verify_signature(token, SECRET)
        except StructureError as e:
            print(f"   {label}: structure error (code {e.code})")
        except SignatureInvalidError as e:
            print(f"   {label}: signature error (code {e.code})")

    # Example 3: Catch-all
    print("\n3. Catching every token error...")
    try:
        Parse().validate_expiration(jwt)
    except JWTError as e:
        print(f"   {type(e).__name__} (code {e.code}): {e}")

    print("\n" + "=" * 50)
    print("Example complete!")


if __name__ == "__main__":
    main()
