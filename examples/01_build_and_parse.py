#!/usr/bin/env python3
"""
Build and Parse Example

Demonstrates building a signed token and validating it again.
"""

import time

from simplejwt import Build, Parse, check_secret

SECRET = "Str0ng!Secret123"


def main():
    print("simplejwt Build and Parse Example")
    print("=" * 50)

    # Example 1: Check a secret before using it
    print("\n1. Checking secret strength...")
    for candidate in ("short", SECRET):
        strength = check_secret(candidate)
        print(f"   {candidate!r}: {'OK' if strength.valid else ', '.join(strength.feedback)}")

    # Example 2: Build a token
    print("\n2. Building a token...")
    jwt = (
        Build()
        .set_secret(SECRET)
        .set_issuer("example-app")
        .set_subject("user-42")
        .set_audience(["api.example.com"])
        .set_issued_at(int(time.time()))
        .set_expiration(int(time.time()) + 3600)
        .set_payload_claim("role", "admin")
        .build()
    )
    print(f"   Token:   {jwt.get_token()[:50]}...")
    print(f"   Header:  {jwt.get_header()}")
    print(f"   Payload: {jwt.get_payload()}")

    # Example 3: Validate and read claims
    print("\n3. Validating the token...")
    parsed = (
        Parse()
        .validate(jwt)
        .validate_expiration(jwt)
        .validate_audience(jwt, "api.example.com")
        .parse(jwt)
    )
    print(f"   Subject:    {parsed.get_subject()}")
    print(f"   Expires in: {parsed.get_expires_in()} seconds")

    print("\n" + "=" * 50)
    print("Example complete!")


if __name__ == "__main__":
    main()
