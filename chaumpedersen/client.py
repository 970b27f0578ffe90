"""Client side of the protocol and an interactive login dialog."""

from __future__ import annotations

import argparse
import sys

from chaumpedersen.server import AuthError, AuthService
from chaumpedersen.zkp import random_below


def password_to_secret(password: str) -> int:
    """Turn a password into the secret exponent: its trimmed UTF-8 bytes, big-endian."""
    return int.from_bytes(password.strip().encode("utf-8"), "big")


def register(service: AuthService, user: str, password: str) -> None:
    """Register a user with the public pair derived from the password."""
    x = password_to_secret(password)
    y1, y2 = service.zkp.compute_pair(x)
    service.register(user, y1, y2)


def authenticate(service: AuthService, user: str, password: str) -> str:
    """Prove knowledge of the password and return the session id."""
    zkp = service.zkp
    x = password_to_secret(password)
    k = random_below(zkp.q)
    r1, r2 = zkp.compute_pair(k)
    auth_id, c = service.create_authentication_challenge(user, r1, r2)
    s = zkp.solve(k, c, x)
    return service.verify_authentication(auth_id, s)


def main(argv: list[str] | None = None) -> int:
    """Run registration and login against an in-process service."""
    parser = argparse.ArgumentParser(
        description="Register and log in with a zero-knowledge password proof."
    )
    parser.parse_args(argv)

    service = AuthService()
    try:
        print("=== REGISTRATION PHASE ===")
        user = input("Please provide your username: ").strip()
        register(service, user, input("Please provide your password: "))
        print("Registration was successful!")

        print("=== AUTHENTICATION PHASE ===")
        session_id = authenticate(
            service, user, input("Please provide your password again (to login): ")
        )
    except AuthError as exc:
        print(f"Authentication failed: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        print("Input ended unexpectedly", file=sys.stderr)
        return 1

    print("Authentication successful!")
    print(f"Logged in! Session ID: {session_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())