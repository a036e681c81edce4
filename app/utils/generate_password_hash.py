"""
Generate an ADMIN_PASSWORD_HASH value for the service configuration.

    python -m app.utils.generate_password_hash 'my password'

Without an argument the password is read from an interactive prompt, which
keeps it out of shell history.
"""
import argparse
import getpass
import sys

from app.core.services.auth_service import pwd_context


def generate_hash(password: str) -> str:
    if not password:
        raise ValueError("Password must not be empty")
    return pwd_context.hash(password)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate an admin password hash")
    parser.add_argument("password", nargs="?", help="plaintext password (prompted for if omitted)")
    args = parser.parse_args(argv)

    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")
        if password != getpass.getpass("Repeat password: "):
            print("Passwords do not match", file=sys.stderr)
            return 1

    try:
        password_hash = generate_hash(password)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    print("-" * 51)
    print(f"Hash: {password_hash}")
    print("-" * 51)
    print("Copy the hash above into your .env file")
    print("as ADMIN_PASSWORD_HASH=...")
    print("-" * 51)
    return 0


if __name__ == "__main__":
    sys.exit(main())
