"""
Print a bcrypt hash for the operator password, for use as ACCESS_PASSWORD_HASH.

Usage:
  python -m admission_tracker.scripts.hash_password
  python -m admission_tracker.scripts.hash_password --password "S3cret"
"""

import argparse
import getpass

import bcrypt


def hash_password(plain_password: str) -> str:
    # Same scheme as auth.security.hash_password, without loading app settings
    return bcrypt.hashpw(plain_password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--password", help="Password to hash; prompted for when omitted")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Operator password: ")
    if not password:
        parser.error("password must not be empty")
    print(hash_password(password))


if __name__ == "__main__":
    main()
