#!/usr/bin/env python3
"""
Print a bcrypt hash for ADMIN_PASSWORD_HASH.
Run from backend root: python3 scripts/hash_admin_password.py
"""

import getpass
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from libs.auth.passwords import hash_password  # noqa: E402


def main():
    password = getpass.getpass("Admin password: ")
    confirm = getpass.getpass("Confirm password: ")
    if not password or password != confirm:
        print("❌ Passwords are empty or do not match")
        sys.exit(1)
    print(f"ADMIN_PASSWORD_HASH={hash_password(password)}")


if __name__ == "__main__":
    main()
