#!/usr/bin/env python3
"""
Генерирует значение для AUTH_PASSWORD_HASH.

    python hash_password.py
    Пароль: ******
    Повторите: ******
    AUTH_PASSWORD_HASH=pbkdf2_sha256$200000$...$...
"""
import sys
from getpass import getpass

from hotel_bonus.core.security import hash_password


def main() -> int:
    password = getpass("Пароль: ")
    if not password.strip():
        print("Пароль не может быть пустым", file=sys.stderr)
        return 1
    if getpass("Повторите: ") != password:
        print("Пароли не совпадают", file=sys.stderr)
        return 1
    print(f"AUTH_PASSWORD_HASH={hash_password(password)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
