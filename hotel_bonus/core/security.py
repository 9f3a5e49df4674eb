# hotel_bonus/core/security.py
import base64
import hashlib
import hmac
import logging
import os

from hotel_bonus.core.config import Settings
from hotel_bonus.core.errors import (
    AuthenticationError,
    AuthValidationError,
    ConfigurationError,
)

logger = logging.getLogger(__name__)

PBKDF2_ALGORITHM = "pbkdf2_sha256"
PBKDF2_ITERATIONS = 200_000


def hash_password(password: str, *, iterations: int = PBKDF2_ITERATIONS) -> str:
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return "$".join(
        (
            PBKDF2_ALGORITHM,
            str(iterations),
            base64.b64encode(salt).decode("ascii"),
            base64.b64encode(dk).decode("ascii"),
        )
    )


def _parse_pbkdf2(encoded: str) -> tuple[int, bytes, bytes]:
    try:
        algorithm, iterations, salt_b64, hash_b64 = encoded.split("$")
        if algorithm != PBKDF2_ALGORITHM:
            raise ValueError(algorithm)
        rounds = int(iterations)
        if rounds <= 0:
            raise ValueError(iterations)
        salt = base64.b64decode(salt_b64.encode("ascii"), validate=True)
        expected = base64.b64decode(hash_b64.encode("ascii"), validate=True)
    except ValueError as e:
        raise ConfigurationError("AUTH_PASSWORD_HASH is malformed") from e
    if not salt or not expected:
        raise ConfigurationError("AUTH_PASSWORD_HASH is malformed")
    return rounds, salt, expected


def _parse_sha256(hex_digest: str) -> bytes:
    try:
        expected = bytes.fromhex(hex_digest)
    except ValueError as e:
        raise ConfigurationError("AUTH_PASSWORD_SHA256 is not a hex digest") from e
    if len(expected) != hashlib.sha256().digest_size:
        raise ConfigurationError("AUTH_PASSWORD_SHA256 is not a sha256 digest")
    return expected


class PasswordChecker:
    """
    Проверка общего пароля ресепшн.

    Хэшируем и исходный ввод, и ввод без пробелов по краям (часто копируют
    с лишним пробелом), сравниваем оба через hmac.compare_digest и только
    потом объединяем результаты, чтобы время не зависело от того, какой
    вариант совпал.
    """

    def __init__(
        self,
        *,
        pbkdf2_hash: str | None = None,
        sha256_hex: str | None = None,
        disabled: bool = False,
    ):
        self.disabled = disabled
        self._rounds = 0
        self._salt = b""
        self._expected = b""
        self._scheme = ""

        if disabled:
            logger.warning("Password check is DISABLED (AUTH_DISABLED=true)")
            return

        if pbkdf2_hash and sha256_hex:
            raise ConfigurationError(
                "Set only one of AUTH_PASSWORD_HASH / AUTH_PASSWORD_SHA256"
            )
        if pbkdf2_hash:
            self._rounds, self._salt, self._expected = _parse_pbkdf2(pbkdf2_hash)
            self._scheme = PBKDF2_ALGORITHM
        elif sha256_hex:
            self._expected = _parse_sha256(sha256_hex)
            self._scheme = "sha256"
        else:
            raise ConfigurationError(
                "AUTH_PASSWORD_HASH is not set (or set AUTH_DISABLED=true)"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordChecker":
        return cls(
            pbkdf2_hash=settings.AUTH_PASSWORD_HASH,
            sha256_hex=settings.AUTH_PASSWORD_SHA256,
            disabled=settings.AUTH_DISABLED,
        )

    def _digest(self, candidate: str) -> bytes:
        raw = candidate.encode("utf-8")
        if self._scheme == PBKDF2_ALGORITHM:
            return hashlib.pbkdf2_hmac("sha256", raw, self._salt, self._rounds)
        return hashlib.sha256(raw).digest()

    def matches(self, candidate: str) -> bool:
        exact = hmac.compare_digest(self._digest(candidate), self._expected)
        trimmed = hmac.compare_digest(self._digest(candidate.strip()), self._expected)
        return exact | trimmed

    def check(self, candidate: str | None) -> None:
        if self.disabled:
            logger.warning("Password check bypassed: auth disabled")
            return

        if candidate is None or not candidate.strip():
            raise AuthValidationError()

        if not self.matches(candidate):
            logger.info("Password check failed")
            raise AuthenticationError()
