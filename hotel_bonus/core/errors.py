# hotel_bonus/core/errors.py
"""
Ошибки сервиса. Каждая группа отображается в свой HTTP-ответ в main.py:

  ConfigurationError       сервис не стартует
  CheckoutValidationError  400, первая проблема уходит в message
  AuthValidationError      400, пароль не передан
  AuthenticationError      401, неверный пароль
  RepositoryError          500, детали только в development
"""
from __future__ import annotations

from dataclasses import dataclass


class ConfigurationError(RuntimeError):
    pass


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str


class CheckoutValidationError(ValueError):
    def __init__(self, issues: list[ValidationIssue]):
        if not issues:
            raise ValueError("CheckoutValidationError requires at least one issue")
        self.issues = list(issues)
        super().__init__(self.issues[0].message)

    @property
    def message(self) -> str:
        return self.issues[0].message


class AuthValidationError(ValueError):
    message = "Введите пароль"


class AuthenticationError(Exception):
    # Одно сообщение на любой промах: не раскрываем схему хэширования.
    message = "Неверный пароль"


class RepositoryError(Exception):
    def __init__(self, message: str, *, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable
