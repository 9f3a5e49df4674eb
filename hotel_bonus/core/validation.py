# hotel_bonus/core/validation.py
"""
Проверка формы выезда гостя.

Все поля проверяются за один проход; если есть ошибки, поднимается
CheckoutValidationError со списком проблем в порядке полей формы.
Клиенту уходит первая, остальные лежат в errors.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import ValidationError as PydanticValidationError

from hotel_bonus.core.errors import CheckoutValidationError, ValidationIssue
from hotel_bonus.core.normalize import (
    RawValue,
    coerce_str,
    normalize_date,
    normalize_phone,
    parse_amount,
    parse_points,
)
from hotel_bonus.schemas.guest import GuestCheckout

MAX_NAME_LEN = 120
MAX_BOOKING_LEN = 80
MAX_LOYALTY_LEN = 120
MAX_AMOUNT = 1_000_000
MAX_BONUS_SPENT = 1_000_000


def _as_text(label: str, value: RawValue) -> str:
    try:
        return coerce_str(value)
    except ValueError:
        raise ValueError(f"{label}: ожидается строка") from None


def _required_text(label: str, max_len: int) -> Callable[[RawValue], str]:
    def check(value: RawValue) -> str:
        s = _as_text(label, value)
        if not s:
            raise ValueError(f"{label}: обязательное поле")
        if len(s) > max_len:
            raise ValueError(f"{label}: не длиннее {max_len} символов")
        return s
    return check


def _optional_loyalty(value: RawValue) -> str | None:
    s = _as_text("Уровень лояльности", value)
    if len(s) > MAX_LOYALTY_LEN:
        raise ValueError(f"Уровень лояльности: не длиннее {MAX_LOYALTY_LEN} символов")
    return s or None


def _phone(value: RawValue) -> str:
    if not _as_text("Номер телефона", value):
        raise ValueError("Номер телефона: обязательное поле")
    try:
        return normalize_phone(value)
    except ValueError:
        raise ValueError("Номер телефона должен содержать 10 цифр") from None


def _checkin_date(value: RawValue) -> str:
    if not _as_text("Дата заезда", value):
        raise ValueError("Дата заезда: обязательное поле")
    try:
        return normalize_date(value)
    except ValueError:
        raise ValueError("Дата заезда: ожидается ДД.ММ.ГГГГ или ГГГГ-ММ-ДД") from None


def _total_amount(value: RawValue) -> float:
    try:
        return parse_amount(value, upper=MAX_AMOUNT)
    except ValueError:
        raise ValueError("Сумма при выезде должна быть больше 0 и не больше 1 000 000") from None


def _bonus_spent(value: RawValue) -> int:
    try:
        return parse_points(value, upper=MAX_BONUS_SPENT)
    except ValueError:
        raise ValueError("Списано бонусов: целое число от 0 до 1 000 000") from None


# wire-имя поля -> (имя в GuestCheckout, проверка)
CHECKOUT_FIELDS: tuple[tuple[str, str, Callable[[RawValue], Any]], ...] = (
    ("guest_phone", "phone", _phone),
    ("last_name", "last_name", _required_text("Фамилия", MAX_NAME_LEN)),
    ("first_name", "first_name", _required_text("Имя", MAX_NAME_LEN)),
    ("checkin_date", "checkin_date", _checkin_date),
    ("loyalty_level", "loyalty_level", _optional_loyalty),
    ("shelter_booking_id", "booking_id", _required_text("Номер бронирования Shelter", MAX_BOOKING_LEN)),
    ("total_amount", "total_amount", _total_amount),
    ("bonus_spent", "bonus_spent", _bonus_spent),
)

_WIRE_NAMES = {attr: wire_name for wire_name, attr, _ in CHECKOUT_FIELDS}


def _schema_issue(err: Mapping[str, Any]) -> ValidationIssue:
    loc = err.get("loc") or ()
    attr = str(loc[0]) if loc else "body"
    return ValidationIssue(_WIRE_NAMES.get(attr, attr), f"Некорректное значение: {err.get('msg', '')}")


def validate_checkout(payload: Mapping[str, RawValue]) -> GuestCheckout:
    if not isinstance(payload, Mapping):
        raise CheckoutValidationError([ValidationIssue("body", "Ожидается JSON-объект")])

    values: dict[str, Any] = {}
    issues: list[ValidationIssue] = []

    for wire_name, attr, check in CHECKOUT_FIELDS:
        try:
            values[attr] = check(payload.get(wire_name))
        except ValueError as e:
            issues.append(ValidationIssue(wire_name, str(e)))

    if issues:
        raise CheckoutValidationError(issues)

    try:
        return GuestCheckout(**values)
    except PydanticValidationError as e:
        raise CheckoutValidationError([_schema_issue(err) for err in e.errors()]) from None
