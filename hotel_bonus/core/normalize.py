# hotel_bonus/core/normalize.py
"""
Приведение сырых полей формы к строгим типам.

Тело запроса приходит как JSON: строка, число, null или (у некоторых
конструкторов форм) список с одним значением. Всё остальное в сервисе
работает уже с результатом этих функций.
"""
from __future__ import annotations

import math
import re
from datetime import date
from typing import Union

RawValue = Union[str, int, float, bool, None, list, tuple]

PHONE_DIGITS = 10

_NON_DIGITS = re.compile(r"[^0-9]")
_NUMBER = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")

# (regex, порядок групп год/месяц/день); только ASCII-цифры
_DATE_SHAPES: tuple[tuple[re.Pattern[str], tuple[int, int, int]], ...] = (
    (re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})$"), (1, 2, 3)),    # YYYY-MM-DD
    (re.compile(r"^([0-9]{1,2})\.([0-9]{1,2})\.([0-9]{4})$"), (3, 2, 1)),  # DD.MM.YYYY
    (re.compile(r"^([0-9]{1,2})-([0-9]{1,2})-([0-9]{4})$"), (3, 2, 1)),    # DD-MM-YYYY
    (re.compile(r"^([0-9]{4})\.([0-9]{1,2})\.([0-9]{1,2})$"), (1, 2, 3)),  # YYYY.MM.DD
)


def _scalar(value: RawValue) -> str | int | float | None:
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is not None and not isinstance(value, (str, int, float)):
        # объекты и вложенные списки не принимаем
        raise ValueError(f"unsupported value type: {type(value).__name__}")
    return value


def coerce_str(value: RawValue) -> str:
    value = _scalar(value)
    if value is None:
        return ""
    return str(value).strip()


def normalize_phone(value: RawValue) -> str:
    """+7 (916) 123-45-67 -> 9161234567. Префикс страны (7/8) отбрасывается."""
    digits = _NON_DIGITS.sub("", coerce_str(value))
    if len(digits) < PHONE_DIGITS:
        raise ValueError("phone must contain at least 10 digits")
    return digits[-PHONE_DIGITS:]


def normalize_date(value: RawValue) -> str:
    s = coerce_str(value)
    for pattern, (yi, mi, di) in _DATE_SHAPES:
        m = pattern.match(s)
        if not m:
            continue
        year, month, day = int(m.group(yi)), int(m.group(mi)), int(m.group(di))
        # date() проверяет календарь: 31.02 и 29.02 не в високосный год не пройдут
        return date(year, month, day).isoformat()
    raise ValueError(f"unsupported date format: {s!r}")


def _to_number(value: RawValue) -> float:
    value = _scalar(value)
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            raise ValueError("number is too large") from None
    s = coerce_str(value).replace(" ", "").replace(",", ".")
    if not s:
        raise ValueError("empty number")
    if not _NUMBER.match(s):
        raise ValueError(f"not a number: {s!r}")
    return float(s)


def parse_amount(value: RawValue, *, upper: float) -> float:
    amount = _to_number(value)
    if not math.isfinite(amount):
        raise ValueError("amount must be finite")
    if amount <= 0 or amount > upper:
        raise ValueError("amount out of range")
    return amount


def parse_points(value: RawValue, *, upper: int) -> int:
    if coerce_str(value) == "" and not isinstance(value, (int, float)):
        return 0
    points = _to_number(value)
    if not math.isfinite(points) or points != int(points):
        raise ValueError("points must be a whole number")
    if points < 0 or points > upper:
        raise ValueError("points out of range")
    return int(points)
