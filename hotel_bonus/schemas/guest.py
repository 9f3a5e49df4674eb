from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GuestCheckout(BaseModel):
    """
    Проверенные данные выезда гостя.
    Собирается только через validate_checkout(), после нормализации.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    phone: str = Field(..., min_length=10, max_length=10, pattern=r"^\d{10}$")
    last_name: str = Field(..., min_length=1, max_length=120)
    first_name: str = Field(..., min_length=1, max_length=120)
    booking_id: str = Field(..., min_length=1, max_length=80)
    loyalty_level: Optional[str] = Field(default=None, max_length=120)
    checkin_date: date
    total_amount: float = Field(..., gt=0, le=1_000_000)
    bonus_spent: int = Field(default=0, ge=0, le=1_000_000)


class GuestOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    guest_phone: str
    last_name: str
    first_name: str
    checkin_date: date
    loyalty_level: Optional[str] = None
    shelter_booking_id: str
    total_amount: float
    bonus_spent: int
    created_at: datetime
