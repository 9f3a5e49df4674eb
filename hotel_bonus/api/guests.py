from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from hotel_bonus.api.responses import ok
from hotel_bonus.core.database import get_db
from hotel_bonus.core.validation import validate_checkout
from hotel_bonus.schemas.guest import GuestOut
from hotel_bonus.services.guests import insert_guest_checkout, list_recent_guests

router = APIRouter(prefix="/guests", tags=["guests"])


@router.post("")
def create_guest(payload: Any = Body(default=None), db: Session = Depends(get_db)):
    # Тело принимаем как есть: типы приводит validate_checkout
    record = validate_checkout(payload)
    guest = insert_guest_checkout(db, record)
    return ok(
        GuestOut.model_validate(guest).model_dump(mode="json"),
        message="✅ Данные гостя успешно добавлены!",
    )


@router.get("")
def list_guests(db: Session = Depends(get_db)):
    rows = list_recent_guests(db)
    return ok([GuestOut.model_validate(g).model_dump(mode="json") for g in rows])
