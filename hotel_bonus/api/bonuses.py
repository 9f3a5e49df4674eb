from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from hotel_bonus.api.responses import fail, ok
from hotel_bonus.core.database import get_db
from hotel_bonus.core.normalize import normalize_phone
from hotel_bonus.core.tier_rules import next_tier
from hotel_bonus.models.bonus_balance import BonusBalance
from hotel_bonus.schemas.bonus import BonusRecordOut
from hotel_bonus.services.guests import find_latest_bonus_record, list_recent_bonus_records

router = APIRouter(prefix="/bonuses", tags=["bonuses"])


def to_record_out(row: BonusBalance, *, loyalty_level: Optional[str]) -> BonusRecordOut:
    return BonusRecordOut(
        guest_phone=row.phone,
        last_name=row.last_name,
        first_name=row.first_name,
        loyalty_level=loyalty_level,
        current_balance=float(row.bonus_balances or 0),
        visits_count=int(row.visits_total or 0),
        last_visit_date=row.last_date_visit,
    )


@router.get("/search")
def search_bonuses(
    phone: Optional[str] = Query(default=None, max_length=64),
    db: Session = Depends(get_db),
):
    if not (phone or "").strip():
        return fail(400, "Не указан номер телефона для поиска")
    try:
        p = normalize_phone(phone)
    except ValueError:
        return fail(400, "Номер телефона должен содержать 10 цифр")

    row = find_latest_bonus_record(db, p)
    if row is None:
        return ok(None)

    # На форме показываем уровень, который гость получит ПОСЛЕ этого визита.
    out = to_record_out(row, loyalty_level=next_tier(row.loyalty_level))
    return ok(out.model_dump(mode="json"))


@router.get("")
def list_bonuses(db: Session = Depends(get_db)):
    rows = list_recent_bonus_records(db)
    # здесь сохранённый уровень, как в отчётной таблице
    return ok([to_record_out(r, loyalty_level=r.loyalty_level).model_dump(mode="json") for r in rows])
