from __future__ import annotations

import logging

from sqlalchemy import desc, select, text
from sqlalchemy.exc import DisconnectionError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from hotel_bonus.core.errors import RepositoryError
from hotel_bonus.models.bonus_balance import BonusBalance
from hotel_bonus.models.guest import Guest
from hotel_bonus.schemas.guest import GuestCheckout

logger = logging.getLogger(__name__)

ADMIN_LIST_LIMIT = 100

# ошибки связи: вызывающий может повторить запрос
_RETRYABLE = (OperationalError, DisconnectionError, PoolTimeoutError)


def _wrap(e: SQLAlchemyError, action: str) -> RepositoryError:
    return RepositoryError(f"{action}: {e}", retryable=isinstance(e, _RETRYABLE))


def insert_guest_checkout(db: Session, record: GuestCheckout) -> Guest:
    guest = Guest(
        guest_phone=record.phone,
        last_name=record.last_name,
        first_name=record.first_name,
        checkin_date=record.checkin_date,
        loyalty_level=record.loyalty_level,
        shelter_booking_id=record.booking_id,
        total_amount=record.total_amount,
        bonus_spent=record.bonus_spent,
    )
    try:
        db.add(guest)
        db.commit()
        db.refresh(guest)
    except SQLAlchemyError as e:
        db.rollback()
        raise _wrap(e, "insert guest checkout") from e

    logger.info("Guest checkout saved: id=%s booking=%s", guest.id, guest.shelter_booking_id)
    return guest


def find_latest_bonus_record(db: Session, phone: str) -> BonusBalance | None:
    try:
        return db.scalars(
            select(BonusBalance)
            .where(BonusBalance.phone == phone)
            .order_by(desc(BonusBalance.last_date_visit))
            .limit(1)
        ).first()
    except SQLAlchemyError as e:
        raise _wrap(e, "find bonus record") from e


def list_recent_guests(db: Session, limit: int = ADMIN_LIST_LIMIT) -> list[Guest]:
    try:
        return list(
            db.scalars(select(Guest).order_by(desc(Guest.created_at), desc(Guest.id)).limit(limit))
        )
    except SQLAlchemyError as e:
        raise _wrap(e, "list guests") from e


def list_recent_bonus_records(db: Session, limit: int = ADMIN_LIST_LIMIT) -> list[BonusBalance]:
    try:
        return list(
            db.scalars(
                select(BonusBalance).order_by(desc(BonusBalance.last_date_visit)).limit(limit)
            )
        )
    except SQLAlchemyError as e:
        raise _wrap(e, "list bonus records") from e


def ping(db: Session) -> None:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise _wrap(e, "ping") from e
