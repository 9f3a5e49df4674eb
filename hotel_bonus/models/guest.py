from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Float, Integer, String

from hotel_bonus.core.database import Base


class Guest(Base):
    """Выезд гостя. Пишется один раз, дальше не меняется."""
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)

    # 10 цифр без кода страны
    guest_phone = Column(String(10), index=True, nullable=False)

    last_name = Column(String(120), nullable=False)
    first_name = Column(String(120), nullable=False)

    checkin_date = Column(Date, nullable=False)

    # как пришло с формы, не пересчитывается
    loyalty_level = Column(String(120), nullable=True)

    shelter_booking_id = Column(String(80), nullable=False)

    total_amount = Column(Float, nullable=False)
    bonus_spent = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
