from __future__ import annotations

from sqlalchemy import Column, Date, Float, Integer, String

from hotel_bonus.core.database import Base


class BonusBalance(Base):
    """
    Отчётная таблица бонусов. Её наполняет внешняя система,
    сервис только читает. Своего id у таблицы нет: строка на визит.
    """
    __tablename__ = "bonuses_balance"

    phone = Column(String(10), primary_key=True)
    last_date_visit = Column(Date, primary_key=True)

    last_name = Column(String(120), nullable=True)
    first_name = Column(String(120), nullable=True)
    loyalty_level = Column(String(120), nullable=True)

    bonus_balances = Column(Float, default=0, nullable=False)
    visits_total = Column(Integer, default=0, nullable=False)
