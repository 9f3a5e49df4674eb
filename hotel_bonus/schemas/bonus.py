from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BonusRecordOut(BaseModel):
    """Строка из bonuses_balance в том виде, в котором её ждёт форма."""
    model_config = ConfigDict(from_attributes=True)

    guest_phone: str
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    loyalty_level: Optional[str] = None
    current_balance: float = 0.0
    visits_count: int = 0
    last_visit_date: Optional[date] = None
