# hotel_bonus/models/__init__.py
from hotel_bonus.models.guest import Guest
from hotel_bonus.models.bonus_balance import BonusBalance

__all__ = ["Guest", "BonusBalance"]
