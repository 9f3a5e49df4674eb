from hotel_bonus.schemas.guest import GuestCheckout, GuestOut
from hotel_bonus.schemas.bonus import BonusRecordOut
from hotel_bonus.schemas.auth import AuthIn
__all__ = [
    "GuestCheckout",
    "GuestOut",
    "BonusRecordOut",
    "AuthIn",
]
