from app.db.models.account import ADMIN_REFERRAL_CODE, Account, AccountRole
from app.db.models.click import ClickEvent
from app.db.models.payout import PayoutRequest, PayoutStatus

__all__ = [
    "ADMIN_REFERRAL_CODE",
    "Account",
    "AccountRole",
    "ClickEvent",
    "PayoutRequest",
    "PayoutStatus",
]
