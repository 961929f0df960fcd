import logging
import random
from urllib.parse import quote

from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.exceptions import AppException, NotFound
from app.db.models import Account, AccountRole, ClickEvent

settings = get_settings()
logger = logging.getLogger(__name__)

DEFAULT_NAME_TOKEN = "user"


def generate_referral_code(name: str | None, account_id: str) -> str:
    """First word of the name, last 4 chars of the id, then 3 random digits.

    ``"Asha Rao"`` with id ``...9f3c`` gives something like ``asha9f3c482``.
    """
    tokens = (name or "").split()
    base = tokens[0].lower() if tokens else DEFAULT_NAME_TOKEN
    return f"{base}{str(account_id)[-4:]}{random.randint(100, 999)}"


def assign_referral_code(db: Session, account: Account) -> str:
    """Set a referral code on ``account`` that no other account holds. Caller commits."""
    for _ in range(max(settings.REFERRAL_CODE_ATTEMPTS, 1)):
        code = generate_referral_code(account.name, account.id)
        taken = (
            db.query(Account.id)
            .filter(Account.referral_code == code, Account.id != account.id)
            .first()
        )
        if not taken:
            account.referral_code = code
            return code
        logger.info("Referral code collision on %s, retrying", code)
    raise AppException("Could not allocate a unique referral code", status_code=500)


def build_referral_link(code: str) -> str:
    # Codes keep the raw name token, which may hold "/", "?" or "#".
    return f"{settings.referral_base}{quote(code, safe='')}"


def resolve_and_record_click(
    db: Session,
    code: str,
    ip: str | None = None,
    user_agent: str | None = None,
) -> Account:
    affiliate = (
        db.query(Account)
        .filter(Account.referral_code == code, Account.role == AccountRole.affiliate)
        .first()
    )
    if not affiliate:
        raise NotFound("Invalid referral link")

    db.add(ClickEvent(affiliate_id=affiliate.id, ip=ip or None, user_agent=user_agent or None))
    db.commit()
    return affiliate
