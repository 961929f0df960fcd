from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.db.models import Account, AccountRole

AFFILIATE_SLOT = "affiliate_id"
ADMIN_SLOT = "admin_id"


@dataclass
class SessionIdentity:
    """Who is signed in on this session. Both slots may be filled at once."""

    affiliate: Account | None = None
    admin: Account | None = None


def resolve_slot(session: dict, db: Session, slot: str, role: AccountRole) -> Account | None:
    account_id = session.get(slot)
    if not account_id:
        return None
    account = db.query(Account).filter(Account.id == account_id).first()
    if not account or account.role != role:
        # Stale id: the account is gone or no longer matches the slot.
        session.pop(slot, None)
        return None
    return account


def load_identity(session: dict, db: Session) -> SessionIdentity:
    return SessionIdentity(
        affiliate=resolve_slot(session, db, AFFILIATE_SLOT, AccountRole.affiliate),
        admin=resolve_slot(session, db, ADMIN_SLOT, AccountRole.admin),
    )


def sign_in(session: dict, slot: str, account: Account) -> None:
    session[slot] = str(account.id)


def sign_out(session: dict, slot: str) -> None:
    session.pop(slot, None)
