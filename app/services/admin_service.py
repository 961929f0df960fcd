from sqlalchemy.orm import Session, joinedload

from app.core.config import get_settings
from app.db.models import Account, AccountRole, ClickEvent, PayoutRequest, PayoutStatus
from app.schemas.dashboard import AdminOverview

settings = get_settings()


def get_admin_overview(db: Session) -> AdminOverview:
    return AdminOverview(
        total_affiliates=db.query(Account).filter(Account.role == AccountRole.affiliate).count(),
        total_clicks=db.query(ClickEvent).count(),
        pending_payouts=db.query(PayoutRequest).filter(PayoutRequest.status == PayoutStatus.pending).count(),
    )


def list_affiliates(db: Session) -> list[Account]:
    return (
        db.query(Account)
        .filter(Account.role == AccountRole.affiliate)
        .order_by(Account.created_at.desc())
        .all()
    )


def list_clicks(db: Session, limit: int | None = None) -> list[ClickEvent]:
    return (
        db.query(ClickEvent)
        .options(joinedload(ClickEvent.affiliate))
        .order_by(ClickEvent.created_at.desc())
        .limit(settings.CLICK_LIST_LIMIT if limit is None else limit)
        .all()
    )


def list_payouts(db: Session) -> list[PayoutRequest]:
    return (
        db.query(PayoutRequest)
        .options(joinedload(PayoutRequest.affiliate))
        .order_by(PayoutRequest.created_at.desc())
        .all()
    )
