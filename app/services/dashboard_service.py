from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.db.models import Account, ClickEvent, PayoutRequest
from app.schemas.dashboard import AffiliateDashboard, PayoutRow
from app.services.referral_service import build_referral_link


def start_of_local_day(now: datetime | None = None) -> datetime:
    """Local midnight as a naive UTC datetime, comparable with stored timestamps."""
    local_now = (now or datetime.now(timezone.utc)).astimezone()
    midnight = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight.astimezone(timezone.utc).replace(tzinfo=None)


def get_affiliate_dashboard(db: Session, account: Account) -> AffiliateDashboard:
    clicks = db.query(ClickEvent).filter(ClickEvent.affiliate_id == account.id)
    total_clicks = clicks.count()
    today_clicks = clicks.filter(ClickEvent.created_at >= start_of_local_day()).count()

    payouts = (
        db.query(PayoutRequest)
        .filter(PayoutRequest.affiliate_id == account.id)
        .order_by(PayoutRequest.created_at.desc())
        .all()
    )

    return AffiliateDashboard(
        referral_link=build_referral_link(account.referral_code),
        total_clicks=total_clicks,
        today_clicks=today_clicks,
        payouts=[PayoutRow.model_validate(row) for row in payouts],
    )
