from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from app.db.models import PayoutStatus


class PayoutRow(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: Decimal
    status: PayoutStatus
    created_at: datetime
    processed_at: datetime | None = None


class AffiliateDashboard(BaseModel):
    referral_link: str
    total_clicks: int
    today_clicks: int
    payouts: list[PayoutRow]


class AdminOverview(BaseModel):
    total_affiliates: int
    total_clicks: int
    pending_payouts: int
