import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Enum as SqlEnum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

ADMIN_REFERRAL_CODE = "admin"


class AccountRole(str, Enum):
    affiliate = "affiliate"
    admin = "admin"


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    referral_code: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    role: Mapped[AccountRole] = mapped_column(SqlEnum(AccountRole), nullable=False, default=AccountRole.affiliate)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # No cascade: clicks and payouts keep their affiliate_id if the account goes away.
    clicks = relationship("ClickEvent", back_populates="affiliate", passive_deletes="all")
    payout_requests = relationship("PayoutRequest", back_populates="affiliate", passive_deletes="all")

    @property
    def is_affiliate(self) -> bool:
        return self.role == AccountRole.affiliate

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.admin
