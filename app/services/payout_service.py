import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from sqlalchemy.orm import Session

from app.core.exceptions import NotFound, ValidationError
from app.db.models import PayoutRequest, PayoutStatus

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
# Largest value a Numeric(12, 2) column holds.
MAX_PAYOUT_AMOUNT = Decimal("9999999999.99")


def parse_payout_amount(raw_amount) -> Decimal | None:
    """Return a positive amount rounded to cents, or None for anything unusable."""
    if raw_amount is None:
        return None
    text = str(raw_amount).strip()
    if not text:
        return None
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if amount <= 0 or amount > MAX_PAYOUT_AMOUNT:
        return None
    return amount


def request_payout(db: Session, affiliate_id: str, raw_amount) -> PayoutRequest | None:
    amount = parse_payout_amount(raw_amount)
    if amount is None:
        logger.debug("Ignoring payout request from %s with amount %r", affiliate_id, raw_amount)
        return None

    payout = PayoutRequest(affiliate_id=affiliate_id, amount=amount, status=PayoutStatus.pending)
    db.add(payout)
    db.commit()
    db.refresh(payout)
    logger.info("Payout requested: %s by %s for %s", payout.id, affiliate_id, amount)
    return payout


def adjudicate_payout(db: Session, payout_id: str, decision: str | PayoutStatus) -> PayoutRequest:
    """Move a pending request to approved or rejected.

    Processed requests are terminal: a second decision is logged and ignored,
    so ``processed_at`` keeps the time of the first one.
    """
    try:
        status = PayoutStatus(decision)
    except ValueError as exc:
        raise ValidationError(f"Unknown payout decision: {decision}") from exc
    if status == PayoutStatus.pending:
        raise ValidationError("A payout can only be approved or rejected")

    payout = db.query(PayoutRequest).filter(PayoutRequest.id == payout_id).first()
    if not payout:
        raise NotFound("Payout request not found")

    if not payout.is_pending:
        logger.warning(
            "Payout %s already %s, ignoring %s",
            payout.id,
            payout.status.value,
            status.value,
        )
        return payout

    payout.status = status
    payout.processed_at = datetime.utcnow()
    db.commit()
    db.refresh(payout)
    logger.info("Payout %s %s", payout.id, status.value)
    return payout
