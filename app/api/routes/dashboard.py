from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.api.deps import require_affiliate
from app.core.templating import render
from app.db.models import Account
from app.db.session import get_db
from app.services.dashboard_service import get_affiliate_dashboard
from app.services.payout_service import request_payout
from app.services.session_service import ADMIN_SLOT, AFFILIATE_SLOT

router = APIRouter()


@router.get("/")
def home(request: Request):
    if request.session.get(AFFILIATE_SLOT):
        return RedirectResponse("/dashboard", status_code=303)
    if request.session.get(ADMIN_SLOT):
        return RedirectResponse("/admin", status_code=303)
    return RedirectResponse("/login", status_code=303)


@router.get("/dashboard")
def dashboard(
    request: Request,
    db: Session = Depends(get_db),
    affiliate: Account = Depends(require_affiliate),
):
    data = get_affiliate_dashboard(db, affiliate)
    return render(request, "dashboard", {"dashboard": data, "affiliate": affiliate})


@router.post("/payout-request")
def payout_request(
    amount: str | None = Form(None),
    db: Session = Depends(get_db),
    affiliate: Account = Depends(require_affiliate),
):
    # Invalid amounts are dropped without a message; the dashboard is shown either way.
    request_payout(db, affiliate.id, amount)
    return RedirectResponse("/dashboard", status_code=303)
