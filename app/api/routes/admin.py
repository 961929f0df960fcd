import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.deps import require_admin
from app.core.exceptions import InvalidCredentials
from app.core.templating import render
from app.db.models import Account, PayoutStatus
from app.db.session import get_db
from app.services import admin_service, auth_service
from app.services.payout_service import adjudicate_payout
from app.services.session_service import ADMIN_SLOT, sign_in, sign_out

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/admin/login")
def admin_login_form(request: Request):
    return render(request, "admin_login")


@router.post("/admin/login")
def admin_login(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    try:
        admin = auth_service.login_admin(db, email, password)
    except InvalidCredentials as exc:
        return render(request, "admin_login", {"error": exc.message, "email": email})
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Admin login failed for %s", email)
        return render(request, "admin_login", {"error": "Something went wrong.", "email": email})

    sign_in(request.session, ADMIN_SLOT, admin)
    return RedirectResponse("/admin", status_code=303)


@router.get("/admin/logout")
def admin_logout(request: Request):
    sign_out(request.session, ADMIN_SLOT)
    return RedirectResponse("/admin/login", status_code=303)


@router.get("/admin")
def admin_dashboard(
    request: Request,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
):
    return render(request, "admin_dashboard", {"overview": admin_service.get_admin_overview(db)})


@router.get("/admin/affiliates")
def admin_affiliates(
    request: Request,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
):
    return render(request, "admin_affiliates", {"affiliates": admin_service.list_affiliates(db)})


@router.get("/admin/clicks")
def admin_clicks(
    request: Request,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
):
    return render(request, "admin_clicks", {"clicks": admin_service.list_clicks(db)})


@router.get("/admin/payouts")
def admin_payouts(
    request: Request,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
):
    return render(request, "admin_payouts", {"payouts": admin_service.list_payouts(db)})


@router.post("/admin/payouts/{payout_id}/approve")
def admin_approve_payout(
    payout_id: str,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
):
    adjudicate_payout(db, payout_id, PayoutStatus.approved)
    return RedirectResponse("/admin/payouts", status_code=303)


@router.post("/admin/payouts/{payout_id}/reject")
def admin_reject_payout(
    payout_id: str,
    db: Session = Depends(get_db),
    _: Account = Depends(require_admin),
):
    adjudicate_payout(db, payout_id, PayoutStatus.rejected)
    return RedirectResponse("/admin/payouts", status_code=303)
