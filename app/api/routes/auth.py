import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateEmail, InvalidCredentials, ValidationError
from app.core.templating import render
from app.db.session import get_db
from app.services import auth_service
from app.services.session_service import AFFILIATE_SLOT, sign_in, sign_out

router = APIRouter()
logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong."


@router.get("/register")
def register_form(request: Request):
    return render(request, "register")


@router.post("/register")
def register(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    form = {"name": name, "email": email}
    try:
        account = auth_service.register_affiliate(db, name, email, password)
    except (ValidationError, DuplicateEmail) as exc:
        return render(request, "register", {"error": exc.message, **form})
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Registration failed for %s", email)
        return render(request, "register", {"error": GENERIC_ERROR, **form})

    sign_in(request.session, AFFILIATE_SLOT, account)
    return RedirectResponse("/dashboard", status_code=303)


@router.get("/login")
def login_form(request: Request):
    return render(request, "login")


@router.post("/login")
def login(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    try:
        account = auth_service.login_affiliate(db, email, password)
    except (ValidationError, InvalidCredentials) as exc:
        return render(request, "login", {"error": exc.message, "email": email})
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Affiliate login failed for %s", email)
        return render(request, "login", {"error": GENERIC_ERROR, "email": email})

    sign_in(request.session, AFFILIATE_SLOT, account)
    return RedirectResponse("/dashboard", status_code=303)


@router.get("/logout")
def logout(request: Request):
    sign_out(request.session, AFFILIATE_SLOT)
    return RedirectResponse("/login", status_code=303)
