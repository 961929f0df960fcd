from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.exceptions import LoginRequired
from app.db.models import Account
from app.db.session import get_db
from app.services.session_service import SessionIdentity, load_identity

AFFILIATE_LOGIN_URL = "/login"
ADMIN_LOGIN_URL = "/admin/login"


def get_session_identity(request: Request, db: Session = Depends(get_db)) -> SessionIdentity:
    identity = load_identity(request.session, db)
    request.state.identity = identity
    return identity


def require_affiliate(identity: SessionIdentity = Depends(get_session_identity)) -> Account:
    if identity.affiliate is None:
        raise LoginRequired(AFFILIATE_LOGIN_URL)
    return identity.affiliate


def require_admin(identity: SessionIdentity = Depends(get_session_identity)) -> Account:
    if identity.admin is None:
        raise LoginRequired(ADMIN_LOGIN_URL)
    return identity.admin


def client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for", "")
    first = forwarded.split(",")[0].strip()
    if first:
        return first
    return request.client.host if request.client else None
