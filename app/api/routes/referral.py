from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.api.deps import client_ip
from app.db.session import get_db
from app.services.referral_service import resolve_and_record_click

router = APIRouter()


@router.get("/r/{code:path}", response_class=PlainTextResponse)
def follow_referral(code: str, request: Request, db: Session = Depends(get_db)):
    # Unknown codes raise NotFound, answered as a plain-text 404.
    affiliate = resolve_and_record_click(
        db,
        code,
        ip=client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )
    return PlainTextResponse(f"You clicked referral of {affiliate.name}.")
