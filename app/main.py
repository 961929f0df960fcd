import logging

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.sessions import SessionMiddleware

from app.api.routes import web_router
from app.core.config import get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import setup_logging
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.middleware.request_context import RequestContextMiddleware
from app.services.auth_service import bootstrap_admin

settings = get_settings()
setup_logging(logging.DEBUG if settings.DEBUG else logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)
app.include_router(web_router)
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET,
    session_cookie=settings.SESSION_COOKIE_NAME,
    same_site="lax",
)
register_exception_handlers(app)


def _bootstrap_admin() -> None:
    db = SessionLocal()
    try:
        bootstrap_admin(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Admin bootstrap failed")
    finally:
        db.close()


@app.on_event("startup")
async def on_startup():
    Base.metadata.create_all(bind=engine)
    _bootstrap_admin()
    logger.info("%s ready on port %s", settings.APP_NAME, settings.BACKEND_PORT)
