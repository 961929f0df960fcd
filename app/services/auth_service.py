import logging
import uuid

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateEmail, InvalidCredentials, ValidationError
from app.core.security import hash_password, verify_password
from app.db.models import ADMIN_REFERRAL_CODE, Account, AccountRole
from app.services.referral_service import assign_referral_code

logger = logging.getLogger(__name__)

ADMIN_DISPLAY_NAME = "Super Admin"

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def _validated_email(email: str) -> str:
    try:
        return normalize_email(_email_adapter.validate_python(email))
    except PydanticValidationError as exc:
        raise ValidationError("Enter a valid email address.") from exc


def register_affiliate(db: Session, name: str, email: str, password: str) -> Account:
    name = (name or "").strip()
    email = normalize_email(email)
    if not name or not email or not password:
        raise ValidationError("All fields are required.")
    email = _validated_email(email)

    existing = db.query(Account).filter(Account.email == email).first()
    if existing:
        raise DuplicateEmail("This email is already registered.")

    # The final code needs the store-assigned id, so insert with a placeholder first.
    account = Account(
        name=name,
        email=email,
        password_hash=hash_password(password),
        referral_code=f"temp-{uuid.uuid4().hex}",
        role=AccountRole.affiliate,
    )
    db.add(account)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateEmail("This email is already registered.") from exc
    db.refresh(account)

    assign_referral_code(db, account)
    db.commit()
    db.refresh(account)
    logger.info("Affiliate registered: %s (%s)", account.email, account.referral_code)
    return account


def login_affiliate(db: Session, email: str, password: str) -> Account:
    email = normalize_email(email)
    if not email or not password:
        raise ValidationError("Email and password are required.")

    account = (
        db.query(Account)
        .filter(Account.email == email, Account.role == AccountRole.affiliate)
        .first()
    )
    # Same message for unknown email and wrong password.
    if not account or not verify_password(password, account.password_hash):
        logger.warning("Failed affiliate login for %s", email)
        raise InvalidCredentials("Invalid email or password.")
    return account


def login_admin(db: Session, email: str, password: str) -> Account:
    email = normalize_email(email)
    admin = (
        db.query(Account)
        .filter(Account.email == email, Account.role == AccountRole.admin)
        .first()
    )
    if not admin:
        logger.warning("Admin login for unknown email %s", email)
        raise InvalidCredentials("Admin not found")
    if not verify_password(password, admin.password_hash):
        logger.warning("Admin login with wrong password for %s", email)
        raise InvalidCredentials("Wrong password")
    return admin


def bootstrap_admin(db: Session, email: str | None, password: str | None) -> Account | None:
    """Create the admin account from configuration unless it already exists."""
    email = normalize_email(email)
    if not email or not password:
        logger.warning("Set ADMIN_EMAIL and ADMIN_PASSWORD to bootstrap an admin account.")
        return None

    existing = db.query(Account).filter(Account.email == email).first()
    if existing:
        if existing.role == AccountRole.admin:
            logger.info("Admin already exists: %s", email)
            return existing
        logger.error("Cannot bootstrap admin %s: email is registered to an affiliate", email)
        return None

    admin = Account(
        name=ADMIN_DISPLAY_NAME,
        email=email,
        password_hash=hash_password(password),
        referral_code=ADMIN_REFERRAL_CODE,
        role=AccountRole.admin,
    )
    db.add(admin)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.error("Cannot bootstrap admin %s: referral code %r is already taken", email, ADMIN_REFERRAL_CODE)
        return None
    db.refresh(admin)
    logger.info("Admin created: %s", email)
    return admin
