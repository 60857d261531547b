import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from passlib.hash import bcrypt

from alumni_api.core.config import settings
from alumni_api.models.admin import Admin
from alumni_api.schemas.admin import AdminSessionResponse
from alumni_api.services.token_service import create_access_token, create_refresh_token_with_rotation

logger = logging.getLogger(__name__)


def sign_in_with_password(db: Session, email: str, password: str) -> AdminSessionResponse:
    admin = db.query(Admin).filter(Admin.email == email).first()
    if not admin or not bcrypt.verify(password, admin.password):
        logger.info(f"Admin login failed - email: {email}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password.")

    logger.info(f"Admin login succeeded - email: {email}")
    access_token = create_access_token({"sub": str(admin.id)})
    refresh_token = create_refresh_token_with_rotation(db, admin.id)

    return AdminSessionResponse(
        id=admin.id,
        email=admin.email,
        access_token=access_token,
        refresh_token=refresh_token,
        message="Successfully logged in."
    )


def ensure_default_admin(db: Session) -> Admin | None:
    """
    .env 의 ADMIN_EMAIL / ADMIN_PASSWORD_HASH 로 최초 관리자 계정을 만든다.
    이미 있으면 그대로 둔다.
    """
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD_HASH:
        logger.warning("ADMIN_EMAIL / ADMIN_PASSWORD_HASH not set; skipping default admin")
        return None

    admin = db.query(Admin).filter(Admin.email == settings.ADMIN_EMAIL).first()
    if admin:
        return admin

    admin = Admin(email=settings.ADMIN_EMAIL, password=settings.ADMIN_PASSWORD_HASH)
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Default admin created: {admin.email}")
    return admin
