import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from sqlalchemy.orm import Session
from alumni_api.dependencies.db import get_db
from alumni_api.models.admin import Admin
from alumni_api.core.config import settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

credentials_exception = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)

def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> Admin:
    if credentials is None:
        logger.warning("Admin action refused: no session token")
        raise credentials_exception

    token = credentials.credentials
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
        admin_id: str = payload.get("sub")
        # refresh token 은 bearer 로 쓸 수 없다
        if payload.get("type") != "access":
            logger.warning("Admin action refused: not an access token")
            raise credentials_exception
        if admin_id is None or not str(admin_id).isdigit():
            raise credentials_exception
    except JWTError:
        logger.warning("Admin action refused: invalid or expired session token")
        raise credentials_exception

    admin = db.query(Admin).filter(Admin.id == int(admin_id)).first()
    if not admin:
        logger.warning(f"Admin action refused: admin {admin_id} not found")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return admin
