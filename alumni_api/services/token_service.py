import jwt
from uuid import uuid4
from datetime import datetime, timedelta
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from alumni_api.models.admin_refresh_token import AdminRefreshToken
from alumni_api.core.config import settings

def create_access_token(data: dict) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

def create_refresh_token_with_rotation(db: Session, admin_id: int) -> str:
    expire = datetime.utcnow() + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    # jti 로 같은 초에 발급된 토큰끼리도 문자열이 겹치지 않게 한다
    to_encode = {"sub": str(admin_id), "exp": expire, "type": "refresh", "jti": uuid4().hex}
    refresh_token = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    db_token = AdminRefreshToken(
        token=refresh_token,
        admin_id=admin_id,
        created_at=datetime.utcnow(),
        expired_at=expire
    )
    db.add(db_token)
    db.commit()
    db.refresh(db_token)

    return refresh_token

def rotate_refresh_token(db: Session, refresh_token: str) -> tuple[str, str]:
    try:
        payload = jwt.decode(refresh_token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Refresh token expired")
    except jwt.PyJWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    admin_id = payload.get("sub")
    if not admin_id or payload.get("type") != "refresh":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")

    db_token = db.query(AdminRefreshToken).filter_by(token=refresh_token).first()
    if not db_token or db_token.is_revoked:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Refresh token is invalid or already used")

    db_token.is_revoked = True
    db.commit()

    new_access_token = create_access_token({"sub": admin_id})
    new_refresh_token = create_refresh_token_with_rotation(db, int(admin_id))

    return new_access_token, new_refresh_token

def revoke_refresh_tokens(db: Session, admin_id: int) -> int:
    """ 로그아웃: 해당 관리자의 살아있는 refresh token 을 모두 폐기 """
    tokens = db.query(AdminRefreshToken).filter(
        AdminRefreshToken.admin_id == admin_id,
        AdminRefreshToken.is_revoked.is_(False)
    ).all()
    for token in tokens:
        token.is_revoked = True
    db.commit()
    return len(tokens)
