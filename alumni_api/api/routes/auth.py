import logging

from fastapi import APIRouter, Depends, Body
from sqlalchemy.orm import Session

from alumni_api.dependencies.db import get_db
from alumni_api.dependencies.admin_auth import get_current_admin
from alumni_api.models.admin import Admin
from alumni_api.schemas.admin import (
    AdminLoginRequest, AdminSessionResponse, AdminInfoResponse,
    TokenRefreshRequest, TokenResponse, LogoutResponse
)
from alumni_api.services.admin_auth_service import sign_in_with_password
from alumni_api.services.token_service import rotate_refresh_token, revoke_refresh_tokens

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=AdminSessionResponse, summary="관리자 로그인")
def admin_login(
    login_req: AdminLoginRequest = Body(...),
    db: Session = Depends(get_db)
):
    """
    이메일과 비밀번호(bcrypt 해시 비교)로 로그인하고 access/refresh token 을 발급합니다.
    """
    return sign_in_with_password(db, login_req.email, login_req.password)


@router.get("/session", response_model=AdminInfoResponse, summary="현재 로그인 세션 조회")
def get_session(admin: Admin = Depends(get_current_admin)):
    return AdminInfoResponse.model_validate(admin)


@router.post("/logout", response_model=LogoutResponse, summary="관리자 로그아웃")
def admin_logout(
    admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    revoked = revoke_refresh_tokens(db, admin.id)
    logger.info(f"Admin logged out - email: {admin.email}, revoked tokens: {revoked}")
    return LogoutResponse(message="Successfully logged out.", revoked=revoked)


@router.post("/refresh", response_model=TokenResponse, summary="리프레시 토큰으로 재발급")
def refresh_token(
    req: TokenRefreshRequest = Body(...),
    db: Session = Depends(get_db)
):
    access_token, new_refresh_token = rotate_refresh_token(db, req.refresh_token)
    return TokenResponse(access_token=access_token, refresh_token=new_refresh_token)
