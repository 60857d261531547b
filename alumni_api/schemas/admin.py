from pydantic import BaseModel, EmailStr
from typing import Optional

class AdminLoginRequest(BaseModel):
    email: EmailStr
    password: str

class AdminSessionResponse(BaseModel):
    id: int
    email: str
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    message: Optional[str] = None

class AdminInfoResponse(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True

class TokenRefreshRequest(BaseModel):
    refresh_token: str

class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"

class LogoutResponse(BaseModel):
    message: str
    revoked: int
