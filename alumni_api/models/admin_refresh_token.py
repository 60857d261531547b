from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
from alumni_api.db.base import Base

class AdminRefreshToken(Base):
    __tablename__ = "admin_refresh_tokens"

    id = Column(Integer, primary_key=True, index=True)
    token = Column(String(512), unique=True, nullable=False)
    admin_id = Column(Integer, ForeignKey("admin.id"), nullable=False, index=True)
    is_revoked = Column(Boolean, default=False)
    created_at = Column(DateTime)
    expired_at = Column(DateTime)
