from sqlalchemy import Column, Integer, String, TIMESTAMP, func
from alumni_api.db.base import Base

class Admin(Base):
    __tablename__ = "admin"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt 해시 저장
    created_at = Column(TIMESTAMP, server_default=func.now())
