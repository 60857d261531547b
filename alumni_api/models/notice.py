from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, func
from alumni_api.db.base import Base

class Notice(Base):
    __tablename__ = "notices"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    created_by = Column(String(128), nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())
