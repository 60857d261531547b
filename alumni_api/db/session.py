from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from alumni_api.core.config import settings

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    # 모델을 import 해야 Base.metadata 에 테이블이 등록된다
    import alumni_api.models.alumni  # noqa: F401
    import alumni_api.models.notice  # noqa: F401
    import alumni_api.models.admin  # noqa: F401
    import alumni_api.models.admin_refresh_token  # noqa: F401
    from alumni_api.db.base import Base

    Base.metadata.create_all(bind=engine)
