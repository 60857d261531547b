import pytest
from fastapi.testclient import TestClient
from passlib.hash import bcrypt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from alumni_api.main import app
from alumni_api.db.base import Base
from alumni_api.dependencies.db import get_db
from alumni_api.models.admin import Admin
from alumni_api.services import storage_service
import alumni_api.models.alumni  # noqa: F401
import alumni_api.models.notice  # noqa: F401
import alumni_api.models.admin  # noqa: F401
import alumni_api.models.admin_refresh_token  # noqa: F401

ADMIN_EMAIL = "admin@sas-alumni.org"
ADMIN_PASSWORD = "testpassword123!"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def uploads(monkeypatch):
    """ S3 업로드 대신 호출 기록만 남긴다 """
    calls = []

    def fake_upload(bucket, filename, data, content_type=None):
        calls.append({"bucket": bucket, "filename": filename, "size": len(data), "content_type": content_type})
        return f"https://{bucket}.example-storage.local/{len(calls)}-{filename}"

    monkeypatch.setattr(storage_service, "upload_image", fake_upload)
    return calls


class FakeS3Client:
    """ upload_fileobj / delete_object 만 흉내내는 S3 클라이언트 """

    def __init__(self):
        self.objects = {}
        self.deleted = []
        self.error = None

    def upload_fileobj(self, fileobj, bucket, key, ExtraArgs=None):
        if self.error is not None:
            raise self.error
        self.objects[(bucket, key)] = {"body": fileobj.read(), "extra_args": ExtraArgs}

    def delete_object(self, Bucket, Key):
        self.deleted.append((Bucket, Key))
        self.objects.pop((Bucket, Key), None)


@pytest.fixture
def s3(monkeypatch):
    fake = FakeS3Client()
    monkeypatch.setattr(storage_service, "s3_client", fake)
    return fake


@pytest.fixture
def admin(db_session):
    admin = Admin(email=ADMIN_EMAIL, password=bcrypt.hash(ADMIN_PASSWORD))
    db_session.add(admin)
    db_session.commit()
    db_session.refresh(admin)
    return admin


@pytest.fixture
def admin_tokens(client, admin):
    resp = client.post("/api/v1/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return resp.json()


@pytest.fixture
def admin_headers(admin_tokens):
    return {"Authorization": f"Bearer {admin_tokens['access_token']}"}


@pytest.fixture
def admin_credentials():
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
