import io

import pytest
from botocore.exceptions import ClientError, NoCredentialsError
from fastapi import HTTPException, UploadFile
from sqlalchemy.exc import OperationalError
from starlette.datastructures import Headers

from alumni_api.core.config import settings
from alumni_api.models.alumni import Alumni, PendingAlumni
from alumni_api.schemas.alumni import DraftProfile
from alumni_api.services import storage_service
from alumni_api.services.alumni_service import attach_image, discard_uploaded_image
from alumni_api.services.validation import validate_draft

SUBMISSION = {
    "name": "Tanvir Hasan",
    "session": "2018-19",
    "faculty": "Agriculture",
    "profession": "Student",
    "upazilla": "Kalaroa",
}

ACCESS_DENIED = ClientError({"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "PutObject")


def broken_commit():
    raise OperationalError("COMMIT", {}, Exception("database is locked"))


def test_generate_file_name_keeps_extension():
    first = storage_service.generate_file_name("Photo.JPG")
    second = storage_service.generate_file_name("Photo.JPG")
    assert first.endswith(".jpg")
    assert first != second
    assert storage_service.generate_file_name(None).isalnum()


def test_public_url_with_custom_endpoint(monkeypatch):
    monkeypatch.setattr(settings, "AWS_S3_ENDPOINT_URL", "http://localhost:9000/")
    assert storage_service.get_public_url("alumni-photo", "a.png") == "http://localhost:9000/alumni-photo/a.png"


def test_public_url_on_aws(monkeypatch):
    monkeypatch.setattr(settings, "AWS_S3_ENDPOINT_URL", None)
    monkeypatch.setattr(settings, "AWS_REGION", "ap-south-1")
    url = storage_service.get_public_url("alumni-photo", "a.png")
    assert url == "https://alumni-photo.s3.ap-south-1.amazonaws.com/a.png"


def test_upload_image_stores_object(s3):
    url = storage_service.upload_image("alumni-photo", "me.png", b"png-bytes", "image/png")
    (bucket, key), stored = next(iter(s3.objects.items()))
    assert bucket == "alumni-photo"
    assert key.endswith(".png")
    assert url.endswith(f"/{key}")
    assert stored == {"body": b"png-bytes", "extra_args": {"ContentType": "image/png"}}


@pytest.mark.parametrize("error", [ACCESS_DENIED, NoCredentialsError()])
def test_upload_failure_is_bad_gateway(s3, error):
    s3.error = error
    with pytest.raises(HTTPException) as exc_info:
        storage_service.upload_image("alumni-photo", "me.png", b"x", "image/png")
    assert exc_info.value.status_code == 502
    assert s3.objects == {}


def test_delete_image_uses_key_from_url(s3):
    storage_service.delete_image("alumni-photo", "https://alumni-photo.s3.ap-south-1.amazonaws.com/abc.png")
    assert s3.deleted == [("alumni-photo", "abc.png")]


def test_submission_upload_failure_stores_nothing(client, db_session, s3):
    s3.error = ACCESS_DENIED
    resp = client.post(
        "/api/v1/submissions",
        data=SUBMISSION,
        files={"image": ("me.png", b"\x89PNG fake image", "image/png")}
    )
    assert resp.status_code == 502
    assert db_session.query(PendingAlumni).count() == 0


def test_submission_with_real_upload_path(client, db_session, s3):
    resp = client.post(
        "/api/v1/submissions",
        data=SUBMISSION,
        files={"image": ("me.png", b"\x89PNG fake image", "image/png")}
    )
    assert resp.status_code == 201
    (bucket, key), = s3.objects
    assert bucket == settings.PENDING_PHOTO_BUCKET
    assert db_session.query(PendingAlumni).one().image.endswith(f"/{key}")


def test_submission_commit_failure_removes_uploaded_image(client, db_session, s3, monkeypatch):
    monkeypatch.setattr(db_session, "commit", broken_commit)
    resp = client.post(
        "/api/v1/submissions",
        data=SUBMISSION,
        files={"image": ("me.png", b"\x89PNG fake image", "image/png")}
    )
    assert resp.status_code == 500
    assert len(s3.deleted) == 1
    assert s3.objects == {}


def test_edit_commit_failure_keeps_existing_photo(client, db_session, admin_headers, s3, monkeypatch):
    created = client.post(
        "/api/v1/admin/alumni",
        data=SUBMISSION,
        files={"image": ("old.png", b"old", "image/png")},
        headers=admin_headers
    ).json()
    old_key = created["image"].rsplit("/", 1)[-1]

    monkeypatch.setattr(db_session, "commit", broken_commit)
    resp = client.patch(
        f"/api/v1/admin/alumni/{created['id']}",
        data={"village": "Sonabaria"},
        files={"image": ("new.png", b"new", "image/png")},
        headers=admin_headers
    )
    assert resp.status_code == 500
    assert len(s3.deleted) == 1
    assert s3.deleted[0][1] != old_key
    assert (settings.ADMIN_PHOTO_BUCKET, old_key) in s3.objects
    assert db_session.get(Alumni, created["id"]).image == created["image"]


def test_discard_ignores_existing_photo(s3):
    draft = DraftProfile(image="https://alumni-photo.s3.ap-south-1.amazonaws.com/old.png")
    discard_uploaded_image(draft, {"image": draft.image}, "alumni-photo")
    assert s3.deleted == []


def make_upload(body: bytes, size=None) -> UploadFile:
    return UploadFile(
        file=io.BytesIO(body),
        size=size,
        filename="big.jpg",
        headers=Headers({"content-type": "image/jpeg"})
    )


def test_attach_image_reads_only_past_the_limit():
    upload = make_upload(b"0" * 100)
    draft = DraftProfile(**SUBMISSION)
    data = attach_image(draft, upload, max_bytes=10)
    assert len(data) == 11
    assert upload.file.tell() == 11
    assert draft.attachment.size == 11
    assert list(validate_draft(draft, max_image_bytes=10).errors) == ["image"]


def test_attach_image_prefers_declared_size():
    draft = DraftProfile(**SUBMISSION)
    attach_image(draft, make_upload(b"0" * 100, size=5000), max_bytes=10)
    assert draft.attachment.size == 5000
    assert draft.attachment.content_type == "image/jpeg"
