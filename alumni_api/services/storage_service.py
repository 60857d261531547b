import io
import os
import logging
from uuid import uuid4

import boto3
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError
from fastapi import HTTPException, status

from alumni_api.core.config import settings

logger = logging.getLogger(__name__)

s3_client = boto3.client(
    "s3",
    aws_access_key_id=settings.AWS_ACCESS_KEY,
    aws_secret_access_key=settings.AWS_SECRET_KEY,
    region_name=settings.AWS_REGION,
    endpoint_url=settings.AWS_S3_ENDPOINT_URL
)


def generate_file_name(filename: str | None) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    return f"{uuid4().hex}{ext}"


def get_public_url(bucket: str, name: str) -> str:
    if settings.AWS_S3_ENDPOINT_URL:
        return f"{settings.AWS_S3_ENDPOINT_URL.rstrip('/')}/{bucket}/{name}"
    return f"https://{bucket}.s3.{settings.AWS_REGION}.amazonaws.com/{name}"


def upload_image(bucket: str, filename: str | None, data: bytes, content_type: str | None = None) -> str:
    """
    이미지를 bucket 에 고유 이름으로 업로드하고 공개 URL 을 반환합니다.
    실패하면 502 를 던지고, 호출 측은 레코드를 저장하지 않습니다.
    """
    name = generate_file_name(filename)
    extra_args = {"ContentType": content_type} if content_type else {}
    try:
        s3_client.upload_fileobj(io.BytesIO(data), bucket, name, ExtraArgs=extra_args)
    except NoCredentialsError:
        logger.error("S3 upload failed: missing credentials")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Storage credentials are not configured.")
    except (BotoCoreError, ClientError) as e:
        logger.error(f"S3 upload failed: bucket={bucket} name={name} error={e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Image upload failed: {str(e)}")

    logger.info(f"Image uploaded: bucket={bucket} name={name} size={len(data)}")
    return get_public_url(bucket, name)


def delete_image(bucket: str, url: str) -> None:
    """
    upload_image 로 올린 객체를 지운다. 레코드 저장이 실패했을 때만 쓰인다.
    원래 오류를 가리지 않도록 삭제 실패는 기록만 한다.
    """
    name = url.rsplit("/", 1)[-1]
    try:
        s3_client.delete_object(Bucket=bucket, Key=name)
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Orphaned image left in storage: bucket={bucket} name={name} error={e}")
        return
    logger.info(f"Image removed: bucket={bucket} name={name}")
