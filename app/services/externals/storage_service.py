import logging
import os
import re
import time
from typing import Any, Dict

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import HTTPException, UploadFile

from app.configs.settings import settings
from app.cores.file_validator import FileValidator
from app.services.validation.exception import invalid_content_type_exception, unexpected_exception

logger = logging.getLogger(__name__)


def sanitize_filename(filename: str) -> str:
    return re.sub(r"[^a-zA-Z0-9.-]", "_", filename)


def _timestamped(filename: str) -> str:
    return f"{int(time.time() * 1000)}-{sanitize_filename(filename)}"


def s3_enabled() -> bool:
    return bool(settings.S3_BUCKET and settings.AWS_ACCESS_KEY_ID)


def _s3_client():
    return boto3.client(
        "s3",
        region_name=settings.AWS_REGION,
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
    )


async def create_upload_target(filename: str, content_type: str) -> Dict[str, Any]:
    """
    Devuelve a dónde subir el archivo y la URL final que tendrá.

    Con S3 configurado genera un PUT prefirmado; sin S3 devuelve las
    instrucciones para la subida local.
    """
    if not content_type.startswith("video/"):
        await invalid_content_type_exception()

    name = _timestamped(filename)

    if not s3_enabled():
        return {
            "presigned_url": None,
            "final_url": f"/uploads/{name}",
            "local": True,
            "key": f"uploads/{name}",
        }

    if not settings.AWS_SECRET_ACCESS_KEY:
        logger.error("AWS_SECRET_ACCESS_KEY is required for S3 uploads")
        await unexpected_exception()

    key = f"videos/{name}"
    try:
        presigned_url = _s3_client().generate_presigned_url(
            "put_object",
            Params={
                "Bucket": settings.S3_BUCKET,
                "Key": key,
                "ContentType": content_type,
                "ACL": "public-read",
            },
            ExpiresIn=settings.PRESIGN_EXPIRES_SECONDS,
        )
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Error generando URL prefirmada para {key}: {str(e)}")
        await unexpected_exception()

    final_url = f"https://{settings.S3_BUCKET}.s3.{settings.AWS_REGION}.amazonaws.com/{key}"
    logger.info(f"URL prefirmada generada: key={key}")
    return {
        "presigned_url": presigned_url,
        "final_url": final_url,
        "local": False,
        "key": key,
    }


async def save_local_upload(file: UploadFile, key: str) -> Dict[str, Any]:
    """
    Guarda el video en UPLOAD_DIR usando el nombre contenido en `key`
    (formato uploads/<timestamp>-<nombre>) y devuelve su URL pública.
    """
    filename = sanitize_filename(os.path.basename(key or ""))
    if not filename.strip("."):
        filename = _timestamped(file.filename or "video")

    try:
        saved = await FileValidator.save_validated_video(file, settings.UPLOAD_DIR, filename)
    except HTTPException as e:
        logger.warning(f"Subida rechazada ({file.filename}): {e.detail}")
        raise

    logger.info(f"Video guardado localmente: {saved['file_path']} ({saved['file_size']} bytes)")
    return {
        "url": f"/uploads/{filename}",
        "file_size": saved["file_size"],
        "mime_type": saved["mime_type"],
    }
