from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.apis.deps import auth_required
from app.schemas.uploads.upload_schema import LocalUploadResponse, PresignRequest, PresignResponse
from app.services.externals.storage_service import create_upload_target, save_local_upload

router = APIRouter()


@router.post("/presign", response_model=PresignResponse, dependencies=[Depends(auth_required)])
async def presign(request: PresignRequest):
    """
    Devuelve el destino de subida de un video.

    Con S3 configurado: URL prefirmada para un PUT directo (expira en 5 minutos).
    Sin S3: `local = true` y la `key` que debe enviarse a /api/upload/local.

    Example:
        POST /api/upload/presign
        {"filename": "my clip.mp4", "content_type": "video/mp4"}

        Response (sin S3):
        {
            "success": true,
            "message": "Upload target created",
            "data": {
                "presigned_url": null,
                "final_url": "/uploads/1718000000000-my_clip.mp4",
                "local": true,
                "key": "uploads/1718000000000-my_clip.mp4"
            }
        }
    """
    target = await create_upload_target(request.filename, request.content_type)
    return {
        "success": True,
        "message": "Upload target created",
        "data": target,
    }


@router.post("/local", response_model=LocalUploadResponse, dependencies=[Depends(auth_required)])
async def upload_local(
    file: UploadFile = File(...),
    key: str = Form(...),
):
    """Recibe el video (máximo 20 MB, video/*) y lo guarda en el directorio de subidas."""
    saved = await save_local_upload(file, key)
    return {
        "success": True,
        "message": "File uploaded successfully",
        "data": saved,
    }
