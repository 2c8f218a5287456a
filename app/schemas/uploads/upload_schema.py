from typing import Optional

from pydantic import BaseModel, Field


class PresignRequest(BaseModel):
    filename: str = Field(..., min_length=1, max_length=255)
    content_type: str = Field(..., min_length=1)


class PresignData(BaseModel):
    """
    Instrucciones de subida.
        - local = False: hacer PUT del archivo a `presigned_url`.
        - local = True: enviar el archivo a /api/upload/local con `key`.
    En ambos casos `final_url` es la URL que se guarda como Video.url.
    """
    presigned_url: Optional[str] = None
    final_url: str
    local: bool
    key: str


class PresignResponse(BaseModel):
    success: bool
    message: str
    data: PresignData


class LocalUploadData(BaseModel):
    url: str
    file_size: int
    mime_type: str


class LocalUploadResponse(BaseModel):
    success: bool
    message: str
    data: LocalUploadData
