import os
from pathlib import Path
from typing import Optional

import magic
from fastapi import UploadFile, HTTPException

from app.configs.settings import settings


class FileValidator:
    """Validador de videos subidos con verificación de extensión, content-type, MIME y tamaño."""

    ALLOWED_EXTENSIONS = [".mp4", ".mpeg", ".mov", ".webm", ".avi", ".mkv", ".m4v"]

    @staticmethod
    def sniff_mime(content: bytes) -> str:
        """Detecta el MIME real del contenido usando python-magic (libmagic)."""
        return magic.from_buffer(content, mime=True)

    @staticmethod
    async def validate_video(file: UploadFile, max_size: Optional[int] = None) -> dict:
        """
        Valida un video subido antes de escribirlo en disco.

        Args:
            file: Archivo subido de FastAPI
            max_size: Tamaño máximo en bytes (usa MAX_UPLOAD_SIZE si no se especifica)

        Returns:
            dict con el contenido y metadatos del archivo validado

        Raises:
            HTTPException (400) si la validación falla
        """
        if not file or not file.filename:
            raise HTTPException(status_code=400, detail="Missing file")

        file_ext = Path(file.filename).suffix.lower()
        if file_ext not in FileValidator.ALLOWED_EXTENSIONS:
            raise HTTPException(
                status_code=400,
                detail=f"Extension not allowed. Valid extensions: {', '.join(FileValidator.ALLOWED_EXTENSIONS)}"
            )

        if not (file.content_type or "").startswith("video/"):
            raise HTTPException(status_code=400, detail="Invalid file type. Must be video/*")

        content = await file.read()
        await file.seek(0)

        file_size = len(content)
        max_allowed = max_size or settings.MAX_UPLOAD_SIZE
        if file_size > max_allowed:
            raise HTTPException(
                status_code=400,
                detail=f"File too large. Max {max_allowed / (1024 * 1024):.0f}MB"
            )
        if file_size == 0:
            raise HTTPException(status_code=400, detail="File is empty")

        mime = FileValidator.sniff_mime(content)
        if not mime.startswith("video/"):
            raise HTTPException(
                status_code=400,
                detail=f"Invalid file content. Detected MIME: {mime}"
            )

        return {
            "original_filename": file.filename,
            "file_size": file_size,
            "mime_type": mime,
            "extension": file_ext,
            "content": content,
        }

    @staticmethod
    async def save_validated_video(file: UploadFile, destination_dir: str, filename: str) -> dict:
        """
        Valida y guarda un video con el nombre indicado dentro de `destination_dir`.

        Returns:
            dict con información del archivo guardado (path, metadata)
        """
        validation_result = await FileValidator.validate_video(file)

        os.makedirs(destination_dir, exist_ok=True)
        file_path = os.path.join(destination_dir, filename)

        with open(file_path, "wb") as f:
            f.write(validation_result.pop("content"))

        return {
            **validation_result,
            "file_path": file_path,
        }
