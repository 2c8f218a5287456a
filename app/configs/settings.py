from typing import List, Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

"""
Se carga automáticamente desde el archivo `.env` o las variables de entorno del sistema.
    - Define la configuración de base de datos, tokens, almacenamiento y feed.
    - Todos los valores tienen un default apto para desarrollo local con SQLite.
"""
class Settings(BaseSettings):
    SQLALCHEMY_DATABASE_URI: str = "sqlite+aiosqlite:///./clipstream.db"
    SQLITE_BUSY_TIMEOUT: float = 30.0

    SECRET_KEY: str = "dev-secret-key-change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    LOG_LEVEL: str = "INFO"
    AUTH_RATE_LIMIT: str = "10/minute"

    # Almacenamiento de videos
    UPLOAD_DIR: str = "./uploads"
    MAX_UPLOAD_SIZE: int = 20 * 1024 * 1024
    S3_BUCKET: Optional[str] = None
    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    PRESIGN_EXPIRES_SECONDS: int = 300

    FEED_DEFAULT_LIMIT: int = 10
    FEED_MAX_LIMIT: int = 20

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
