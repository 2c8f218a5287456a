"""
Este bloque define la configuración de inicio (lifespan) y creación de la aplicación FastAPI.
Incluye tareas que deben ejecutarse al arrancar la aplicación, como la creación de tablas.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from app.configs.settings import settings
from app.cores.db import Base, engine
from app.cores.rate_limiter import limiter, rate_limit_exceeded_handler
from app.cores.security_headers import SecurityHeadersMiddleware

from app import models  # noqa: F401  registra las tablas en Base.metadata

from app.apis.auth_api import router as auth_router
from app.apis.videos_api import router as videos_router
from app.apis.upload_api import router as upload_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Función que se ejecuta al iniciar la aplicación.
    - Crea todas las tablas en la base de datos si no existen.
    - Al finalizar, continúa con la ejecución normal de la app (con `yield`).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Esquema de base de datos verificado")

    yield

    await engine.dispose()

"""
    Función que construye y retorna la instancia principal de la aplicación FastAPI.
    - Configura logging, CORS, headers de seguridad y el rate limiter.
    - Carga las rutas de auth, videos y subidas.
"""


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="ClipStream",
        lifespan=lifespan
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
    app.include_router(videos_router, prefix="/api/videos", tags=["Videos"])
    app.include_router(upload_router, prefix="/api/upload", tags=["Upload"])

    return app
