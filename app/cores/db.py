"""
Configuración de SQLAlchemy para trabajar con base de datos de forma asincrónica.
Soporta SQLite (desarrollo y pruebas) y cualquier URL async de SQLAlchemy en producción.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from app.configs.settings import settings

# Obtener la URL de la base de datos desde settings (.env)
DATABASE_URL = settings.SQLALCHEMY_DATABASE_URI


def _enable_sqlite_locking(engine: AsyncEngine) -> None:
    """
    En SQLite cada transacción se abre con BEGIN IMMEDIATE para tomar el lock de
    escritura desde el inicio; así dos transacciones de like/unlike nunca leen
    el mismo estado y escriben ambas. También activa las llaves foráneas.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # aiosqlite no debe emitir su propio BEGIN
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # SQLite requiere check_same_thread=False para async; timeout = espera ante lock
        connect_args = {"check_same_thread": False, "timeout": settings.SQLITE_BUSY_TIMEOUT}

    engine = create_async_engine(
        database_url,
        connect_args=connect_args,
        echo=False,
        **kwargs
    )
    if database_url.startswith("sqlite"):
        _enable_sqlite_locking(engine)
    return engine


engine = build_engine(DATABASE_URL)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False
)

Base = declarative_base()
