from typing import Any, Dict, Optional, Type, TypeVar

from sqlalchemy import and_, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.sql import Select

T = TypeVar('T')


class PaginationService:
    @staticmethod
    def clamp_limit(limit: Optional[int], default: int, maximum: int) -> int:
        """Normaliza el tamaño de página al rango [1, maximum]."""
        if limit is None:
            return default
        return max(1, min(int(limit), maximum))

    @staticmethod
    async def get_keyset_page(
        db: AsyncSession,
        model: Type[T],
        query: Select,
        cursor: Optional[str] = None,
        limit: int = 10,
    ) -> Dict[str, Any]:
        """
        Paginación por cursor (keyset) en orden `created_at DESC, id DESC`.

        El cursor es el id del último elemento de la página anterior; la página
        siguiente empieza estrictamente después de él. El id rompe empates de
        `created_at`, así que el orden es total y ninguna fila se repite ni se salta.

        Args:
            db: Sesión de base de datos
            model: Modelo SQLAlchemy con columnas `id` y `created_at`
            query: Consulta base (select del modelo, con sus opciones de carga)
            cursor: id del último elemento ya entregado (None = primera página)
            limit: Cantidad de elementos por página

        Returns:
            dict con `items` y `next_cursor` (None al llegar al final)

        ejemplo de uso:
        // Primera carga
        fetch('/feed?limit=10')

        // Usuario hace scroll → cargar más
        fetch('/feed?limit=10&cursor=<next_cursor>')
        """
        if cursor is not None:
            anchor = (
                await db.execute(
                    select(model.created_at, model.id).where(model.id == cursor)
                )
            ).first()
            if anchor is None:
                # Cursor de una fila que ya no existe: continuación vacía
                return {"items": [], "next_cursor": None}

            query = query.where(
                or_(
                    model.created_at < anchor.created_at,
                    and_(model.created_at == anchor.created_at, model.id < anchor.id),
                )
            )

        query = query.order_by(model.created_at.desc(), model.id.desc()).limit(limit + 1)
        result = await db.execute(query)
        items = list(result.scalars().all())

        next_cursor = None
        if len(items) > limit:
            items = items[:limit]
            next_cursor = items[-1].id

        return {"items": items, "next_cursor": next_cursor}
