"""
Validadores de entrada para prevenir XSS en los campos de texto libre.
Úsalos en los schemas de Pydantic para sanitizar automáticamente.
"""

from typing import Any, Optional

from app.cores.html_sanitizer import HTMLSanitizer


def sanitize_string_field(value: Any) -> str:
    """
    Validador para campos de texto que elimina todo el HTML.

    Uso en Pydantic:
        class MySchema(BaseModel):
            name: str

            _sanitize_name = field_validator('name')(sanitize_string_field)
    """
    if value is None:
        return ""

    if not isinstance(value, str):
        value = str(value)

    return HTMLSanitizer.sanitize_strict(value)


def sanitize_optional_field(value: Any) -> Optional[str]:
    """Igual que `sanitize_string_field` pero conserva None en campos opcionales."""
    if value is None:
        return None
    return sanitize_string_field(value)
