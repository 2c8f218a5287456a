import bleach


class HTMLSanitizer:
    """Sanitizador de HTML para prevenir ataques XSS en títulos, descripciones y nombres."""

    @staticmethod
    def sanitize_strict(text: str) -> str:
        """
        Sanitización estricta: elimina TODOS los tags HTML.
        Útil para campos de texto plano donde no se permite HTML.
        """
        if not text:
            return ""

        return bleach.clean(text, tags=[], strip=True).strip()

