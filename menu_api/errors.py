from typing import Optional


class MenuError(Exception):
    """Error de dominio; el handler de main.py lo convierte en texto plano con `status_code`."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MenuError):
    status_code = 400


class NotFound(MenuError):
    status_code = 404


class StoreFailure(MenuError):
    """
    Falla de la base de datos (conexión o consulta).
    El mensaje final es "<contexto>: <mensaje del driver>".
    """

    status_code = 500

    def __init__(self, context: str, cause: Optional[BaseException] = None):
        detail = str(cause) if cause is not None else "error desconocido"
        super().__init__(f"{context}: {detail}")
        self.cause = cause
