from typing import Any, Iterable, Mapping, Optional, Sequence

from menu_api import config
from menu_api.errors import ValidationError

MISSING_FIELDS = "Faltan campos requeridos"


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Falla si alguno de `fields` falta o es falsy ("" / 0 / None)."""
    if any(not data.get(f) for f in fields):
        raise ValidationError(MISSING_FIELDS)


def invalid_day_message(allowed: Sequence[str]) -> str:
    return f"Día inválido. Debe ser uno de: {', '.join(allowed)}."


def check_day(day: Optional[str], allowed: Optional[Sequence[str]] = None) -> str:
    allowed = list(allowed if allowed is not None else config.MENU_DAYS)
    if day not in allowed:
        raise ValidationError(invalid_day_message(allowed))
    return day
