import logging
from typing import Any

from sqlmodel import Session

from menu_api.database import store_call
from menu_api.settings_store import get_settings
from menu_api.validation import check_day

logger = logging.getLogger("menu-api.menu_day")


def get_active_day(session: Session) -> str:
    return get_settings(session, "Error al obtener el día activo").active_menu_day


def set_active_day(session: Session, day: Any) -> str:
    """Valida `day` contra los días del menú y lo guarda en la fila de configuración."""
    day = check_day(day)
    context = "Error al cambiar el día activo"
    current = get_settings(session, context)
    with store_call(session, context):
        current.active_menu_day = day
        session.add(current)
        session.commit()
    logger.info("Día activo del menú cambiado a: %s", day)
    return day
