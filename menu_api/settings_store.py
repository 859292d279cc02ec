import logging
import secrets
from typing import Any, Mapping

from sqlmodel import Session

from menu_api import config
from menu_api.database import store_call
from menu_api.errors import NotFound
from menu_api.models import MenuSettings
from menu_api.validation import require_fields

logger = logging.getLogger("menu-api.settings")

SETTINGS_ID = 1
SETTINGS_NOT_FOUND = "Configuración no encontrada"
SETTINGS_FIELDS = ("whatsapp_number", "special_orders_phone", "admin_password")


def ensure_initialized(session: Session) -> MenuSettings:
    """
    Crea la fila de configuración con los valores por defecto si no existe.
    Se llama en cada arranque; si la fila ya está no toca nada.
    """
    with store_call(session, "Error al inicializar la configuración"):
        current = session.get(MenuSettings, SETTINGS_ID)
        if current:
            return current
        current = MenuSettings(
            id=SETTINGS_ID,
            whatsapp_number=config.DEFAULT_WHATSAPP_NUMBER,
            special_orders_phone=config.DEFAULT_SPECIAL_ORDERS_PHONE,
            admin_password=config.DEFAULT_ADMIN_PASSWORD,
            active_menu_day=config.DEFAULT_MENU_DAY,
        )
        session.add(current)
        session.commit()
        session.refresh(current)
    logger.info("Configuración inicial creada (día activo: %s)", current.active_menu_day)
    return current


def get_settings(session: Session, context: str = "Error al obtener la configuración") -> MenuSettings:
    with store_call(session, context):
        current = session.get(MenuSettings, SETTINGS_ID)
    if not current:
        raise NotFound(SETTINGS_NOT_FOUND)
    return current


def update_settings(session: Session, data: Mapping[str, Any]) -> MenuSettings:
    require_fields(data, SETTINGS_FIELDS)
    context = "Error al actualizar la configuración"
    current = get_settings(session, context)
    with store_call(session, context):
        current.whatsapp_number = data["whatsapp_number"]
        current.special_orders_phone = data["special_orders_phone"]
        current.admin_password = data["admin_password"]
        session.add(current)
        session.commit()
        session.refresh(current)
    logger.info("Configuración actualizada")
    return current


def verify_admin_password(session: Session, candidate: Any) -> bool:
    require_fields({"password": candidate}, ("password",))
    current = get_settings(session, "Error al verificar la contraseña")
    # igualdad exacta: sin trim ni normalización de mayúsculas
    return secrets.compare_digest(str(candidate).encode("utf-8"), current.admin_password.encode("utf-8"))
