import logging
from typing import Any, Dict, List, Mapping

from sqlmodel import Session, select

from menu_api.database import store_call
from menu_api.errors import NotFound
from menu_api.menu_day import get_active_day
from menu_api.models import Product
from menu_api.validation import check_day, require_fields

logger = logging.getLogger("menu-api.products")

REQUIRED_FIELDS = ("name", "price", "category", "day")
PRODUCT_NOT_FOUND = "Producto no encontrado"
# mayor id que cabe en un BIGINT con signo
MAX_PRODUCT_ID = 2**63 - 1


def _clean(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Valida un producto entrante y devuelve los campos a guardar (reemplazo completo)."""
    require_fields(data, REQUIRED_FIELDS)
    check_day(data["day"])
    return {
        "name": data["name"],
        "description": data.get("description") or "",
        "price": data["price"],
        "category": data["category"],
        "day": data["day"],
    }


def _ordered():
    return select(Product).order_by(Product.category, Product.name)


def list_active(session: Session) -> List[Product]:
    day = get_active_day(session)
    with store_call(session, "Error al obtener productos"):
        products = session.exec(_ordered().where(Product.day == day)).all()
    logger.debug("Productos del día %s: %d", day, len(products))
    return list(products)


def list_all(session: Session) -> List[Product]:
    with store_call(session, "Error al obtener todos los productos"):
        products = session.exec(_ordered()).all()
    logger.debug("Todos los productos: %d", len(products))
    return list(products)


def create_product(session: Session, data: Mapping[str, Any]) -> Product:
    product = Product(**_clean(data))
    with store_call(session, "Error al agregar producto"):
        session.add(product)
        session.commit()
        session.refresh(product)
    logger.info("Producto creado id=%s (%s)", product.id, product.name)
    return product


def _find(session: Session, product_id: int) -> Product:
    # un id fuera de rango no puede existir; el driver fallaría antes de consultar
    if not 1 <= product_id <= MAX_PRODUCT_ID:
        raise NotFound(PRODUCT_NOT_FOUND)
    product = session.get(Product, product_id)
    if not product:
        raise NotFound(PRODUCT_NOT_FOUND)
    return product


def update_product(session: Session, product_id: int, data: Mapping[str, Any]) -> Product:
    fields = _clean(data)
    with store_call(session, "Error al actualizar producto"):
        product = _find(session, product_id)
        for key, value in fields.items():
            setattr(product, key, value)
        session.add(product)
        session.commit()
        session.refresh(product)
    return product


def delete_product(session: Session, product_id: int) -> None:
    with store_call(session, "Error al eliminar producto"):
        product = _find(session, product_id)
        session.delete(product)
        session.commit()
    logger.info("Producto eliminado id=%s", product_id)
