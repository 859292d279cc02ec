from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlmodel import Session

from menu_api import products_repo
from menu_api.database import get_session
from menu_api.models import Product

router = APIRouter(prefix="/api/products", tags=["products"])


class ProductIn(BaseModel):
    # campos opcionales: la presencia la valida products_repo para responder 400 y no 422
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    day: Optional[str] = None


@router.get("", response_model=List[Product])
def list_products(session: Session = Depends(get_session)):
    """Productos del día activo (lo que ve el cliente)."""
    return products_repo.list_active(session)


@router.get("/all", response_model=List[Product])
def list_all_products(session: Session = Depends(get_session)):
    return products_repo.list_all(session)


@router.post("", response_model=Product)
def create_product(payload: ProductIn, session: Session = Depends(get_session)):
    return products_repo.create_product(session, payload.model_dump())


@router.put("/{product_id}", response_model=Product)
def update_product(product_id: int, payload: ProductIn, session: Session = Depends(get_session)):
    return products_repo.update_product(session, product_id, payload.model_dump())


@router.delete("/{product_id}")
def delete_product(product_id: int, session: Session = Depends(get_session)):
    products_repo.delete_product(session, product_id)
    return {"message": "Producto eliminado"}
