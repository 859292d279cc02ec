from typing import Optional
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str = ""
    price: float
    category: str = Field(index=True)
    day: str = Field(index=True)


class MenuSettings(SQLModel, table=True):
    """
    Fila única (id = 1) con los datos de contacto, la contraseña de admin
    y el día del menú que se muestra a los clientes.
    """
    __tablename__ = "settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    whatsapp_number: str = ""
    special_orders_phone: str = ""
    # texto plano: GET /api/settings la devuelve tal cual al panel de admin
    admin_password: str = ""
    active_menu_day: str = "Jueves"
