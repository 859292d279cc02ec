from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlmodel import Session

from menu_api import settings_store
from menu_api.database import get_session
from menu_api.models import MenuSettings

router = APIRouter(prefix="/api", tags=["settings"])


class SettingsIn(BaseModel):
    whatsappNumber: Optional[str] = None
    specialOrdersPhone: Optional[str] = None
    adminPassword: Optional[str] = None


class SettingsOut(BaseModel):
    whatsappNumber: str
    specialOrdersPhone: str
    adminPassword: str


class PasswordIn(BaseModel):
    password: Optional[str] = None


def _to_out(s: MenuSettings) -> SettingsOut:
    return SettingsOut(
        whatsappNumber=s.whatsapp_number,
        specialOrdersPhone=s.special_orders_phone,
        adminPassword=s.admin_password,
    )


@router.get("/settings", response_model=SettingsOut)
def get_settings(session: Session = Depends(get_session)):
    return _to_out(settings_store.get_settings(session))


@router.post("/settings")
def update_settings(payload: SettingsIn, session: Session = Depends(get_session)):
    settings_store.update_settings(session, {
        "whatsapp_number": payload.whatsappNumber,
        "special_orders_phone": payload.specialOrdersPhone,
        "admin_password": payload.adminPassword,
    })
    return {"message": "Configuración actualizada"}


@router.post("/verify-admin-password")
def verify_admin_password(payload: PasswordIn, session: Session = Depends(get_session)):
    if settings_store.verify_admin_password(session, payload.password):
        return {"success": True}
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"success": False, "message": "Contraseña incorrecta"},
    )
