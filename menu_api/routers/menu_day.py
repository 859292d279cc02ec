from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlmodel import Session

from menu_api.database import get_session
from menu_api.menu_day import get_active_day, set_active_day

router = APIRouter(prefix="/api", tags=["menu-day"])


class MenuDayIn(BaseModel):
    day: Optional[str] = None


@router.post("/set-menu-day")
def set_menu_day(payload: MenuDayIn, session: Session = Depends(get_session)):
    day = set_active_day(session, payload.day)
    return {"message": f"Menú activo cambiado a {day}"}


@router.get("/get-menu-day")
def get_menu_day(session: Session = Depends(get_session)):
    return {"day": get_active_day(session)}
