import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute
from fastapi.staticfiles import StaticFiles

from menu_api import config
from menu_api.database import SessionLocal, init_db
from menu_api.errors import MenuError
from menu_api.routers import menu_day, products, settings
from menu_api.settings_store import ensure_initialized
from menu_api.validation import MISSING_FIELDS

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("menu-api")


def _mask(v: str | None) -> str | None:
    if not v:
        return None
    s = str(v)
    return s if len(s) <= 6 else f"{s[:3]}...{s[-3:]}"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("ENV check: DATABASE_URL=%s MENU_DAYS=%s STATIC_DIR=%s",
                _mask(config.DATABASE_URL), ",".join(config.MENU_DAYS), config.STATIC_DIR)
    config.check_config()
    init_db()
    with SessionLocal() as session:
        ensure_initialized(session)
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ",".join(sorted(route.methods))
            logger.debug("Route: %s  methods: %s", route.path, methods)
    yield


app = FastAPI(title="menu API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MenuError)
async def menu_error_handler(request: Request, exc: MenuError) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error("Error en %s %s: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    # cuerpo ausente -> mismo mensaje que un campo faltante; tipos incorrectos -> datos inválidos
    errors = exc.errors()
    if errors and all(e.get("type") == "missing" for e in errors):
        return PlainTextResponse(MISSING_FIELDS, status_code=400)
    return PlainTextResponse("Datos inválidos", status_code=400)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Error inesperado en %s %s", request.method, request.url.path)
    return PlainTextResponse(f"Error en el servidor: {exc}", status_code=500)


app.include_router(products.router)
app.include_router(menu_day.router)
app.include_router(settings.router)

# el frontend estático va al final para no tapar las rutas /api
if os.path.isdir(config.STATIC_DIR):
    app.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="static")


def run() -> None:
    uvicorn.run("menu_api.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
