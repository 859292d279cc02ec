import logging
from contextlib import contextmanager
from typing import Generator, Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session as SQLModelSession

from menu_api.config import DATABASE_URL, SQL_ECHO
from menu_api.errors import StoreFailure

logger = logging.getLogger("menu-api.database")


def _engine_kwargs(url: str) -> dict:
    # solo sqlite necesita check_same_thread
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    # sqlite en memoria: una única conexión compartida, si no cada hilo ve una BD vacía
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(DATABASE_URL, echo=SQL_ECHO, **_engine_kwargs(DATABASE_URL))

# class_=SQLModelSession para que SessionLocal() devuelva sqlmodel.Session (con .exec)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, class_=SQLModelSession)


def init_db() -> None:
    SQLModel.metadata.create_all(bind=engine)


def get_session() -> Generator[SQLModelSession, None, None]:
    db: Optional[SQLModelSession] = None
    try:
        db = SessionLocal()
        yield db
    finally:
        if db is not None:
            db.close()


@contextmanager
def store_call(session: SQLModelSession, context: str) -> Iterator[SQLModelSession]:
    """
    Ejecuta un bloque de acceso a la BD.
    Cualquier SQLAlchemyError hace rollback y se re-lanza como StoreFailure
    con `context` como prefijo del mensaje.
    """
    try:
        yield session
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("%s: %s", context, exc)
        raise StoreFailure(context, exc) from exc
