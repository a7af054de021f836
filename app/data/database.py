# app/data/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.utils.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def build_engine(url: str, **kwargs) -> Engine:
    """
    Jeden engine (pula polaczen) na caly proces.
    Tworzony przy starcie i przekazywany do create_app.
    """
    kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    #import modeli, zeby byly zarejestrowane w Base.metadata przed create_all
    from app.data.models import ProductModel  # noqa: F401

    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    #sesja per request, zamykana po obsluzeniu
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
