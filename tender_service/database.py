from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from tender_service.config import get_settings
from tender_service.models import Base


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    settings = get_settings()
    return create_engine(
        settings.postgres_conn,
        pool_size=settings.max_pool_size,
        pool_pre_ping=True,
    )


def get_session():
    with Session(get_engine()) as session:
        yield session


def create_db_and_tables(engine: Engine | None = None):
    Base.metadata.create_all(engine or get_engine())
