import logging

from sqlalchemy.pool import QueuePool
from sqlalchemy import text
from sqlmodel import Session, SQLModel, create_engine

from maventoys.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str):
    # SQLite keeps SQLAlchemy's default pool; server databases get a sized QueuePool
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=settings.SQL_ECHO,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        url,
        echo=settings.SQL_ECHO,
        poolclass=QueuePool,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL)


def create_db_and_tables():
    # Table models must be registered on the metadata first
    import maventoys.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created")


def get_session():
    with Session(engine) as session:
        yield session


def ping(session: Session) -> bool:
    session.connection().execute(text("SELECT 1"))
    return True
