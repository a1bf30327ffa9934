# inventory_api/database.py
import logging
import sqlite3
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from inventory_api.config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# SQLAlchemy requires the postgresql:// scheme
if SQLALCHEMY_DATABASE_URL.startswith("postgres://"):
    SQLALCHEMY_DATABASE_URL = SQLALCHEMY_DATABASE_URL.replace("postgres://", "postgresql://", 1)


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite+libsql"):
        return {"auth_token": settings.DATABASE_TOKEN} if settings.DATABASE_TOKEN else {}
    if "sqlite" in url:
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args=_connect_args(SQLALCHEMY_DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# SQLite ignores foreign keys (and ON DELETE CASCADE) unless asked per connection
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """Commit everything done inside the block, or roll all of it back."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def seed_item_types(db: Session) -> None:
    from inventory_api.models.item_type import ItemType, ItemKind

    existing = {t.name for t in db.query(ItemType).all()}
    for kind in ItemKind:
        if kind not in existing:
            db.add(ItemType(item_type_id=kind.value, name=kind))
    db.commit()


def init_db():
    # Register every table on Base.metadata
    import inventory_api.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_item_types(db)
    finally:
        db.close()
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
