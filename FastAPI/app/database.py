import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from app.config import settings

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # Local runs and tests share one connection across threads.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """One session per request, injected into every domain operation."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session):
    """Commit every write made inside the block, or roll all of them back.

    Repositories only flush; multi-step domain operations (job offer deletion,
    interview scheduling) run inside one of these so a failure halfway never
    leaves a partially applied change behind.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def _register_models() -> None:
    import app.models  # noqa: F401


def init_db() -> None:
    _register_models()
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.exception("Database initialization failed: %s", e)
        raise
    logger.info("Database ready (%d tables)", len(Base.metadata.tables))


def ensure_tables_exist() -> list[str]:
    """Create tables that are missing and return their names. Existing tables are left alone."""
    _register_models()
    try:
        existing = set(inspect(engine).get_table_names())
        missing = [t for t in Base.metadata.sorted_tables if t.name not in existing]
        if missing:
            Base.metadata.create_all(bind=engine, tables=missing)
    except Exception as e:
        logger.exception("Ensure tables failed: %s", e)
        raise
    names = [t.name for t in missing]
    if names:
        logger.info("Created missing DB tables: %s", ", ".join(names))
    else:
        logger.info("All DB tables already exist")
    return names
