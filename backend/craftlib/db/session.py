"""
Database session management
"""
import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from craftlib.core.config import settings
from craftlib.db.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str, **kwargs) -> Engine:
    """
    Create an engine that enforces foreign keys.

    SQLite connections get check_same_thread=False (FastAPI runs sync
    endpoints in a thread pool) and PRAGMA foreign_keys=ON on connect.
    """
    if url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        new_engine = create_engine(url, connect_args=connect_args, **kwargs)
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
        return new_engine

    return create_engine(url, pool_pre_ping=True, **kwargs)


logger.info(f"Database connection: {settings.DATABASE_URL}")

engine = create_db_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
    Dependency for getting database session

    Usage in FastAPI endpoints:
        @router.get("/projects")
        def list_projects(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None) -> None:
    """
    Create all tables in foreign-key order.
    """
    import craftlib.models  # noqa: F401  registers every table on Base.metadata

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database initialized")


def check_connection(bind: Engine = None) -> bool:
    """
    Test database connection.
    Returns True if connection is successful, False otherwise.
    """
    try:
        with (bind or engine).connect() as connection:
            connection.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


def commit_or_rollback(db: Session) -> None:
    """Commit, leaving the session usable if the store rejects the write."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Write rejected by database constraint", extra={"error": str(e.orig)})
        raise
