"""Database connection and session management."""
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from config_service.core.config import SQLALCHEMY_DATABASE_URL
from config_service.core.logging_config import logger


def make_engine(url: str) -> Engine:
    """Create an engine; SQLite needs special connect_args and FK enforcement."""
    if url.startswith("sqlite"):
        sqlite_engine = create_engine(url, connect_args={"check_same_thread": False})
        enable_sqlite_foreign_keys(sqlite_engine)
        return sqlite_engine
    return create_engine(url, pool_pre_ping=True)


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = make_engine(SQLALCHEMY_DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for SQLAlchemy models
Base = declarative_base()


def get_db():
    """Generator function for FastAPI dependency injection.
    Creates a session, yields it, and closes it after usage to ensure proper cleanup.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None) -> None:
    """Check connectivity and create the schema. Failures are fatal for startup."""
    bind = bind or engine
    # Register the models on Base.metadata before create_all
    from config_service import models  # noqa: F401

    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=bind)
        logger.info("Database connection established and tables initialized")
    except Exception as e:
        logger.error(f"Failed to connect to or initialize the database: {e}")
        raise


def check_db(bind: Engine = None) -> bool:
    """Return True when the store answers a trivial query."""
    bind = bind or engine
    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False


def dispose_db(bind: Engine = None) -> None:
    """Release pooled connections on shutdown."""
    (bind or engine).dispose()
    logger.info("Database connections released")
