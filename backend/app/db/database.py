from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

from app.config.settings import DATABASE_URL, AUTO_CREATE_TABLES

logger = logging.getLogger(__name__)


def _make_engine(url: str):
    """Build the engine; SQLite needs cross-thread access for the API thread pool."""
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


def check_connection(engine) -> bool:
    """Try a lightweight DB operation to confirm connectivity.

    Returns True on success, False on failure.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database not reachable at {engine.url}: {e}")
        return False


# The connection manager
engine = _make_engine(DATABASE_URL)

# Create a SessionLocal class (we'll use this to talk to the database)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all our database models
Base = declarative_base()


# This function gives us a database session when we need one
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()  # Always close the connection when done


def init_db():
    """Initialize database tables. Call this after all models are imported."""
    if "sqlite" in str(engine.url) or AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
