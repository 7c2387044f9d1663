import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for `import app`
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Force SQLite for tests so no Postgres is needed
test_db_path = ROOT / "test_run.db"
if test_db_path.exists():
    test_db_path.unlink()

os.environ["DATABASE_URL"] = f"sqlite:///{test_db_path}"
os.environ.setdefault("AUTO_CREATE_TABLES", "1")
os.environ.setdefault("CACHE_SWEEPER_ENABLED", "0")

# Create tables if needed
from app.db.database import engine, Base, SessionLocal
import app.models.models  # noqa: F401 ensures models are registered

Base.metadata.create_all(bind=engine)


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def db_session():
    """Session on a freshly emptied schema."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
