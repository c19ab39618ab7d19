import os
import tempfile
from pathlib import Path

import pytest

# Must be set before `central_api.config` is imported by any test module.
_DB_DIR = Path(tempfile.mkdtemp(prefix="central_api_tests_"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test an empty schema."""
    from sqlmodel import SQLModel
    from central_api.database import engine, create_db_and_tables

    SQLModel.metadata.drop_all(engine)
    create_db_and_tables()
    yield


@pytest.fixture
def session():
    from sqlmodel import Session
    from central_api.database import engine

    with Session(engine) as s:
        yield s
