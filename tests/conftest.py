import pytest

from tracker.db import connect, create_schema
from tracker.store import ParcelStore


@pytest.fixture
def conn(tmp_path):
    db = connect(str(tmp_path / "tracker.db"))
    create_schema(db)
    yield db
    db.close()


@pytest.fixture
def store(conn):
    return ParcelStore(conn)
