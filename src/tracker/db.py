import logging
import sqlite3

logger = logging.getLogger(__name__)

PARCEL_TABLE = """
CREATE TABLE IF NOT EXISTS parcel (
    number INTEGER PRIMARY KEY AUTOINCREMENT,
    client INTEGER NOT NULL,
    status TEXT NOT NULL,
    address TEXT NOT NULL,
    created_at TEXT NOT NULL
)
"""

PARCEL_CLIENT_INDEX = (
    "CREATE INDEX IF NOT EXISTS parcel_client_idx ON parcel (client)"
)


def connect(
    path: str = "tracker.db",
    journal_mode: str = "WAL",
    synchronous: str = "NORMAL",
) -> sqlite3.Connection:
    """Open a SQLite database for the parcel store. The caller closes it."""
    conn = sqlite3.connect(path)
    try:
        conn.execute(f"PRAGMA journal_mode={journal_mode};")
        conn.execute(f"PRAGMA synchronous={synchronous};")
    except sqlite3.Error:
        conn.close()
        raise
    logger.info("Opened SQLite database %s", path)
    return conn


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the parcel table and its client index if they do not exist."""
    cursor = conn.cursor()
    try:
        cursor.execute(PARCEL_TABLE)
        cursor.execute(PARCEL_CLIENT_INDEX)
        conn.commit()
    finally:
        cursor.close()
