"""
Database connection and session management.
Supports both SQLite (local development) and PostgreSQL (production).

Each record collection is a table of JSON documents keyed by record id;
``seq`` keeps insertion order.
"""
import logging
import sqlite3
from contextlib import contextmanager

from housing_portal import config

# PostgreSQL support
if config.USE_POSTGRES:
    import psycopg2
    from psycopg2.extras import RealDictCursor

    DB_ERRORS = (sqlite3.Error, psycopg2.Error)
else:
    DB_ERRORS = (sqlite3.Error,)

logger = logging.getLogger(__name__)

COLLECTION_TABLES = [
    config.BENEFICIARIES_TABLE,
    config.PENDING_ENTRIES_TABLE,
    config.OFFICERS_TABLE,
]


class DictRow:
    """Wrapper to make psycopg2 results behave like sqlite3.Row"""
    def __init__(self, data):
        self._data = data
        self._keys = list(data.keys()) if data else []

    def __getitem__(self, key):
        if isinstance(key, int):
            return self._data[self._keys[key]]
        return self._data[key]

    def __iter__(self):
        return iter(self._data.values())

    def keys(self):
        return self._keys


def get_db_connection():
    """Create a database connection with row factory."""
    if config.USE_POSTGRES:
        return psycopg2.connect(config.DATABASE_URL)
    conn = sqlite3.connect(str(config.DATABASE_PATH))
    conn.row_factory = sqlite3.Row
    return conn


class PostgresCursorWrapper:
    """Wrapper to make PostgreSQL cursor behave like SQLite cursor"""
    def __init__(self, cursor):
        self._cursor = cursor

    def execute(self, query, params=None):
        # Convert SQLite ? placeholders to PostgreSQL %s
        query = query.replace('?', '%s')
        # Convert AUTOINCREMENT to SERIAL for PostgreSQL
        query = query.replace('INTEGER PRIMARY KEY AUTOINCREMENT', 'SERIAL PRIMARY KEY')
        if params:
            self._cursor.execute(query, params)
        else:
            self._cursor.execute(query)
        return self

    def fetchone(self):
        row = self._cursor.fetchone()
        return DictRow(row) if row else None

    def fetchall(self):
        return [DictRow(row) for row in self._cursor.fetchall()]

    @property
    def rowcount(self):
        return self._cursor.rowcount


class PostgresConnection:
    def __init__(self, conn, cursor):
        self._conn = conn
        self._cursor = PostgresCursorWrapper(cursor)

    def cursor(self):
        return self._cursor

    def execute(self, *args, **kwargs):
        return self._cursor.execute(*args, **kwargs)

    def commit(self):
        return self._conn.commit()

    def rollback(self):
        return self._conn.rollback()


@contextmanager
def get_db():
    """Context manager for database connections."""
    conn = get_db_connection()
    try:
        if config.USE_POSTGRES:
            yield PostgresConnection(conn, conn.cursor(cursor_factory=RealDictCursor))
        else:
            yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_database():
    """Create the record collection tables if they do not exist."""
    with get_db() as conn:
        cursor = conn.cursor()
        for table in COLLECTION_TABLES:
            cursor.execute(f"""
                CREATE TABLE IF NOT EXISTS {table} (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    record_id INTEGER UNIQUE NOT NULL,
                    data TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
    logger.info("Database initialized (%s)", "PostgreSQL" if config.USE_POSTGRES else "SQLite")


def reset_database():
    """Drop and recreate every record collection table."""
    with get_db() as conn:
        cursor = conn.cursor()
        for table in COLLECTION_TABLES:
            cursor.execute(f"DROP TABLE IF EXISTS {table}")
    init_database()
    logger.info("Database reset complete")
