"""Database schema and connection management for SQLite."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from contract import config


def init_database(database_path: Optional[str] = None) -> None:
    """
    Initialize database and create tables if they don't exist.
    """
    db_path = Path(database_path or config.DATABASE_PATH)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    with get_db_connection(str(db_path)) as conn:
        cursor = conn.cursor()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS files (
                owner TEXT NOT NULL,
                name TEXT NOT NULL,
                size INTEGER NOT NULL,
                chunk_count INTEGER NOT NULL,
                completed INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                PRIMARY KEY(owner, name)
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS chunks (
                owner TEXT NOT NULL,
                name TEXT NOT NULL,
                chunk_index INTEGER NOT NULL,
                data BLOB NOT NULL,
                PRIMARY KEY(owner, name, chunk_index),
                FOREIGN KEY(owner, name) REFERENCES files(owner, name) ON DELETE CASCADE
            )
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_files_owner ON files(owner)
        """)

        conn.commit()


@contextmanager
def get_db_connection(database_path: Optional[str] = None) -> Generator[sqlite3.Connection, None, None]:
    """
    Context manager for database connections.
    """
    conn = sqlite3.connect(database_path or config.DATABASE_PATH)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    try:
        yield conn
    finally:
        conn.close()
