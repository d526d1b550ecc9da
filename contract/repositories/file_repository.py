"""File repository for database operations."""

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from common.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class StoredFile:
    owner: str
    name: str
    size: int
    chunk_count: int
    completed: bool
    created_at: datetime


def _row_to_file(row: sqlite3.Row) -> StoredFile:
    return StoredFile(
        owner=row["owner"],
        name=row["name"],
        size=row["size"],
        chunk_count=row["chunk_count"],
        completed=bool(row["completed"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


class FileRepository:
    @staticmethod
    def create_file(
        owner: str,
        name: str,
        size: int,
        chunk_count: int,
        created_at: datetime,
        conn: sqlite3.Connection
    ) -> StoredFile:
        logger.debug(f"Creating file record [owner={owner}, name={name}, size={size}]")
        cursor = conn.cursor()
        cursor.execute(
            """
            INSERT INTO files (owner, name, size, chunk_count, completed, created_at)
            VALUES (?, ?, ?, ?, 0, ?)
            """,
            (owner, name, size, chunk_count, created_at.isoformat())
        )
        return StoredFile(
            owner=owner,
            name=name,
            size=size,
            chunk_count=chunk_count,
            completed=False,
            created_at=created_at,
        )

    @staticmethod
    def find_by_owner_and_name(owner: str, name: str, conn: sqlite3.Connection) -> Optional[StoredFile]:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT owner, name, size, chunk_count, completed, created_at
            FROM files
            WHERE owner = ? AND name = ?
            """,
            (owner, name)
        )
        row = cursor.fetchone()
        if row is None:
            return None
        return _row_to_file(row)

    @staticmethod
    def list_by_owner(owner: str, conn: sqlite3.Connection) -> List[StoredFile]:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT owner, name, size, chunk_count, completed, created_at
            FROM files
            WHERE owner = ?
            ORDER BY created_at, name
            """,
            (owner,)
        )
        return [_row_to_file(row) for row in cursor.fetchall()]

    @staticmethod
    def mark_completed(owner: str, name: str, conn: sqlite3.Connection) -> None:
        cursor = conn.cursor()
        cursor.execute(
            "UPDATE files SET completed = 1 WHERE owner = ? AND name = ?",
            (owner, name)
        )
        logger.info(f"File marked completed [owner={owner}, name={name}]")

    @staticmethod
    def delete_file(owner: str, name: str, conn: sqlite3.Connection) -> bool:
        cursor = conn.cursor()
        cursor.execute(
            "DELETE FROM files WHERE owner = ? AND name = ?",
            (owner, name)
        )
        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted file record [owner={owner}, name={name}]")
        return deleted
