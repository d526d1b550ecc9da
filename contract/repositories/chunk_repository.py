"""Chunk repository for database operations."""

import sqlite3
from typing import Dict, List

from common.logging_config import get_logger

logger = get_logger(__name__)


class ChunkRepository:
    @staticmethod
    def store_chunk(owner: str, name: str, chunk_index: int, data: bytes, conn: sqlite3.Connection) -> None:
        logger.debug(f"Storing chunk {chunk_index} [owner={owner}, name={name}, size={len(data)}]")
        cursor = conn.cursor()
        cursor.execute(
            """
            INSERT INTO chunks (owner, name, chunk_index, data)
            VALUES (?, ?, ?, ?)
            """,
            (owner, name, chunk_index, data)
        )

    @staticmethod
    def get_uploaded_indexes(owner: str, name: str, conn: sqlite3.Connection) -> List[int]:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT chunk_index
            FROM chunks
            WHERE owner = ? AND name = ?
            ORDER BY chunk_index
            """,
            (owner, name)
        )
        return [row["chunk_index"] for row in cursor.fetchall()]

    @staticmethod
    def get_uploaded_indexes_by_owner(owner: str, conn: sqlite3.Connection) -> Dict[str, List[int]]:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT name, chunk_index
            FROM chunks
            WHERE owner = ?
            ORDER BY name, chunk_index
            """,
            (owner,)
        )
        indexes: Dict[str, List[int]] = {}
        for row in cursor.fetchall():
            indexes.setdefault(row["name"], []).append(row["chunk_index"])
        return indexes

    @staticmethod
    def get_chunk(owner: str, name: str, chunk_index: int, conn: sqlite3.Connection) -> bytes:
        """
        Return stored chunk bytes, or an empty byte string for a missing slot.
        """
        cursor = conn.cursor()
        cursor.execute(
            "SELECT data FROM chunks WHERE owner = ? AND name = ? AND chunk_index = ?",
            (owner, name, chunk_index)
        )
        row = cursor.fetchone()
        if row is None:
            return b""
        return bytes(row["data"])

    @staticmethod
    def delete_chunks(owner: str, name: str, conn: sqlite3.Connection) -> int:
        cursor = conn.cursor()
        cursor.execute(
            "DELETE FROM chunks WHERE owner = ? AND name = ?",
            (owner, name)
        )
        logger.info(f"Deleted {cursor.rowcount} chunks [owner={owner}, name={name}]")
        return cursor.rowcount
