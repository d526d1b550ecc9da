"""Repository layer for data access."""

from contract.repositories.file_repository import FileRepository, StoredFile
from contract.repositories.chunk_repository import ChunkRepository

__all__ = [
    "FileRepository",
    "StoredFile",
    "ChunkRepository",
]
