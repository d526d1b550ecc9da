"""In-process gateway backed by a local SQLite ledger file."""

from typing import List, Optional

from common.codec import RawChunk
from common.logging_config import get_logger
from common.types import FileRecord
from contract.database import init_database
from contract.services.storage_service import StorageService
from filestorage.gateway import StorageGateway

logger = get_logger(__name__)


class LocalStorageGateway(StorageGateway):
    """
    Drives the contract's storage service directly, without a network hop.

    Args:
        database_path: SQLite ledger file, created on first use
        chunk_length: Chunk length the ledger enforces
    """

    def __init__(self, database_path: str, chunk_length: Optional[int] = None):
        init_database(database_path)
        self.service = StorageService(database_path=database_path, chunk_length=chunk_length)
        logger.info(f"Initialized LocalStorageGateway [database={database_path}]")

    async def start_upload(self, owner: str, file_name: str, size: int) -> None:
        self.service.start_upload(owner, file_name, size)

    async def upload_chunk(self, owner: str, file_name: str, position: int, data: str) -> None:
        self.service.upload_chunk(owner, file_name, position, data)

    async def finish_upload(self, owner: str, file_name: str) -> None:
        self.service.finish_upload(owner, file_name)

    async def delete_file(self, owner: str, file_name: str) -> None:
        self.service.delete_file(owner, file_name)

    async def get_file_size(self, storage_path: str) -> int:
        return self.service.get_file_size(storage_path)

    async def read_chunk(self, storage_path: str, position: int, length: int) -> RawChunk:
        return self.service.read_chunk(storage_path, position, length)

    async def get_file_info_list(self, owner: str) -> List[FileRecord]:
        return self.service.get_file_info_list(owner)
