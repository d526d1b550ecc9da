"""Gateway interface to a ledger-backed storage contract."""

from abc import ABC, abstractmethod
from typing import List

from common.codec import RawChunk
from common.types import FileRecord


class StorageGateway(ABC):
    """
    The seven remote operations of the storage contract.

    Implementations must raise the classes from ``common.exceptions`` for
    contract failures and must not retry on their own.
    """

    @abstractmethod
    async def start_upload(self, owner: str, file_name: str, size: int) -> None:
        """Allocate the file record and its chunk status vector."""

    @abstractmethod
    async def upload_chunk(self, owner: str, file_name: str, position: int, data: str) -> None:
        """Commit one 0x-prefixed hex chunk at ``position``."""

    @abstractmethod
    async def finish_upload(self, owner: str, file_name: str) -> None:
        """Validate that every chunk slot of the file is uploaded."""

    @abstractmethod
    async def delete_file(self, owner: str, file_name: str) -> None:
        """Remove the file record and its chunks."""

    @abstractmethod
    async def get_file_size(self, storage_path: str) -> int:
        """Return the declared size of the file in bytes."""

    @abstractmethod
    async def read_chunk(self, storage_path: str, position: int, length: int) -> RawChunk:
        """Return raw chunk data, a hex string or an array of hex words."""

    @abstractmethod
    async def get_file_info_list(self, owner: str) -> List[FileRecord]:
        """Return every file record owned by ``owner``."""

    async def close(self) -> None:
        """Release connections held by the gateway."""

    async def __aenter__(self) -> 'StorageGateway':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
