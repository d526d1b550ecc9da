"""Storage service enforcing the ledger contract rules."""

import sqlite3
from datetime import datetime
from typing import List, Optional, Tuple

from common.codec import hex_to_bytes, split_words, strip_bytes_prefix
from common.exceptions import (
    ChunkAlreadyUploadedError,
    FileAlreadyExistsError,
    FileTooLargeError,
    IncompleteUploadError,
    InvalidChunkError,
    InvalidFileNameError,
    InvalidReadRangeError,
    StoredFileNotFoundError,
)
from common.logging_config import get_logger
from common.constants import MAX_FILENAME_LENGTH
from common.storage_path import RESERVED_FILE_NAMES, build_storage_path, parse_storage_path
from common.types import FileRecord
from contract import config
from contract.database import get_db_connection
from contract.repositories.chunk_repository import ChunkRepository
from contract.repositories.file_repository import FileRepository, StoredFile

logger = get_logger(__name__)


def chunk_count_for(size: int, chunk_length: int) -> int:
    """Number of chunk slots needed for a file of ``size`` bytes."""
    return (size + chunk_length - 1) // chunk_length


class StorageService:
    """
    Ledger-backed byte store with per-chunk upload tracking.

    Owners are stored without their 0x prefix, so "0xabc" and "abc" address
    the same account.
    """

    def __init__(
        self,
        database_path: Optional[str] = None,
        chunk_length: Optional[int] = None,
        max_file_size: Optional[int] = None,
    ):
        self.database_path = database_path
        self.chunk_length = chunk_length or config.CHUNK_LENGTH
        self.max_file_size = max_file_size if max_file_size is not None else config.MAX_FILE_SIZE
        self.file_repo = FileRepository()
        self.chunk_repo = ChunkRepository()

    def _get_file(self, owner: str, file_name: str, conn: sqlite3.Connection) -> StoredFile:
        stored = self.file_repo.find_by_owner_and_name(owner, file_name, conn)
        if stored is None:
            raise StoredFileNotFoundError(f"File not found: {build_storage_path(owner, file_name)}")
        return stored

    def _resolve_path(self, storage_path: str) -> Tuple[str, str]:
        try:
            return parse_storage_path(storage_path)
        except ValueError as e:
            raise StoredFileNotFoundError(str(e)) from e

    def _validate_file_name(self, file_name: str) -> None:
        if not file_name:
            raise InvalidFileNameError("File name must not be empty")
        if len(file_name) > MAX_FILENAME_LENGTH:
            raise InvalidFileNameError(f"File name longer than {MAX_FILENAME_LENGTH} characters")
        if "/" in file_name:
            raise InvalidFileNameError("File name must not contain '/'")
        if file_name in RESERVED_FILE_NAMES:
            raise InvalidFileNameError(f"File name {file_name!r} is reserved")

    def start_upload(self, owner: str, file_name: str, size: int) -> StoredFile:
        """
        Allocate a file record and its chunk status vector.

        Raises:
            InvalidFileNameError: If the name is not acceptable
            FileTooLargeError: If size is negative or above the limit
            FileAlreadyExistsError: If the owner already has a file with this name
        """
        owner = strip_bytes_prefix(owner)
        self._validate_file_name(file_name)
        if size < 0 or size > self.max_file_size:
            raise FileTooLargeError(f"File size {size} outside allowed range 0..{self.max_file_size}")

        chunk_count = chunk_count_for(size, self.chunk_length)
        with get_db_connection(self.database_path) as conn:
            try:
                stored = self.file_repo.create_file(
                    owner=owner,
                    name=file_name,
                    size=size,
                    chunk_count=chunk_count,
                    created_at=datetime.utcnow(),
                    conn=conn,
                )
                conn.commit()
            except sqlite3.IntegrityError:
                conn.rollback()
                raise FileAlreadyExistsError(f"File already exists: {build_storage_path(owner, file_name)}")

        logger.info(f"Upload started [owner={owner}, name={file_name}, size={size}, chunks={chunk_count}]")
        return stored

    def upload_chunk(self, owner: str, file_name: str, position: int, data: str) -> int:
        """
        Commit one chunk at ``position``.

        Args:
            owner: Owner address
            file_name: Name of the file being uploaded
            position: Byte offset of the chunk, a multiple of the chunk length
            data: 0x-prefixed hex payload

        Returns:
            Index of the committed chunk slot

        Raises:
            InvalidChunkError: On misalignment, bad length, bad hex, or a finished file
            ChunkAlreadyUploadedError: If the slot is already filled
        """
        owner = strip_bytes_prefix(owner)
        try:
            payload = hex_to_bytes(data)
        except ValueError as e:
            raise InvalidChunkError(f"Chunk payload is not valid hex: {e}") from e

        with get_db_connection(self.database_path) as conn:
            stored = self._get_file(owner, file_name, conn)
            if stored.completed:
                raise InvalidChunkError("File upload is already finished")
            if position < 0 or position >= stored.size or position % self.chunk_length:
                raise InvalidChunkError(
                    f"Invalid chunk position {position} for file of {stored.size} bytes"
                )

            expected_length = min(self.chunk_length, stored.size - position)
            if len(payload) != expected_length:
                raise InvalidChunkError(
                    f"Chunk at {position} has {len(payload)} bytes, expected {expected_length}"
                )

            chunk_index = position // self.chunk_length
            try:
                self.chunk_repo.store_chunk(owner, file_name, chunk_index, payload, conn)
                conn.commit()
            except sqlite3.IntegrityError:
                conn.rollback()
                raise ChunkAlreadyUploadedError(f"Chunk {chunk_index} is already uploaded")

        return chunk_index

    def finish_upload(self, owner: str, file_name: str) -> str:
        """
        Confirm that every chunk slot is filled and close the upload.

        Raises:
            IncompleteUploadError: If any chunk slot is missing
        """
        owner = strip_bytes_prefix(owner)
        with get_db_connection(self.database_path) as conn:
            stored = self._get_file(owner, file_name, conn)
            uploaded = set(self.chunk_repo.get_uploaded_indexes(owner, file_name, conn))
            missing = [i for i in range(stored.chunk_count) if i not in uploaded]
            if missing:
                raise IncompleteUploadError(
                    f"File is not fully uploaded: {len(missing)} of {stored.chunk_count} chunks missing"
                )
            if not stored.completed:
                self.file_repo.mark_completed(owner, file_name, conn)
                conn.commit()

        return build_storage_path(owner, file_name)

    def delete_file(self, owner: str, file_name: str) -> str:
        owner = strip_bytes_prefix(owner)
        with get_db_connection(self.database_path) as conn:
            self._get_file(owner, file_name, conn)
            self.chunk_repo.delete_chunks(owner, file_name, conn)
            self.file_repo.delete_file(owner, file_name, conn)
            conn.commit()

        return build_storage_path(owner, file_name)

    def get_file_size(self, storage_path: str) -> int:
        owner, file_name = self._resolve_path(storage_path)
        with get_db_connection(self.database_path) as conn:
            return self._get_file(owner, file_name, conn).size

    def read_chunk(self, storage_path: str, position: int, length: int) -> List[str]:
        """
        Read ``length`` bytes at ``position`` as 0x-prefixed 32-byte words.

        Slots that were never uploaded read back as zero bytes.

        Raises:
            InvalidReadRangeError: If the range is empty, too long, or past the end
        """
        owner, file_name = self._resolve_path(storage_path)
        with get_db_connection(self.database_path) as conn:
            stored = self._get_file(owner, file_name, conn)
            if (position < 0 or length <= 0 or length > self.chunk_length
                    or position + length > stored.size):
                raise InvalidReadRangeError(
                    f"Cannot read {length} bytes at {position} from file of {stored.size} bytes"
                )

            first = position // self.chunk_length
            last = (position + length - 1) // self.chunk_length
            buffer = bytearray()
            for chunk_index in range(first, last + 1):
                slot_length = min(self.chunk_length, stored.size - chunk_index * self.chunk_length)
                data = self.chunk_repo.get_chunk(owner, file_name, chunk_index, conn)
                buffer += data or bytes(slot_length)

        start = position - first * self.chunk_length
        return split_words(bytes(buffer[start:start + length]))

    def get_file_info_list(self, owner: str) -> List[FileRecord]:
        owner = strip_bytes_prefix(owner)
        with get_db_connection(self.database_path) as conn:
            files = self.file_repo.list_by_owner(owner, conn)
            uploaded = self.chunk_repo.get_uploaded_indexes_by_owner(owner, conn)

        records = []
        for stored in files:
            done = set(uploaded.get(stored.name, []))
            records.append(FileRecord(
                name=stored.name,
                size=stored.size,
                is_chunk_uploaded=tuple(i in done for i in range(stored.chunk_count)),
            ))
        return records
