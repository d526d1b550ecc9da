"""Chunked upload/download client for the ledger storage contract."""

from pathlib import Path
from typing import Callable, List, Optional

from common.codec import add_bytes_prefix, bytes_to_hex, decode_chunk
from common.constants import CHUNK_LENGTH
from common.exceptions import StreamUnavailableError
from common.logging_config import get_logger
from common.storage_path import build_storage_path, storage_path_basename
from common.types import FileDescriptor
from filestorage.gateway import StorageGateway
from filestorage.listing import describe_files
from filestorage.sinks import FileSink, supports_streaming

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


class FilestorageClient:
    """
    Splits files into fixed-length chunks and moves them through a gateway.

    Chunks are sent and fetched strictly in ascending offset order, one
    remote call at a time; the contract's finish-upload check relies on it.
    Remote failures propagate to the caller without retries.
    """

    def __init__(self, gateway: StorageGateway, chunk_length: int = CHUNK_LENGTH):
        """
        Initialize the client.

        Args:
            gateway: Storage contract gateway
            chunk_length: Chunk length in bytes; must match the contract's
        """
        if chunk_length <= 0:
            raise ValueError("chunk_length must be positive")
        self.gateway = gateway
        self.chunk_length = chunk_length

    async def upload_file(
        self,
        owner: str,
        file_name: str,
        data: bytes,
        on_progress: Optional[ProgressCallback] = None
    ) -> str:
        """
        Upload a file chunk by chunk.

        Args:
            owner: Owner address
            file_name: Name to store the file under
            data: File contents
            on_progress: Optional callback(uploaded_bytes, total_bytes) after each chunk

        Returns:
            Storage path of the uploaded file
        """
        file_size = len(data)
        await self.gateway.start_upload(owner, file_name, file_size)
        logger.info(f"File was created [name={file_name}, size={file_size}]")

        position = 0
        chunk_number = 0
        while position < file_size:
            raw_chunk = data[position:position + min(file_size - position, self.chunk_length)]
            chunk = bytes_to_hex(raw_chunk)
            await self.gateway.upload_chunk(owner, file_name, position, add_bytes_prefix(chunk))
            position += len(chunk) // 2
            logger.debug(f"Chunk {chunk_number} was loaded [position={position}]")
            chunk_number += 1
            if on_progress:
                on_progress(position, file_size)

        logger.debug(f"Checking file validity [name={file_name}]")
        await self.gateway.finish_upload(owner, file_name)
        logger.info(f"File was uploaded [name={file_name}, chunks={chunk_number}]")
        return build_storage_path(owner, file_name)

    async def download_to_buffer(self, storage_path: str) -> bytes:
        """Download a whole file into memory."""
        return await self._download_file(storage_path)

    async def download_to_stream(
        self,
        storage_path: str,
        sink,
        on_progress: Optional[ProgressCallback] = None
    ) -> None:
        """
        Download a file, writing each chunk to ``sink`` as it arrives.

        The sink is closed when the download ends, successfully or not.

        Raises:
            StreamUnavailableError: If the sink lacks write() or close()
        """
        if not supports_streaming(sink):
            raise StreamUnavailableError(
                "download_to_stream requires a sink with write() and close()"
            )

        try:
            await self._download_file(storage_path, sink, on_progress)
        finally:
            sink.close()

    async def download_to_file(
        self,
        storage_path: str,
        directory: Path,
        on_progress: Optional[ProgressCallback] = None
    ) -> Path:
        """
        Download a file into ``directory`` under its stored name.

        An existing file of the same name is replaced only once the whole
        download has arrived; on failure it is left as it was.

        Returns:
            Path of the written file
        """
        output_file = Path(directory) / storage_path_basename(storage_path)
        with FileSink(output_file) as sink:
            await self.download_to_stream(storage_path, sink, on_progress)
            sink.commit()
        logger.debug(f"Saved {sink.bytes_written} bytes to {output_file}")
        return output_file

    async def delete_file(self, owner: str, file_name: str) -> None:
        await self.gateway.delete_file(owner, file_name)
        logger.info(f"File was deleted [name={file_name}]")

    async def list_files(self, owner: str) -> List[FileDescriptor]:
        """
        List the owner's files with their upload completion percentage.
        """
        records = await self.gateway.get_file_info_list(owner)
        return describe_files(owner, records)

    async def _download_file(
        self,
        storage_path: str,
        sink=None,
        on_progress: Optional[ProgressCallback] = None
    ) -> bytes:
        position = 0
        chunk_number = 0
        buffers = []
        file_size = await self.gateway.get_file_size(storage_path)
        logger.info(f"Downloading {storage_path} [size={file_size}]")

        while position < file_size:
            current_length = min(self.chunk_length, file_size - position)
            raw_data = await self.gateway.read_chunk(storage_path, position, current_length)
            chunk = decode_chunk(raw_data, current_length)

            if sink is not None:
                sink.write(chunk)
            buffers.append(chunk)
            position += current_length
            logger.debug(f"Chunk {chunk_number} was downloaded [received={position}]")
            chunk_number += 1
            if on_progress:
                on_progress(position, file_size)

        logger.info(f"File was downloaded [path={storage_path}]")
        return b"".join(buffers)
