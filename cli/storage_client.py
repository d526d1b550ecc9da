"""Synchronous front end to the filestorage client for the REPL."""

import asyncio
import os
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar

from common.exceptions import (
    FilestorageError,
    GatewayUnavailableError,
    IncompleteUploadError,
    StoredFileNotFoundError,
)
from common.logging_config import get_logger
from cli.config import Config
from cli.constants import YELLOW, RESET
from cli.utils import ProgressPrinter, format_file_size
from filestorage.client import FilestorageClient
from filestorage.gateway import StorageGateway
from filestorage.http_gateway import HttpStorageGateway
from filestorage.local_gateway import LocalStorageGateway

logger = get_logger(__name__)

T = TypeVar('T')

ERROR_MESSAGES = {
    'FILE_ALREADY_EXISTS': 'You already have a file with this name. Delete it first or pick another name.',
    'FILE_NOT_FOUND': 'File not found in storage.',
    'INVALID_FILE_NAME': "Invalid file name. Names must be 1-255 characters without '/'.",
    'FILE_TOO_LARGE': 'File is too large for the storage contract.',
    'INVALID_CHUNK': 'Storage contract rejected a chunk. Check that chunk_length matches the contract.',
    'CHUNK_ALREADY_UPLOADED': 'Storage contract reports this chunk as already uploaded.',
    'UPLOAD_INCOMPLETE': 'Upload did not complete: some chunks are missing.',
    'INVALID_READ_RANGE': 'Storage contract rejected a chunk read. Check that chunk_length matches the contract.',
}


class StorageClient:
    """Runs filestorage operations and formats results for the terminal."""

    def __init__(
        self,
        config: Config,
        gateway_factory: Optional[Callable[[], StorageGateway]] = None
    ):
        """
        Initialize storage client.

        Args:
            config: Configuration instance
            gateway_factory: Optional gateway constructor (testing); defaults
                to a local gateway when a ledger path is configured, otherwise
                to an HTTP gateway for the configured contract URL
        """
        self.config = config
        self.gateway_factory = gateway_factory or self._default_gateway
        target = config.get_ledger_path() or config.get_base_url()
        logger.info(f"Initialized StorageClient [target={target}]")

    def _default_gateway(self) -> StorageGateway:
        ledger_path = self.config.get_ledger_path()
        if ledger_path:
            return LocalStorageGateway(ledger_path, chunk_length=self.config.get_chunk_length())
        return HttpStorageGateway(self.config.get_base_url(), timeout=self.config.get_timeout())

    def _run(self, operation: Callable[[FilestorageClient], Awaitable[T]]) -> T:
        """Open a gateway, run one client operation on it, and close it."""
        async def runner() -> T:
            async with self.gateway_factory() as gateway:
                client = FilestorageClient(gateway, chunk_length=self.config.get_chunk_length())
                return await operation(client)

        return asyncio.run(runner())

    def _format_error(self, error: FilestorageError) -> str:
        """
        Map filestorage errors to user-friendly messages.
        """
        if isinstance(error, GatewayUnavailableError):
            return str(error)
        message = ERROR_MESSAGES.get(error.code)
        if message is None:
            return f"{error} (Code: {error.code})"
        return f"{message} (Code: {error.code})"

    def _require_owner(self) -> str:
        owner = self.config.get_owner_address()
        if not owner:
            raise ValueError("No owner address set. Please run: owner <address>")
        return owner

    def owner(self, address: Optional[str] = None) -> str:
        """
        Show or set the owner address.

        Args:
            address: New owner address, or None to show the current one

        Returns:
            Current owner address message
        """
        if address is None:
            current = self.config.get_owner_address()
            return f"Owner: {current}" if current else "No owner address set."

        self.config.set_owner_address(address)
        logger.info(f"Owner address set: {address}")
        return f"Owner set to {address}"

    def upload(self, local_path: str, file_name: Optional[str] = None) -> str:
        """
        Upload a local file.

        Args:
            local_path: Path of the file to upload
            file_name: Optional name to store the file under (defaults to basename)

        Returns:
            Result message with the storage path
        """
        try:
            owner = self._require_owner()
        except ValueError as e:
            return f"Error: {e}"

        path = Path(local_path).expanduser()
        if not path.exists():
            return f"Error: File not found: {local_path}"
        if not path.is_file():
            return f"Error: Not a file: {local_path}"

        name = file_name or os.path.basename(path)
        progress = ProgressPrinter("Uploading", name)
        logger.info(f"Uploading {path} as {name} [owner={owner}]")

        try:
            data = path.read_bytes()
            storage_path = self._run(
                lambda client: client.upload_file(owner, name, data, on_progress=progress)
            )
            progress.finish()
            return f"Uploaded: {name} ({format_file_size(len(data))})\nStorage path: {storage_path}"
        except IncompleteUploadError as e:
            progress.clear()
            return (
                f"Error uploading {local_path}: {self._format_error(e)}\n"
                f"{YELLOW}The partial file stays listed; delete it before retrying.{RESET}"
            )
        except FilestorageError as e:
            progress.clear()
            return f"Error uploading {local_path}: {self._format_error(e)}"
        except OSError as e:
            progress.clear()
            return f"Error reading {local_path}: {e}"
        except Exception as e:
            progress.clear()
            logger.error(f"Unexpected error during upload: {e}", exc_info=True)
            return f"Unexpected error uploading {local_path}: {e}"

    def download(self, storage_path: str, output_dir: Optional[str] = None) -> str:
        """
        Download a file with progress feedback.

        Args:
            storage_path: Storage path of the file (<owner>/<file_name>)
            output_dir: Optional output directory (defaults to the configured downloads dir)

        Returns:
            Success message with download details
        """
        directory = Path(output_dir) if output_dir else self.config.get_downloads_dir()
        name = storage_path.rsplit('/', 1)[-1]
        progress = ProgressPrinter("Downloading", name)

        try:
            output_file = self._run(
                lambda client: client.download_to_file(storage_path, directory, on_progress=progress)
            )
            progress.finish()
            size = output_file.stat().st_size
            return f"Downloaded: {name} ({format_file_size(size)})\nSaved to: {output_file.absolute()}"
        except StoredFileNotFoundError as e:
            progress.clear()
            return f"Error: {self._format_error(e)}"
        except FilestorageError as e:
            progress.clear()
            return f"Error downloading {storage_path}: {self._format_error(e)}"
        except OSError as e:
            progress.clear()
            return f"Error writing file: {e}"
        except Exception as e:
            progress.clear()
            logger.error(f"Unexpected error during download: {e}", exc_info=True)
            return f"Unexpected error downloading {storage_path}: {e}"

    def delete(self, file_name: str) -> str:
        """
        Delete one of the owner's files.

        Returns:
            Result message
        """
        try:
            owner = self._require_owner()
        except ValueError as e:
            return f"Error: {e}"

        try:
            self._run(lambda client: client.delete_file(owner, file_name))
            return f"Deleted: {file_name}"
        except FilestorageError as e:
            return f"Error deleting {file_name}: {self._format_error(e)}"
        except Exception as e:
            logger.error(f"Unexpected error during delete: {e}", exc_info=True)
            return f"Unexpected error deleting {file_name}: {e}"

    def list_files(self) -> str:
        """
        List the owner's files.

        Returns:
            Formatted list of files with upload progress
        """
        try:
            owner = self._require_owner()
        except ValueError as e:
            return f"Error: {e}"

        try:
            files = self._run(lambda client: client.list_files(owner))
        except FilestorageError as e:
            return f"Error: {self._format_error(e)}"
        except Exception as e:
            logger.error(f"Unexpected error listing files: {e}", exc_info=True)
            return f"Unexpected error listing files: {e}"

        if not files:
            return "No files found."

        output = [f"Found {len(files)} file(s):\n"]
        for descriptor in files:
            status = "complete" if descriptor.uploading_progress == 100 else f"{descriptor.uploading_progress}% uploaded"
            output.append(
                f"  - {descriptor.name}\n"
                f"    Size: {format_file_size(descriptor.size)}\n"
                f"    Path: {descriptor.storage_path}\n"
                f"    Status: {status}"
            )

        return '\n'.join(output)
