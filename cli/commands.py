"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from cli.models import (
    DeleteCommand,
    DownloadCommand,
    ListCommand,
    OwnerCommand,
    UploadCommand,
)
from cli.config import Config
from cli.storage_client import StorageClient

logger = get_logger(__name__)


_client: Optional[StorageClient] = None


def get_client() -> StorageClient:
    """
    Get or create global StorageClient instance.

    Returns:
        StorageClient instance
    """
    global _client
    if _client is None:
        logger.debug("Creating new StorageClient instance")
        config = Config(Path.home() / '.filestorage' / 'config.json')
        _client = StorageClient(config)
    return _client


def handle_owner(cmd: OwnerCommand, client: Optional[StorageClient] = None) -> str:
    """
    Handle 'owner' command.

    Args:
        cmd: OwnerCommand with optional address
        client: Optional StorageClient for dependency injection (testing)

    Returns:
        Current or updated owner message
    """
    if client is None:
        client = get_client()
    return client.owner(cmd.address)


def handle_upload(cmd: UploadCommand, client: Optional[StorageClient] = None) -> str:
    """
    Handle 'upload' command.

    Args:
        cmd: UploadCommand with local_path and optional file_name
        client: Optional StorageClient for dependency injection (testing)

    Returns:
        Success or error message with the storage path
    """
    logger.info(f"Executing upload command: local_path={cmd.local_path} file_name={cmd.file_name}")
    if client is None:
        client = get_client()
    result = client.upload(cmd.local_path, cmd.file_name)
    logger.debug("Upload command completed")
    return result


def handle_download(cmd: DownloadCommand, client: Optional[StorageClient] = None) -> str:
    """
    Handle 'download' command.

    Args:
        cmd: DownloadCommand with storage_path and optional output_dir
        client: Optional StorageClient for dependency injection (testing)

    Returns:
        Success or error message with download results
    """
    logger.info(f"Executing download command: storage_path={cmd.storage_path} output_dir={cmd.output_dir}")
    if client is None:
        client = get_client()
    result = client.download(cmd.storage_path, cmd.output_dir)
    logger.debug("Download command completed")
    return result


def handle_delete(cmd: DeleteCommand, client: Optional[StorageClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.delete(cmd.file_name)


def handle_list(cmd: ListCommand, client: Optional[StorageClient] = None) -> str:
    """
    Handle 'list' command.

    Args:
        cmd: ListCommand
        client: Optional StorageClient for dependency injection (testing)

    Returns:
        Formatted list of files
    """
    if client is None:
        client = get_client()
    return client.list_files()
