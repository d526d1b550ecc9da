"""Command data types for CLI."""

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True)
class OwnerCommand:
    """Show or set the owner address."""

    address: Optional[str] = None
    command: Literal["owner"] = "owner"


@dataclass(frozen=True)
class UploadCommand:
    """Upload a local file."""

    local_path: str
    file_name: Optional[str] = None
    command: Literal["upload"] = "upload"


@dataclass(frozen=True)
class DownloadCommand:
    """Download file by storage path."""

    storage_path: str
    output_dir: Optional[str] = None
    command: Literal["download"] = "download"


@dataclass(frozen=True)
class DeleteCommand:
    """Delete a file by name."""

    file_name: str
    command: Literal["delete"] = "delete"


@dataclass(frozen=True)
class ListCommand:
    """List the owner's files."""

    command: Literal["list"] = "list"


CommandRequest = (
    OwnerCommand
    | UploadCommand
    | DownloadCommand
    | DeleteCommand
    | ListCommand
)
