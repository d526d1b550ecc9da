"""Shared data type definitions (FileRecord, FileDescriptor)."""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class FileRecord:
    """
    Ledger-side metadata for a stored file.

    The size is kept exactly as the gateway reported it; some ledgers hand
    integers back as decimal strings.
    """
    name: str
    size: Union[int, str]
    is_chunk_uploaded: Tuple[bool, ...]


@dataclass(frozen=True)
class FileDescriptor:
    """
    Listing entry for a file owned by an account.
    """
    name: str
    size: int
    storage_path: str
    uploading_progress: int
