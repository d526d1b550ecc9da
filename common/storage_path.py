"""Helpers for building and splitting storage paths."""

from typing import Tuple

from common.codec import strip_bytes_prefix

RESERVED_FILE_NAMES = ("", ".", "..")


def build_storage_path(owner: str, file_name: str) -> str:
    """
    Build the storage path of a file.

    Args:
        owner: Owner address, with or without the 0x prefix
        file_name: Name of the stored file

    Returns:
        "<owner without prefix>/<file_name>"
    """
    return f"{strip_bytes_prefix(owner)}/{file_name}"


def parse_storage_path(storage_path: str) -> Tuple[str, str]:
    """
    Split a storage path into (owner, file_name).

    Raises:
        ValueError: If the path has no owner/name separator
    """
    owner, sep, file_name = storage_path.partition("/")
    if not sep or not owner or not file_name:
        raise ValueError(f"Malformed storage path: {storage_path!r}")
    return strip_bytes_prefix(owner), file_name


def storage_path_basename(storage_path: str) -> str:
    """
    Return the file name part of a storage path.

    Raises:
        ValueError: If the name is empty or a directory reference
    """
    file_name = storage_path.rsplit("/", 1)[-1]
    if file_name in RESERVED_FILE_NAMES:
        raise ValueError(f"Storage path has no usable file name: {storage_path!r}")
    return file_name
