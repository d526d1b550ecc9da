"""Read-side projection of file records into listing entries."""

from typing import Iterable, List, Sequence

from common.storage_path import build_storage_path
from common.types import FileDescriptor, FileRecord


def uploading_progress(is_chunk_uploaded: Sequence[bool]) -> int:
    """
    Percentage of uploaded chunk slots, rounded down.

    A file without chunk slots (zero bytes) has nothing left to upload and
    reports 100.
    """
    total = len(is_chunk_uploaded)
    if total == 0:
        return 100
    uploaded = sum(1 for status in is_chunk_uploaded if status is True)
    return uploaded * 100 // total


def describe_files(owner: str, records: Iterable[FileRecord]) -> List[FileDescriptor]:
    return [
        FileDescriptor(
            name=record.name,
            size=int(record.size),
            storage_path=build_storage_path(owner, record.name),
            uploading_progress=uploading_progress(record.is_chunk_uploaded),
        )
        for record in records
    ]
