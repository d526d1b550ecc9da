"""Pydantic schemas for upload and file endpoints."""

from typing import List
from pydantic import BaseModel


class StartUploadRequest(BaseModel):
    """Request model for allocating a file record."""
    owner: str
    file_name: str
    size: int


class StartUploadResponse(BaseModel):
    """Response model for an allocated file record."""
    storage_path: str
    chunk_count: int


class UploadChunkRequest(BaseModel):
    """Request model for committing one chunk."""
    owner: str
    file_name: str
    position: int
    data: str


class UploadChunkResponse(BaseModel):
    """Response model for a committed chunk."""
    chunk_index: int


class FileRefRequest(BaseModel):
    """Request model naming a file by owner and name."""
    owner: str
    file_name: str


class StoragePathResponse(BaseModel):
    """Response model carrying the storage path of a file."""
    storage_path: str


class FileSizeResponse(BaseModel):
    """Response model for a declared file size."""
    size: int


class ReadChunkResponse(BaseModel):
    """Response model for chunk read-back as 32-byte words."""
    words: List[str]


class FileInfoResponse(BaseModel):
    """Response model for one file record."""
    name: str
    size: int
    is_chunk_uploaded: List[bool]


class FileInfoListResponse(BaseModel):
    """Response model for an owner's file records."""
    files: List[FileInfoResponse]
