"""Pydantic schemas for API requests and responses."""

from contract.schemas.files import (
    StartUploadRequest,
    StartUploadResponse,
    UploadChunkRequest,
    UploadChunkResponse,
    FileRefRequest,
    StoragePathResponse,
    FileSizeResponse,
    ReadChunkResponse,
    FileInfoResponse,
    FileInfoListResponse
)
from contract.schemas.common import ERROR_RESPONSES, ErrorResponse

__all__ = [
    "StartUploadRequest",
    "StartUploadResponse",
    "UploadChunkRequest",
    "UploadChunkResponse",
    "FileRefRequest",
    "StoragePathResponse",
    "FileSizeResponse",
    "ReadChunkResponse",
    "FileInfoResponse",
    "FileInfoListResponse",
    "ErrorResponse",
    "ERROR_RESPONSES",
]
