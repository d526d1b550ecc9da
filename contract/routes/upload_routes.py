"""Chunked upload API routes."""

from fastapi import APIRouter, Depends, status

from common.storage_path import build_storage_path
from contract.schemas.files import (
    StartUploadRequest,
    StartUploadResponse,
    UploadChunkRequest,
    UploadChunkResponse,
    FileRefRequest,
    StoragePathResponse
)
from contract.schemas.common import ERROR_RESPONSES
from contract.services.storage_service import StorageService

router = APIRouter(prefix="/uploads", tags=["Uploads"], responses=ERROR_RESPONSES)


def get_storage_service() -> StorageService:
    return StorageService()


@router.post("", response_model=StartUploadResponse, status_code=status.HTTP_201_CREATED)
async def start_upload(
    request: StartUploadRequest,
    service: StorageService = Depends(get_storage_service)
):
    """
    Allocate a file record and its per-chunk status vector.

    Raises:
        - 400: Invalid file name
        - 409: File already exists
        - 413: File size outside the allowed range
    """
    stored = service.start_upload(request.owner, request.file_name, request.size)
    return StartUploadResponse(
        storage_path=build_storage_path(stored.owner, stored.name),
        chunk_count=stored.chunk_count,
    )


@router.post("/chunks", response_model=UploadChunkResponse)
async def upload_chunk(
    request: UploadChunkRequest,
    service: StorageService = Depends(get_storage_service)
):
    """
    Commit one chunk of hex-encoded data at a chunk-aligned position.

    Raises:
        - 400: Misaligned position, wrong length, or invalid hex
        - 404: File not found
        - 409: Chunk already uploaded
    """
    chunk_index = service.upload_chunk(
        request.owner, request.file_name, request.position, request.data
    )
    return UploadChunkResponse(chunk_index=chunk_index)


@router.post("/finish", response_model=StoragePathResponse)
async def finish_upload(
    request: FileRefRequest,
    service: StorageService = Depends(get_storage_service)
):
    """
    Validate that every chunk slot is filled.

    Raises:
        - 404: File not found
        - 409: Some chunks are missing
    """
    storage_path = service.finish_upload(request.owner, request.file_name)
    return StoragePathResponse(storage_path=storage_path)
