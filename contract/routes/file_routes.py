"""File read, listing, and deletion API routes."""

from fastapi import APIRouter, Depends, Query

from contract.routes.upload_routes import get_storage_service
from contract.schemas.files import (
    FileInfoListResponse,
    FileInfoResponse,
    FileSizeResponse,
    ReadChunkResponse,
    StoragePathResponse
)
from contract.schemas.common import ERROR_RESPONSES
from contract.services.storage_service import StorageService

router = APIRouter(prefix="/files", tags=["Files"], responses=ERROR_RESPONSES)


@router.get("", response_model=FileInfoListResponse)
async def get_file_info_list(
    owner: str = Query(..., description="Owner address"),
    service: StorageService = Depends(get_storage_service)
):
    """
    List the owner's file records with their chunk status vectors.
    """
    records = service.get_file_info_list(owner)
    return FileInfoListResponse(files=[
        FileInfoResponse(
            name=record.name,
            size=record.size,
            is_chunk_uploaded=list(record.is_chunk_uploaded),
        )
        for record in records
    ])


@router.get("/size", response_model=FileSizeResponse)
async def get_file_size(
    storage_path: str = Query(...),
    service: StorageService = Depends(get_storage_service)
):
    return FileSizeResponse(size=service.get_file_size(storage_path))


@router.get("/chunk", response_model=ReadChunkResponse)
async def read_chunk(
    storage_path: str = Query(...),
    position: int = Query(..., ge=0),
    length: int = Query(..., gt=0),
    service: StorageService = Depends(get_storage_service)
):
    """
    Read a byte range as 0x-prefixed 32-byte words; the last word is zero-padded.

    Raises:
        - 400: Range outside the file or longer than one chunk
        - 404: File not found
    """
    return ReadChunkResponse(words=service.read_chunk(storage_path, position, length))


@router.delete("", response_model=StoragePathResponse)
async def delete_file(
    owner: str = Query(...),
    file_name: str = Query(...),
    service: StorageService = Depends(get_storage_service)
):
    """
    Delete a file record and its chunks, whatever its upload state.

    Raises:
        - 404: File not found
    """
    return StoragePathResponse(storage_path=service.delete_file(owner, file_name))
