"""Chunked file storage client over a ledger-backed storage contract."""

from filestorage.client import FilestorageClient
from filestorage.gateway import StorageGateway
from filestorage.http_gateway import HttpStorageGateway
from filestorage.local_gateway import LocalStorageGateway
from filestorage.listing import describe_files, uploading_progress
from filestorage.sinks import FileSink

__all__ = [
    "FilestorageClient",
    "StorageGateway",
    "HttpStorageGateway",
    "LocalStorageGateway",
    "describe_files",
    "uploading_progress",
    "FileSink",
]
