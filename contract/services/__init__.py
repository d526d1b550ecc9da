"""Service layer for business logic."""

from contract.services.storage_service import StorageService

__all__ = [
    "StorageService",
]
