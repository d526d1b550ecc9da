"""API routes package."""

from contract.routes.upload_routes import router as upload_router
from contract.routes.file_routes import router as file_router

__all__ = ["upload_router", "file_router"]
