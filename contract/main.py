"""Entry point for the storage contract service."""

import uvicorn
import time
import uuid
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from common.exceptions import FilestorageError
from common.logging_config import setup_logging
from contract.config import CONTRACT_HOST, CONTRACT_PORT
from contract.database import init_database
from contract.routes.upload_routes import router as upload_router
from contract.routes.file_routes import router as file_router

logger = setup_logging('contract')

app = FastAPI(
    title="Ledger Filestorage Contract",
    description="Ledger-backed chunked file storage contract service",
    version="1.0.0"
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware to log all HTTP requests and responses.
    """
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()

    logger.info(
        f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
    )

    response = await call_next(request)

    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
    )

    response.headers["X-Request-ID"] = request_id

    return response


@app.on_event("startup")
async def startup_event():
    """
    Initialize database on application startup.
    """
    logger.info("Contract service starting up...")
    init_database()
    logger.info("Database initialized")


@app.exception_handler(FilestorageError)
async def filestorage_error_handler(request: Request, exc: FilestorageError):
    request_id = getattr(request.state, 'request_id', 'unknown')
    if exc.status_code >= 500:
        logger.error(
            f"{type(exc).__name__}: {exc} [request_id={request_id}] path={request.url.path}",
            exc_info=True
        )
    else:
        logger.warning(
            f"{type(exc).__name__}: {exc} [request_id={request_id}] path={request.url.path}"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": str(exc), "code": exc.code}
    )


app.include_router(upload_router)
app.include_router(file_router)


@app.get("/")
async def root():
    """
    Root endpoint for health check.
    """
    return {"message": "Ledger Filestorage Contract API", "status": "running"}


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "contract.main:app",
        host=CONTRACT_HOST,
        port=CONTRACT_PORT
    )


if __name__ == "__main__":
    main()
