"""Exception classes shared by the storage contract service and its clients."""

from typing import Dict, Optional, Type


class FilestorageError(Exception):
    """
    Base exception class for all filestorage errors.

    Every subclass carries a stable error code and the HTTP status the
    contract service answers with, so a gateway can re-raise the same class
    on the client side.
    """
    code = "FILESTORAGE_ERROR"
    status_code = 500


class FileAlreadyExistsError(FilestorageError):
    """
    Raised when starting an upload for a name the owner already uses.
    """
    code = "FILE_ALREADY_EXISTS"
    status_code = 409


class StoredFileNotFoundError(FilestorageError):
    """
    Raised when a storage path or owner/name pair has no file record.
    """
    code = "FILE_NOT_FOUND"
    status_code = 404


class InvalidFileNameError(FilestorageError):
    """
    Raised when a file name is empty, too long, or contains a path separator.
    """
    code = "INVALID_FILE_NAME"
    status_code = 400


class FileTooLargeError(FilestorageError):
    """
    Raised when the declared file size is negative or above the limit.
    """
    code = "FILE_TOO_LARGE"
    status_code = 413


class InvalidChunkError(FilestorageError):
    """
    Raised when a chunk is misaligned, out of range, or of the wrong length.
    """
    code = "INVALID_CHUNK"
    status_code = 400


class ChunkAlreadyUploadedError(FilestorageError):
    """
    Raised when a chunk slot is written twice.
    """
    code = "CHUNK_ALREADY_UPLOADED"
    status_code = 409


class IncompleteUploadError(FilestorageError):
    """
    Raised by finish-upload when some chunk slots are still missing.
    """
    code = "UPLOAD_INCOMPLETE"
    status_code = 409


class InvalidReadRangeError(FilestorageError):
    """
    Raised when a chunk read falls outside the file or exceeds the chunk length.
    """
    code = "INVALID_READ_RANGE"
    status_code = 400


class GatewayError(FilestorageError):
    """
    Raised for a remote failure the gateway cannot map to a known error code.
    """
    code = "GATEWAY_ERROR"
    status_code = 502


class GatewayUnavailableError(FilestorageError):
    """
    Raised when the storage contract cannot be reached.
    """
    code = "GATEWAY_UNAVAILABLE"
    status_code = 503


class StreamUnavailableError(FilestorageError):
    """
    Raised when a streaming download is given a sink without write/close.
    """
    code = "STREAM_UNAVAILABLE"
    status_code = 500


ERROR_CLASSES: Dict[str, Type[FilestorageError]] = {
    cls.code: cls
    for cls in (
        FileAlreadyExistsError,
        StoredFileNotFoundError,
        InvalidFileNameError,
        FileTooLargeError,
        InvalidChunkError,
        ChunkAlreadyUploadedError,
        IncompleteUploadError,
        InvalidReadRangeError,
        GatewayError,
        GatewayUnavailableError,
    )
}


def error_from_code(code: Optional[str], detail: str) -> FilestorageError:
    """
    Build the exception matching a remote error code.

    Args:
        code: Error code reported by the contract service
        detail: Human-readable error detail

    Returns:
        Exception instance (GatewayError for unknown codes)
    """
    return ERROR_CLASSES.get(code, GatewayError)(detail)
