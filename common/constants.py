"""Project-wide constants (chunk length, wire format, contract limits)."""

import os

CHUNK_LENGTH: int = int(os.environ.get("FILESTORAGE_CHUNK_LENGTH", 2 ** 20))  # 1 MiB

WORD_SIZE_BYTES: int = 32

BYTES_PREFIX: str = "0x"

MAX_FILE_SIZE: int = int(os.environ.get("FILESTORAGE_MAX_FILE_SIZE", 100 * 2 ** 20))

MAX_FILENAME_LENGTH: int = 255

DEFAULT_CONTRACT_PORT: int = 8000
