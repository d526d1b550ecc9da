"""Configuration settings for the storage contract service."""

import os
from common.constants import CHUNK_LENGTH, DEFAULT_CONTRACT_PORT, MAX_FILE_SIZE


DATABASE_PATH = os.environ.get("FS_DATABASE_PATH", "/app/data/ledger.db")

CONTRACT_HOST = os.environ.get("FS_CONTRACT_HOST", "0.0.0.0")

CONTRACT_PORT = int(os.environ.get("FS_CONTRACT_PORT", str(DEFAULT_CONTRACT_PORT)))
