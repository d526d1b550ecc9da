"""Shared pytest fixtures for all tests."""

import pytest
from pathlib import Path
from typing import Dict, List, Tuple

from cli.config import Config
from common.codec import hex_to_bytes, split_words, strip_bytes_prefix
from common.exceptions import IncompleteUploadError, StoredFileNotFoundError
from common.storage_path import parse_storage_path
from common.types import FileRecord
from contract.database import init_database
from filestorage.gateway import StorageGateway


class RecordingGateway(StorageGateway):
    """
    In-memory gateway that records every call in order.

    Chunks are kept per offset; reads return zero-padded 32-byte words
    like the contract does.
    """

    def __init__(self, chunk_length: int):
        self.chunk_length = chunk_length
        self.calls: List[Tuple] = []
        self.files: Dict[Tuple[str, str], dict] = {}
        self.closed = False

    def _file(self, owner: str, file_name: str) -> dict:
        key = (strip_bytes_prefix(owner), file_name)
        if key not in self.files:
            raise StoredFileNotFoundError(f"File not found: {key[0]}/{file_name}")
        return self.files[key]

    async def start_upload(self, owner, file_name, size):
        self.calls.append(('start_upload', owner, file_name, size))
        chunk_count = (size + self.chunk_length - 1) // self.chunk_length
        self.files[(strip_bytes_prefix(owner), file_name)] = {
            'size': size,
            'data': bytearray(size),
            'uploaded': [False] * chunk_count,
        }

    async def upload_chunk(self, owner, file_name, position, data):
        self.calls.append(('upload_chunk', owner, file_name, position, data))
        record = self._file(owner, file_name)
        payload = hex_to_bytes(data)
        record['data'][position:position + len(payload)] = payload
        record['uploaded'][position // self.chunk_length] = True

    async def finish_upload(self, owner, file_name):
        self.calls.append(('finish_upload', owner, file_name))
        if not all(self._file(owner, file_name)['uploaded']):
            raise IncompleteUploadError("File is not fully uploaded")

    async def delete_file(self, owner, file_name):
        self.calls.append(('delete_file', owner, file_name))
        self._file(owner, file_name)
        del self.files[(strip_bytes_prefix(owner), file_name)]

    async def get_file_size(self, storage_path):
        self.calls.append(('get_file_size', storage_path))
        return self._file(*parse_storage_path(storage_path))['size']

    async def read_chunk(self, storage_path, position, length):
        self.calls.append(('read_chunk', storage_path, position, length))
        record = self._file(*parse_storage_path(storage_path))
        return split_words(bytes(record['data'][position:position + length]))

    async def get_file_info_list(self, owner):
        self.calls.append(('get_file_info_list', owner))
        owner = strip_bytes_prefix(owner)
        return [
            FileRecord(name=name, size=record['size'], is_chunk_uploaded=tuple(record['uploaded']))
            for (file_owner, name), record in self.files.items()
            if file_owner == owner
        ]

    async def close(self):
        self.closed = True

    def calls_named(self, name: str) -> List[Tuple]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def recording_gateway():
    """
    In-memory gateway with a 4-byte chunk length.
    """
    return RecordingGateway(chunk_length=4)


@pytest.fixture
def ledger_db(tmp_path, monkeypatch) -> Path:
    """
    Create a temporary ledger database and point the contract service at it.

    Args:
        tmp_path: pytest tmp_path fixture
        monkeypatch: pytest monkeypatch fixture

    Returns:
        Path to the SQLite ledger file
    """
    db_path = tmp_path / 'ledger.db'
    monkeypatch.setattr('contract.config.DATABASE_PATH', str(db_path))
    monkeypatch.setattr('contract.config.CHUNK_LENGTH', 4)
    init_database(str(db_path))
    return db_path


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .filestorage directory
    """
    config_dir = tmp_path / '.filestorage'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a sample file for testing file uploads.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / 'test.txt'
    file_path.write_text('Sample content for testing')
    return file_path
