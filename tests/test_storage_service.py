"""Tests for the storage contract rules in StorageService."""

import pytest

from common.codec import decode_chunk
from common.exceptions import (
    ChunkAlreadyUploadedError,
    FileAlreadyExistsError,
    FileTooLargeError,
    IncompleteUploadError,
    InvalidChunkError,
    InvalidFileNameError,
    InvalidReadRangeError,
    StoredFileNotFoundError,
)
from contract.database import get_db_connection
from contract.services.storage_service import StorageService, chunk_count_for

OWNER = '0xabc123'


@pytest.fixture
def service(ledger_db):
    return StorageService(database_path=str(ledger_db), chunk_length=4, max_file_size=64)


def upload_all(service, name, data):
    service.start_upload(OWNER, name, len(data))
    for position in range(0, len(data), 4):
        service.upload_chunk(OWNER, name, position, '0x' + data[position:position + 4].hex())
    return service.finish_upload(OWNER, name)


@pytest.mark.parametrize('size,count', [(0, 0), (1, 1), (4, 1), (5, 2), (10, 3)])
def test_chunk_count_for(size, count):
    assert chunk_count_for(size, 4) == count


class TestStartUpload:
    def test_allocates_status_vector(self, service):
        stored = service.start_upload(OWNER, 'a.bin', 10)

        assert stored.owner == 'abc123'
        assert stored.chunk_count == 3
        assert not stored.completed

        records = service.get_file_info_list(OWNER)
        assert records[0].is_chunk_uploaded == (False, False, False)

    def test_duplicate_name_rejected(self, service):
        service.start_upload(OWNER, 'a.bin', 10)
        with pytest.raises(FileAlreadyExistsError):
            service.start_upload('abc123', 'a.bin', 3)

    @pytest.mark.parametrize('name', ['', 'dir/file', 'x' * 256, '.', '..'])
    def test_invalid_names_rejected(self, service, name):
        with pytest.raises(InvalidFileNameError):
            service.start_upload(OWNER, name, 1)

    @pytest.mark.parametrize('size', [-1, 65])
    def test_size_limits(self, service, size):
        with pytest.raises(FileTooLargeError):
            service.start_upload(OWNER, 'a.bin', size)


class TestUploadChunk:
    def test_marks_slot_uploaded(self, service):
        service.start_upload(OWNER, 'a.bin', 10)

        index = service.upload_chunk(OWNER, 'a.bin', 4, '0x34353637')

        assert index == 1
        assert service.get_file_info_list(OWNER)[0].is_chunk_uploaded == (False, True, False)

    def test_misaligned_position_rejected(self, service):
        service.start_upload(OWNER, 'a.bin', 10)
        with pytest.raises(InvalidChunkError):
            service.upload_chunk(OWNER, 'a.bin', 2, '0x34353637')

    def test_position_past_end_rejected(self, service):
        service.start_upload(OWNER, 'a.bin', 10)
        with pytest.raises(InvalidChunkError):
            service.upload_chunk(OWNER, 'a.bin', 12, '0x34')

    def test_wrong_length_rejected(self, service):
        service.start_upload(OWNER, 'a.bin', 10)
        with pytest.raises(InvalidChunkError):
            service.upload_chunk(OWNER, 'a.bin', 8, '0x383939')

    def test_invalid_hex_rejected(self, service):
        service.start_upload(OWNER, 'a.bin', 10)
        with pytest.raises(InvalidChunkError):
            service.upload_chunk(OWNER, 'a.bin', 0, '0xzzzzzzzz')

    def test_duplicate_chunk_rejected(self, service):
        service.start_upload(OWNER, 'a.bin', 10)
        service.upload_chunk(OWNER, 'a.bin', 0, '0x30313233')
        with pytest.raises(ChunkAlreadyUploadedError):
            service.upload_chunk(OWNER, 'a.bin', 0, '0x30313233')

    def test_unknown_file_rejected(self, service):
        with pytest.raises(StoredFileNotFoundError):
            service.upload_chunk(OWNER, 'ghost.bin', 0, '0x30313233')

    def test_finished_file_rejects_chunks(self, service):
        upload_all(service, 'done.bin', b'0123')
        with pytest.raises(InvalidChunkError):
            service.upload_chunk(OWNER, 'done.bin', 0, '0x30313233')


class TestFinishUpload:
    def test_incomplete_upload_rejected(self, service):
        service.start_upload(OWNER, 'a.bin', 10)
        service.upload_chunk(OWNER, 'a.bin', 0, '0x30313233')
        with pytest.raises(IncompleteUploadError):
            service.finish_upload(OWNER, 'a.bin')

    def test_complete_upload_returns_storage_path(self, service):
        assert upload_all(service, 'a.bin', b'0123456789') == 'abc123/a.bin'

    def test_zero_length_file_finishes_immediately(self, service):
        service.start_upload(OWNER, 'empty', 0)
        assert service.finish_upload(OWNER, 'empty') == 'abc123/empty'
        assert service.get_file_size('abc123/empty') == 0


class TestReadChunk:
    def test_reads_words_with_padding(self, service):
        upload_all(service, 'a.bin', b'0123456789')

        words = service.read_chunk('abc123/a.bin', 8, 2)

        assert len(words) == 1
        assert len(words[0]) == 66
        assert decode_chunk(words, 2) == b'89'

    def test_read_spanning_slots(self, service):
        upload_all(service, 'a.bin', b'0123456789')
        assert decode_chunk(service.read_chunk('abc123/a.bin', 2, 4), 4) == b'2345'

    def test_missing_slots_read_as_zero(self, service):
        service.start_upload(OWNER, 'a.bin', 8)
        service.upload_chunk(OWNER, 'a.bin', 4, '0x34353637')

        assert decode_chunk(service.read_chunk('abc123/a.bin', 0, 4), 4) == b'\x00' * 4
        assert decode_chunk(service.read_chunk('abc123/a.bin', 4, 4), 4) == b'4567'

    @pytest.mark.parametrize('position,length', [(0, 0), (8, 4), (0, 5), (-1, 2)])
    def test_invalid_ranges_rejected(self, service, position, length):
        upload_all(service, 'a.bin', b'0123456789')
        with pytest.raises(InvalidReadRangeError):
            service.read_chunk('abc123/a.bin', position, length)

    def test_malformed_storage_path(self, service):
        with pytest.raises(StoredFileNotFoundError):
            service.read_chunk('no-separator', 0, 1)


class TestDeleteFile:
    def test_delete_removes_file_and_chunks(self, service, ledger_db):
        upload_all(service, 'a.bin', b'0123456789')

        assert service.delete_file(OWNER, 'a.bin') == 'abc123/a.bin'

        assert service.get_file_info_list(OWNER) == []
        with get_db_connection(str(ledger_db)) as conn:
            remaining = conn.execute("SELECT COUNT(*) AS n FROM chunks").fetchone()["n"]
        assert remaining == 0

    def test_delete_partial_upload(self, service):
        service.start_upload(OWNER, 'a.bin', 10)
        service.upload_chunk(OWNER, 'a.bin', 0, '0x30313233')

        service.delete_file(OWNER, 'a.bin')

        service.start_upload(OWNER, 'a.bin', 3)

    def test_delete_unknown_file(self, service):
        with pytest.raises(StoredFileNotFoundError):
            service.delete_file(OWNER, 'ghost.bin')


def test_file_info_list_is_per_owner(service):
    upload_all(service, 'mine.bin', b'01')
    service.start_upload('0xother', 'theirs.bin', 4)

    assert [r.name for r in service.get_file_info_list(OWNER)] == ['mine.bin']
    assert [r.name for r in service.get_file_info_list('other')] == ['theirs.bin']
