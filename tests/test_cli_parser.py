"""Tests for CLI command parsing."""

import pytest

from cli.models import (
    DeleteCommand,
    DownloadCommand,
    ListCommand,
    OwnerCommand,
    UploadCommand,
)
from cli.parser import ParseError, parse_command


class TestOwner:
    def test_without_address(self):
        assert parse_command('owner') == OwnerCommand()

    def test_with_address(self):
        assert parse_command('owner 0xabc') == OwnerCommand(address='0xabc')

    def test_too_many_arguments(self):
        with pytest.raises(ParseError):
            parse_command('owner a b')


class TestUpload:
    def test_local_path_only(self):
        assert parse_command('upload photos/cat.png') == UploadCommand(local_path='photos/cat.png')

    def test_with_file_name(self):
        cmd = parse_command('upload report.pdf q3.pdf')
        assert cmd == UploadCommand(local_path='report.pdf', file_name='q3.pdf')

    def test_quoted_path(self):
        cmd = parse_command('upload "my docs/notes.txt"')
        assert cmd.local_path == 'my docs/notes.txt'

    @pytest.mark.parametrize('line', ['upload', 'upload a b c'])
    def test_argument_count(self, line):
        with pytest.raises(ParseError):
            parse_command(line)


class TestDownload:
    def test_storage_path(self):
        cmd = parse_command('download abc/cat.png')
        assert cmd == DownloadCommand(storage_path='abc/cat.png')

    def test_with_output_dir(self):
        cmd = parse_command('download abc/cat.png /tmp/out')
        assert cmd.output_dir == '/tmp/out'

    @pytest.mark.parametrize('line', ['download cat.png', 'download /cat.png', 'download'])
    def test_invalid_storage_path(self, line):
        with pytest.raises(ParseError):
            parse_command(line)


def test_delete():
    assert parse_command('delete cat.png') == DeleteCommand(file_name='cat.png')
    with pytest.raises(ParseError):
        parse_command('delete')


def test_list():
    assert parse_command('list') == ListCommand()
    with pytest.raises(ParseError, match='no arguments'):
        parse_command('list everything')


@pytest.mark.parametrize('line', ['', '   ', 'frobnicate x', 'upload "unterminated'])
def test_invalid_input(line):
    with pytest.raises(ParseError):
        parse_command(line)
