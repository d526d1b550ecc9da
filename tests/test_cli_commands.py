"""Tests for CLI command handlers."""

from unittest.mock import Mock

import pytest

from cli.commands import (
    handle_delete,
    handle_download,
    handle_list,
    handle_owner,
    handle_upload,
)
from cli.models import (
    DeleteCommand,
    DownloadCommand,
    ListCommand,
    OwnerCommand,
    UploadCommand,
)
from cli.main import parse_options
from cli.repl import dispatch_command, run_line
from cli.storage_client import StorageClient


def test_handle_owner_show():
    """Test owner command without an address."""
    mock_client = Mock(spec=StorageClient)
    mock_client.owner.return_value = "No owner address set."

    result = handle_owner(OwnerCommand(), client=mock_client)

    assert result == "No owner address set."
    mock_client.owner.assert_called_once_with(None)


def test_handle_owner_set():
    mock_client = Mock(spec=StorageClient)
    mock_client.owner.return_value = "Owner set to 0xabc"

    result = handle_owner(OwnerCommand(address='0xabc'), client=mock_client)

    assert 'Owner set' in result
    mock_client.owner.assert_called_once_with('0xabc')


def test_handle_upload():
    """Test upload command handler with mocked client."""
    mock_client = Mock(spec=StorageClient)
    mock_client.upload.return_value = "Uploaded: cat.png (1.00 KiB)\nStorage path: abc/cat.png"

    cmd = UploadCommand(local_path='photos/cat.png', file_name='cat.png')
    result = handle_upload(cmd, client=mock_client)

    assert 'Uploaded' in result
    mock_client.upload.assert_called_once_with('photos/cat.png', 'cat.png')


def test_handle_download():
    """Test download command handler with mocked client."""
    mock_client = Mock(spec=StorageClient)
    mock_client.download.return_value = "Downloaded: cat.png (1.00 KiB)"

    cmd = DownloadCommand(storage_path='abc/cat.png', output_dir='/tmp/out')
    result = handle_download(cmd, client=mock_client)

    assert 'Downloaded' in result
    mock_client.download.assert_called_once_with('abc/cat.png', '/tmp/out')


def test_handle_delete():
    """Test delete command handler with mocked client."""
    mock_client = Mock(spec=StorageClient)
    mock_client.delete.return_value = "Deleted: cat.png"

    result = handle_delete(DeleteCommand(file_name='cat.png'), client=mock_client)

    assert result == "Deleted: cat.png"
    mock_client.delete.assert_called_once_with('cat.png')


def test_handle_list():
    """Test list command handler with mocked client."""
    mock_client = Mock(spec=StorageClient)
    mock_client.list_files.return_value = "Found 1 file(s)"

    result = handle_list(ListCommand(), client=mock_client)

    assert 'Found' in result
    mock_client.list_files.assert_called_once_with()


def test_dispatch_routes_to_handler(monkeypatch):
    mock_client = Mock(spec=StorageClient)
    mock_client.list_files.return_value = "No files found."
    monkeypatch.setattr('cli.commands._client', mock_client)

    assert dispatch_command(ListCommand()) == "No files found."


def test_dispatch_unknown_object():
    assert 'Unknown command type' in dispatch_command(object())


def test_run_line_help_and_exit(capsys):
    assert run_line('help') is True
    assert 'Available commands' in capsys.readouterr().out

    assert run_line('exit') is False
    assert 'Goodbye' in capsys.readouterr().out


def test_run_line_reports_parse_errors(capsys):
    assert run_line('download no-slash') is True
    assert capsys.readouterr().out.startswith('Error: storage path')


def test_run_line_blank_input(capsys):
    assert run_line('   ') is True
    assert capsys.readouterr().out == ''


def test_parse_options():
    assert parse_options([]) == (False, None)
    assert parse_options(['--debug', '--ledger', 'ledger.db']) == (True, 'ledger.db')
    with pytest.raises(SystemExit):
        parse_options(['--ledger'])
