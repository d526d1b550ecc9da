"""Command parser for CLI input."""

import shlex

from cli.models import (
    CommandRequest,
    DeleteCommand,
    DownloadCommand,
    ListCommand,
    OwnerCommand,
    UploadCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a command object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        One of Owner/Upload/Download/Delete/List commands

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "owner":
        return _parse_owner(tokens[1:])
    elif command_name == "upload":
        return _parse_upload(tokens[1:])
    elif command_name == "download":
        return _parse_download(tokens[1:])
    elif command_name == "delete":
        return _parse_delete(tokens[1:])
    elif command_name == "list":
        return _parse_list(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_owner(args: list[str]) -> OwnerCommand:
    """Parse 'owner [address]' command."""
    if len(args) > 1:
        raise ParseError("owner takes at most 1 argument: [address]")

    return OwnerCommand(address=args[0] if args else None)


def _parse_upload(args: list[str]) -> UploadCommand:
    """Parse 'upload <local_path> [file_name]' command."""
    if not 1 <= len(args) <= 2:
        raise ParseError("upload requires 1 or 2 arguments: <local_path> [file_name]")

    local_path = args[0]
    file_name = args[1] if len(args) > 1 else None

    return UploadCommand(local_path=local_path, file_name=file_name)


def _parse_download(args: list[str]) -> DownloadCommand:
    """Parse 'download <storage_path> [output_dir]' command."""
    if not 1 <= len(args) <= 2:
        raise ParseError("download requires 1 or 2 arguments: <storage_path> [output_dir]")

    storage_path = args[0]
    if "/" not in storage_path.strip("/"):
        raise ParseError("storage path must look like <owner>/<file_name>")
    output_dir = args[1] if len(args) > 1 else None

    return DownloadCommand(storage_path=storage_path, output_dir=output_dir)


def _parse_delete(args: list[str]) -> DeleteCommand:
    """Parse 'delete <file_name>' command."""
    if len(args) != 1:
        raise ParseError("delete requires exactly 1 argument: <file_name>")

    return DeleteCommand(file_name=args[0])


def _parse_list(args: list[str]) -> ListCommand:
    """Parse 'list' command."""
    if args:
        raise ParseError("list takes no arguments")

    return ListCommand()
