"""Interactive prompt for the filestorage CLI."""

import os
import sys
from typing import Callable, Dict

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from cli.commands import (
    handle_delete,
    handle_download,
    handle_list,
    handle_owner,
    handle_upload,
)
from cli.completer import FilestorageCompleter
from cli.constants import (
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from cli.models import (
    DeleteCommand,
    DownloadCommand,
    ListCommand,
    OwnerCommand,
    UploadCommand,
)
from cli.parser import ParseError, parse_command

HANDLERS: Dict[type, Callable] = {
    OwnerCommand: handle_owner,
    UploadCommand: handle_upload,
    DownloadCommand: handle_download,
    DeleteCommand: handle_delete,
    ListCommand: handle_list,
}


def clear_screen() -> None:
    os.system("cls" if sys.platform == "win32" else "clear")


def show_welcome() -> None:
    """Redraw the banner shown at startup and after 'clear'."""
    print(LOGO)
    print(WELCOME_TITLE)
    print(WELCOME_HELP)


def dispatch_command(cmd_obj) -> str:
    """Run the handler registered for a parsed command."""
    handler = HANDLERS.get(type(cmd_obj))
    if handler is None:
        return f"Unknown command type: {type(cmd_obj)}"
    return handler(cmd_obj)


def run_line(user_input: str) -> bool:
    """
    Execute one line of input.

    Returns:
        False once the user asked to leave, True otherwise
    """
    line = user_input.strip()
    if not line:
        return True
    if line == "exit":
        print("Goodbye!")
        return False
    if line == "help":
        print(HELP_TEXT)
    elif line == "clear":
        clear_screen()
        show_welcome()
    else:
        try:
            print(dispatch_command(parse_command(line)))
        except ParseError as e:
            print(f"Error: {e}")
    return True


def repl_loop() -> None:
    """Prompt for commands until 'exit' or end of input."""
    session: PromptSession = PromptSession(
        completer=FilestorageCompleter(), history=InMemoryHistory(), style=STYLE
    )

    clear_screen()
    show_welcome()

    running = True
    while running:
        try:
            running = run_line(session.prompt([("class:prompt", PROMPT_TEXT)]))
        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break
