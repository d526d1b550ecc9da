"""Custom completer for Filestorage CLI with local file autocompletion."""

from pathlib import Path
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS


class FilestorageCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Local file path completion for the first argument of 'upload'
    """

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on cursor position and context.
        """
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        if command != "upload":
            return

        argument_index = len(tokens) if is_typing_new_token else len(tokens) - 1
        if argument_index != 1:
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        yield from self._complete_local_paths(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_local_paths(self, partial: str) -> Iterable[Completion]:
        """
        Complete files and directories relative to the working directory.

        Directories are offered with a trailing '/' so completion can continue.
        """
        directory_part, separator, name_part = partial.rpartition("/")
        if separator and not directory_part:
            base = Path("/")
        else:
            base = Path.cwd() / directory_part

        if not base.is_dir():
            return

        prefix = f"{directory_part}{separator}"
        for item in sorted(base.iterdir()):
            if item.name.startswith(".") and not name_part.startswith("."):
                continue
            if not item.name.startswith(name_part):
                continue
            suffix = "/" if item.is_dir() else ""
            yield Completion(f"{prefix}{item.name}{suffix}", start_position=-len(partial))
