"""Utility functions for CLI operations."""

import sys
from cli.constants import GREEN, RESET


class ProgressPrinter:
    """Progress callback that redraws a transfer status line on stdout."""

    def __init__(self, action: str, filename: str):
        """
        Args:
            action: Verb shown in the status line (e.g., "Uploading")
            filename: Display name for the file
        """
        self.action = action
        self.filename = filename
        self._finished = False

    def __call__(self, transferred: int, total: int) -> None:
        progress = (transferred / total) * 100 if total else 100.0
        sys.stdout.write(
            f"\r{self.action} {self.filename}: {format_file_size(transferred)} / "
            f"{format_file_size(total)} ({GREEN}{progress:.1f}%{RESET})"
        )
        sys.stdout.flush()
        if transferred >= total:
            self.finish()

    def finish(self) -> None:
        """Finalize progress display with newline."""
        if not self._finished:
            self._finished = True
            sys.stdout.write('\n')
            sys.stdout.flush()

    def clear(self) -> None:
        """Wipe a half-drawn status line after a failed transfer."""
        if not self._finished:
            self._finished = True
            sys.stdout.write('\r' + ' ' * 100 + '\r')
            sys.stdout.flush()


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.
    
    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).
    
    Args:
        size_bytes: File size in bytes
        
    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    
    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0
    
    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    
    return f"{size:.2f} PiB"
