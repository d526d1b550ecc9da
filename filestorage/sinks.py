"""Output sinks for streaming downloads."""

import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional


def supports_streaming(sink) -> bool:
    """Return True if ``sink`` offers callable write() and close()."""
    return callable(getattr(sink, 'write', None)) and callable(getattr(sink, 'close', None))


class FileSink:
    """
    Writes downloaded chunks into a temporary file next to ``path``.

    The target is only replaced by ``commit()``, so a failed download
    leaves whatever was already at ``path`` untouched. Used as a context
    manager, the temporary file is discarded when the block raises.
    """

    def __init__(self, path: Path):
        """
        Open a temporary file beside the target, creating parent directories.

        Args:
            path: Destination file path
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".part"
        )
        self.temp_path = Path(temp_name)
        self._file: Optional[BinaryIO] = os.fdopen(fd, 'wb')
        self._committed = False
        self.bytes_written = 0

    def write(self, data: bytes) -> None:
        self._file.write(data)
        self.bytes_written += len(data)

    def close(self) -> None:
        """Close the temporary file; safe to call twice."""
        if self._file:
            self._file.close()
            self._file = None

    def commit(self) -> Path:
        """Move the finished download over the target path."""
        self.close()
        os.replace(self.temp_path, self.path)
        self._committed = True
        return self.path

    def discard(self) -> None:
        """Drop the temporary file without touching the target."""
        self.close()
        if not self._committed:
            self.temp_path.unlink(missing_ok=True)

    def __enter__(self) -> 'FileSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            self.discard()
        else:
            self.close()
