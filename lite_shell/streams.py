"""
Output streams used by processes and the shell.

OutputStream wraps a text stream (sys.stdout, an io.StringIO, ...) and accepts
both str and bytes, so built-ins can write text while captured child output
can be relayed as raw bytes. Failures of the underlying stream are raised as
ShellIOError: a broken output channel ends the session.
"""

import io
import sys
from typing import Optional, TextIO, Union

from .exceptions import ShellIOError


class OutputStream:
    """Text output stream with optional in-memory capture."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        """Create a stream that captures everything in memory."""
        return cls(io.StringIO())

    @classmethod
    def to_stdout(cls) -> 'OutputStream':
        return cls(sys.stdout)

    def write(self, data: Union[str, bytes]) -> int:
        """
        Write data to the underlying stream.

        Args:
            data: Text, or bytes which are decoded as UTF-8 with replacement

        Returns:
            Number of characters written
        """
        if isinstance(data, bytes):
            data = data.decode('utf-8', errors='replace')
        try:
            return self.stream.write(data)
        except OSError as e:
            raise ShellIOError("cannot write output", cause=e)

    def flush(self):
        try:
            self.stream.flush()
        except OSError as e:
            raise ShellIOError("cannot flush output", cause=e)

    def get_value(self) -> Optional[str]:
        """Get captured contents, or None if the stream does not capture."""
        getvalue = getattr(self.stream, 'getvalue', None)
        if getvalue is None:
            return None
        return getvalue()


class ErrorStream(OutputStream):
    """Output stream for diagnostics."""

    @classmethod
    def to_stderr(cls) -> 'ErrorStream':
        return cls(sys.stderr)
