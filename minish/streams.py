"""
Output streams for minish.

Built-ins write text while external programs produce raw bytes. Both end up
on the same sink, so the streams here accept either and encode text as UTF-8
before writing. Keeping a single binary sink preserves the order of what the
shell printed, regardless of where it came from.
"""

import io
import sys
from typing import BinaryIO, Optional, TextIO, Union


class OutputStream:
    """
    Binary output stream that also accepts text.

    Usage:
        stream = OutputStream.to_buffer()
        stream.write("hello\\n")
        stream.write(b"raw bytes")
        stream.get_value()  # b"hello\\nraw bytes"
    """

    def __init__(self, sink: BinaryIO, text: Optional[TextIO] = None):
        """
        Args:
            sink: Binary file-like object receiving all data
            text: Text stream wrapping ``sink``, flushed before binary writes
        """
        self.sink = sink
        self.text = text

    @classmethod
    def to_buffer(cls) -> "OutputStream":
        """Create a stream backed by an in-memory buffer."""
        return cls(io.BytesIO())

    @classmethod
    def from_text_stream(cls, stream: TextIO) -> "OutputStream":
        """
        Wrap a text stream such as ``sys.stdout``.

        Writes go to the underlying ``buffer`` when the stream has one.
        Streams without a binary layer (e.g. a replaced ``sys.stdout``)
        are written to as text, decoding bytes with replacement.
        """
        buffer = getattr(stream, 'buffer', None)
        if buffer is None:
            return _TextOnlyStream(stream)
        return cls(buffer, text=stream)

    @classmethod
    def stdout(cls) -> "OutputStream":
        return cls.from_text_stream(sys.stdout)

    def write(self, data: Union[str, bytes]) -> int:
        if isinstance(data, str):
            data = data.encode('utf-8')
        if self.text is not None:
            self.text.flush()
        return self.sink.write(data)

    def flush(self):
        if self.text is not None:
            self.text.flush()
        self.sink.flush()

    def get_value(self) -> bytes:
        """Return everything written so far (in-memory buffers only)."""
        if isinstance(self.sink, io.BytesIO):
            return self.sink.getvalue()
        raise ValueError("stream is not backed by a buffer")


class ErrorStream(OutputStream):
    """Output stream for diagnostics"""

    @classmethod
    def stderr(cls) -> "OutputStream":
        return cls.from_text_stream(sys.stderr)


class _TextOnlyStream(OutputStream):
    """Adapter for text streams lacking a binary buffer"""

    def __init__(self, stream: TextIO):
        super().__init__(sink=None, text=stream)

    def write(self, data: Union[str, bytes]) -> int:
        if isinstance(data, bytes):
            data = data.decode('utf-8', errors='replace')
        return self.text.write(data)

    def flush(self):
        self.text.flush()

    def get_value(self) -> bytes:
        getvalue = getattr(self.text, 'getvalue', None)
        if getvalue is None:
            raise ValueError("stream is not backed by a buffer")
        return getvalue().encode('utf-8')
