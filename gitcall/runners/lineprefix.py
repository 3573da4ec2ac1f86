from __future__ import annotations

import asyncio
import codecs
from typing import (
    TYPE_CHECKING,
    BinaryIO,
    TextIO,
)

if TYPE_CHECKING:
    from asyncio import StreamReader

from gitcall.consts import READ_CHUNK_SIZE


class LinePrefixer:
    """Put a prefix in front of every line of a chunked byte stream

    Chunks can end anywhere in a line. The prefixer keeps track of whether
    the next chunk continues a line or starts a new one. A prefix is emitted
    as soon as the first byte of a line is seen, hence a trailing line
    without a line ending is prefixed too.

    >>> p = LinePrefixer(b'> ')
    >>> p.wrap(b'one\\ntw')
    b'> one\\n> tw'
    >>> p.wrap(b'o\\n')
    b'o\\n'
    """

    def __init__(self, prefix: bytes):
        self._prefix = prefix
        self._at_line_start = True

    def wrap(self, chunk: bytes) -> bytes:
        if not self._prefix or not chunk:
            return chunk
        out = []
        start = 0
        while start < len(chunk):
            end = chunk.find(b'\n', start)
            end = len(chunk) if end == -1 else end + 1
            if self._at_line_start:
                out.append(self._prefix)
            out.append(chunk[start:end])
            self._at_line_start = chunk[end - 1 : end] == b'\n'
            start = end
        return b''.join(out)


async def forward(
    reader: StreamReader,
    stream: TextIO,
    prefix: str = '',
) -> None:
    """Copy the output of a child process to a host stream, line-prefixed

    Reading from ``reader`` only continues once the previous chunk was
    written to ``stream``. A slow ``stream`` therefore throttles the child
    process, once the pipe buffer between the two is full. Writes run in a
    worker thread, so a slow ``stream`` does not block the event loop.

    Bytes are written to the binary buffer of ``stream``, if it has one.
    Otherwise they are decoded (UTF-8, undecodable bytes are
    backslash-escaped) and written as text.
    """
    prefixer = LinePrefixer(prefix.encode())
    buffer = getattr(stream, 'buffer', None)
    decoder = (
        codecs.getincrementaldecoder('utf-8')(errors='backslashreplace')
        if buffer is None
        else None
    )
    while True:
        chunk = await reader.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        data = prefixer.wrap(chunk)
        if decoder is None:
            await asyncio.to_thread(_write_bytes, stream, buffer, data)
        else:
            await asyncio.to_thread(_write_text, stream, decoder.decode(data))
    if decoder is not None:
        tail = decoder.decode(b'', final=True)
        if tail:
            await asyncio.to_thread(_write_text, stream, tail)


def _write_bytes(stream: TextIO, buffer: BinaryIO, data: bytes) -> None:
    # anything already written to the text layer must go first
    stream.flush()
    buffer.write(data)
    buffer.flush()


def _write_text(stream: TextIO, text: str) -> None:
    stream.write(text)
    stream.flush()
