"""Ready-made transform stages for captured output

A transform stage is any callable that takes an iterable of output chunks
and returns an iterable of (transformed) chunks. This is the contract of
the generators in ``datasalad.itertools``, which can be used as stages
directly (e.g., via ``functools.partial``). Stages are applied in the
order in which they were added with :meth:`GitCommand.pipe`.

In a plain capture, stages receive ``bytes`` chunks. In an array capture,
chunks are decoded to ``str`` before the first stage sees them.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import partial
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    TypeVar,
)

if TYPE_CHECKING:
    from collections.abc import Generator

from datasalad.itertools import (
    decode_bytes,
    itemize,
)

T = TypeVar('T', str, bytes)
Transform = Callable[[Iterable[Any]], Iterable[Any]]


def lines(*, keep_ends: bool = False) -> Transform:
    """Return a stage that yields one item per line

    Any of the common line endings (``\\n``, ``\\r\\n``, ``\\r``) is
    recognized. A trailing line without a line ending is yielded too.
    """
    return partial(itemize, sep=None, keep_ends=keep_ends)


def decode(encoding: str = 'utf-8') -> Transform:
    """Return a stage that decodes ``bytes`` chunks to ``str``

    Multi-byte characters that are split across chunks are handled.
    Undecodable bytes are backslash-escaped.
    """
    return partial(decode_bytes, encoding=encoding, backslash_replace=True)


def replace(old: T, new: T) -> Callable[[Iterable[T]], Generator[T]]:
    """Return a stage that replaces all occurrences of ``old`` with ``new``

    Occurrences spanning a chunk boundary are replaced too. To this end,
    the end of a chunk that could be the start of an occurrence is held
    back until the next chunk arrives.
    """
    if not old:
        msg = 'cannot replace an empty string'
        raise ValueError(msg)
    keep = len(old) - 1

    def _replace(iterable: Iterable[T]) -> Generator[T]:
        pending = old[:0]
        for chunk in iterable:
            parts = (pending + chunk).split(old)
            last = parts.pop()
            if keep:
                head, pending = last[:-keep], last[-keep:]
            else:
                head, pending = last, old[:0]
            out = new.join([*parts, head])
            if out:
                yield out
        if pending:
            yield pending

    return _replace
