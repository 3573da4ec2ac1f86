"""Output handling of a Git process

Every terminal call of a :class:`~gitcall.runners.GitCommand` selects one
output strategy. A strategy decides how the stdout and stderr of the
child process are connected, which coroutines capture or forward these
streams while the process runs, and how the exit code (and any captured
output) turn into the result of the call.

:func:`execute` runs a command with a given strategy. It waits for the
process to exit and for all stream handlers to finish, in whatever order
these complete, before the strategy settles the result.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from contextlib import suppress
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import (
        Coroutine,
        Iterable,
        Mapping,
        Sequence,
    )
    from os import PathLike

    from gitcall.runners.options import RunOptions
    from gitcall.runners.transforms import Transform

from datasalad.itertools import (
    decode_bytes,
    itemize,
)

from gitcall.consts import (
    ARRAY_ENCODING,
    READ_CHUNK_SIZE,
)
from gitcall.runners.errors import GitError
from gitcall.runners.launcher import spawn
from gitcall.runners.lineprefix import forward

lgr = logging.getLogger('gitcall.runners')

PIPE = asyncio.subprocess.PIPE
DEVNULL = asyncio.subprocess.DEVNULL


class OutputStrategy:
    """Base class of all output strategies

    The base class implements the stderr handling that is shared by all
    strategies that connect any output at all: stderr is forwarded to the
    stderr of the host, line-prefixed, unless ``silence_errors`` is set.
    """

    def __init__(self, opts: RunOptions):
        self.opts = opts

    def stdio(self) -> tuple[int, int]:
        """Return how stdout and stderr of the child are to be connected"""
        return PIPE, DEVNULL if self.opts.silence_errors else PIPE

    def collector(
        self,
        proc: asyncio.subprocess.Process,  # noqa: ARG002
        transforms: Sequence[Transform],  # noqa: ARG002
    ) -> Coroutine[Any, Any, Any] | None:
        """Return a coroutine producing the captured output, if any"""
        return None

    def forwarders(
        self,
        proc: asyncio.subprocess.Process,
    ) -> list[Coroutine[Any, Any, None]]:
        """Return coroutines copying child output to the host streams"""
        if proc.stderr is None:
            return []
        return [forward(proc.stderr, sys.stderr, self.opts.prefix)]

    def settle(
        self,
        returncode: int,
        output: Any,
        *,
        cmd: list[str],
        cwd: str | PathLike | None,
    ) -> Any:
        """Return the result of a call, or raise ``GitError``"""
        if returncode:
            raise GitError.from_returncode(
                returncode,
                cmd=cmd,
                prefix=self.opts.prefix,
                cwd=cwd,
            )
        return output


class Ignore(OutputStrategy):
    """Discard all output, report success as a boolean

    Both streams are connected to ``DEVNULL``, nothing is read. This
    strategy never raises for a non-zero exit. A process that is
    terminated by a signal is reported as ``False`` too.
    """

    def stdio(self) -> tuple[int, int]:
        return DEVNULL, DEVNULL

    def forwarders(self, proc):
        return []

    def settle(self, returncode, output, *, cmd, cwd):
        if returncode:
            lgr.debug('%r exited with %s, reporting failure', cmd, returncode)
        return returncode == 0


class Passthrough(OutputStrategy):
    """Forward stdout and stderr of the child to those of the host

    Each line is prefixed with the configured ``prefix``. Forwarding
    happens live, while the child is running.
    """

    def forwarders(self, proc):
        return [
            forward(proc.stdout, sys.stdout, self.opts.prefix),
            *super().forwarders(proc),
        ]

    def settle(self, returncode, output, *, cmd, cwd):
        super().settle(returncode, output, cmd=cmd, cwd=cwd)
        return True


class Capture(OutputStrategy):
    """Collect stdout of the child into a single value

    The chunks read from stdout are passed through all transform stages,
    in order. In plain mode the result is ``bytes``, or ``str`` when an
    ``encoding`` is given (or a transform already produced ``str``).
    In array mode (``array=True``) the chunks are decoded before
    the first transform stage, and the items coming out of the last
    stage are returned as a list. Without any transform stage, array
    items are the lines of the output, without line endings.

    Stdout is collected as raw chunks. Transform stages and decoding only
    run after the process exited with code 0, a failed process is reported
    as ``GitError`` regardless of its output. Undecodable bytes are
    backslash-escaped.

    Stderr is forwarded while stdout is collected.
    """

    def __init__(self, opts: RunOptions, *, array: bool = False):
        super().__init__(opts)
        self.array = array
        self._transforms: Sequence[Transform] = ()

    def collector(self, proc, transforms):
        self._transforms = transforms
        return _collect(proc.stdout)

    def settle(self, returncode, output, *, cmd, cwd):
        # raw chunks are only processed once the exit code is known to be 0
        chunks = super().settle(returncode, output, cmd=cmd, cwd=cwd)
        return self._process(chunks)

    def _process(self, chunks: list[bytes]) -> bytes | str | list[str]:
        items: Iterable[Any] = chunks
        transforms = self._transforms
        if self.array:
            items = decode_bytes(
                items,
                encoding=self.opts.encoding or ARRAY_ENCODING,
                backslash_replace=True,
            )
            if not transforms:
                items = itemize(items, sep=None, keep_ends=False)
        for transform in transforms:
            items = transform(items)

        if self.array:
            return list(items)
        return self._join(list(items))

    def _join(self, items: list[bytes | str]) -> bytes | str:
        if items and isinstance(items[0], str):
            return ''.join(items)
        data = b''.join(items)
        if self.opts.encoding is None:
            return data
        return data.decode(self.opts.encoding, errors='backslashreplace')


async def _collect(reader: asyncio.StreamReader) -> list[bytes]:
    chunks = []
    while True:
        chunk = await reader.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)
    return chunks


async def _nothing() -> None:
    return None


async def execute(
    cmd: list[str],
    strategy: OutputStrategy,
    *,
    cwd: str | PathLike | None = None,
    env: Mapping[str, str] | None = None,
    transforms: Sequence[Transform] = (),
) -> Any:
    """Run ``cmd`` and return the result determined by ``strategy``

    The process exit, the completion of the output capture, and the
    completion of each forwarder are independent events. All of them are
    awaited before the result is settled, without assuming any order.
    If any of them fails, or the call is cancelled, the child process is
    killed and reaped before the exception propagates. Errors on process
    creation are not caught.
    """
    stdout, stderr = strategy.stdio()
    proc = await spawn(cmd, cwd=cwd, env=env, stdout=stdout, stderr=stderr)
    tasks = [
        asyncio.ensure_future(c)
        for c in (
            proc.wait(),
            strategy.collector(proc, transforms) or _nothing(),
            *strategy.forwarders(proc),
        )
    ]
    try:
        returncode, output, *_ = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        with suppress(ProcessLookupError):
            proc.kill()
        await asyncio.gather(*tasks, return_exceptions=True)
        await proc.wait()
        raise
    lgr.debug('%r exited with %s', cmd, returncode)
    return strategy.settle(returncode, output, cmd=cmd, cwd=cwd)
