from __future__ import annotations

import os
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import (
        Coroutine,
        Iterable,
    )
    from os import PathLike

    from gitcall.runners.transforms import Transform

from gitcall.runners.launcher import derive_env
from gitcall.runners.options import (
    GitOptions,
    RunOptions,
)
from gitcall.runners.strategies import (
    Capture,
    Ignore,
    OutputStrategy,
    Passthrough,
    execute,
)


class GitCommand:
    """A prospective Git command, and the means to run it

    Arguments and transform stages for captured output are accumulated with
    :meth:`push` and :meth:`pipe`. Both return the instance itself, hence
    calls can be chained. The command is executed by one of the terminal
    methods :meth:`ok`, :meth:`pass_`, :meth:`capture`, :meth:`oneline`,
    or :meth:`array`. Each of them returns an awaitable of the result.

    A terminal method takes a snapshot of the arguments and transform
    stages at the time it is called. Later additions do not affect an
    execution that was already requested.

    Transform stages are callables that return a fresh iterator for each
    execution (like the stages in :mod:`gitcall.runners.transforms`).
    A stage that can only be used once makes the command single-use too.
    """

    def __init__(
        self,
        args: Iterable[str | PathLike] = (),
        *,
        cwd: str | PathLike | None = None,
        git: str | None = None,
        git_dir: str | PathLike | None = None,
    ):
        """
        ``args`` are the arguments to the Git executable, not including the
        executable itself. They are copied, the given container is never
        modified.

        ``cwd`` is the working directory of the process, ``git`` the name
        or path of the executable to run instead of ``git``, and ``git_dir``
        the value for the ``GIT_DIR`` environment variable of the process.
        """
        self._args: list[str] = [os.fspath(a) for a in args]
        self._transforms: list[Transform] = []
        self.options = GitOptions(cwd=cwd, git=git, git_dir=git_dir)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._args!r}, {self.options!r})'

    @property
    def args(self) -> tuple[str, ...]:
        return tuple(self._args)

    @property
    def cmd(self) -> list[str]:
        """The full command line, starting with the executable"""
        return [self.options.executable, *self._args]

    def push(self, arg: str | PathLike) -> GitCommand:
        """Append an argument to the command

        No validation is performed, the argument is passed on verbatim.
        """
        self._args.append(os.fspath(arg))
        return self

    def pipe(self, transform: Transform) -> GitCommand:
        """Append a transform stage for captured output"""
        self._transforms.append(transform)
        return self

    def ok(self) -> Coroutine[Any, Any, bool]:
        """Run the command with all output discarded

        The result is ``True`` if the command exited with code 0, and
        ``False`` for any other outcome. This never raises ``GitError``.
        """
        return self._execute(Ignore(RunOptions()))

    def pass_(self, **kwargs: Any) -> Coroutine[Any, Any, bool]:
        """Run the command with output forwarded to the host's stdout/stderr

        Supported keyword arguments are ``prefix`` (prepended to every
        forwarded line) and ``silence_errors`` (discard stderr).

        The result is ``True``. A non-zero exit raises ``GitError``.
        """
        return self._execute(Passthrough(RunOptions.from_kwargs(**kwargs)))

    def capture(self, **kwargs: Any) -> Coroutine[Any, Any, bytes | str]:
        """Run the command and return its (transformed) stdout

        Supported keyword arguments are ``prefix`` and ``silence_errors``,
        which apply to the forwarding of stderr, and ``encoding``. Without
        an ``encoding``, ``bytes`` are returned.

        A non-zero exit raises ``GitError``.
        """
        return self._execute(Capture(RunOptions.from_kwargs(**kwargs)))

    def oneline(self, **kwargs: Any) -> Coroutine[Any, Any, str]:
        """Like :meth:`capture`, but return text without trailing newlines

        The output is decoded as UTF-8, unless another ``encoding`` is
        given. Only trailing ``\\n`` characters are removed, any others are
        kept.
        """
        if kwargs.get('encoding') is None:
            kwargs['encoding'] = 'utf-8'
        return _strip_trailing_newlines(self.capture(**kwargs))

    def array(self, **kwargs: Any) -> Coroutine[Any, Any, list[str]]:
        """Run the command and return its (transformed) stdout as a list

        Output is decoded before any transform stage is applied. Without
        transform stages, the list contains the lines of the output.
        Otherwise it contains the items emitted by the last stage.

        A non-zero exit raises ``GitError``.
        """
        return self._execute(
            Capture(RunOptions.from_kwargs(**kwargs), array=True),
        )

    def _execute(self, strategy: OutputStrategy) -> Coroutine[Any, Any, Any]:
        return execute(
            self.cmd,
            strategy,
            cwd=self.options.cwd,
            env=derive_env(self.options.git_dir),
            transforms=tuple(self._transforms),
        )


def git(
    args: Iterable[str | PathLike] = (),
    **kwargs: Any,
) -> GitCommand:
    """Create a :class:`GitCommand`

    ``kwargs`` are passed on to the constructor (``cwd``, ``git``,
    ``git_dir``).
    """
    return GitCommand(args, **kwargs)


async def _strip_trailing_newlines(pending: Coroutine[Any, Any, str]) -> str:
    return (await pending).rstrip('\n')
