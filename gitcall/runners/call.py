"""Blocking wrappers around :class:`~gitcall.runners.GitCommand`

Each function runs a single command to completion in a fresh event loop
via ``asyncio.run()``. Consequently, none of them can be called from
code that is already running in an event loop. Such code must await the
terminal methods of ``GitCommand`` directly.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from os import PathLike

from gitcall.runners.command import GitCommand

lgr = logging.getLogger('gitcall.runners')


def call_git(
    args: list[str],
    *,
    cwd: str | PathLike | None = None,
    git_dir: str | PathLike | None = None,
    capture_output: bool = False,
    prefix: str = '',
) -> None:
    """Call Git, raises ``GitError`` on non-zero exit.

    ``args`` is a list of arguments for the Git command. This list must not
    contain the Git executable itself. It will be prepended (unconditionally)
    to the arguments before passing them on.

    By default, process output is forwarded to the stdout/stderr of the
    calling process, with ``prefix`` in front of each line. If
    ``capture_output`` is ``True``, stdout is captured and discarded, and
    stderr is not shown.
    """
    cmd = GitCommand(args, cwd=cwd, git_dir=git_dir)
    if capture_output:
        asyncio.run(cmd.capture(silence_errors=True))
    else:
        asyncio.run(cmd.pass_(prefix=prefix))


def call_git_success(
    args: list[str],
    *,
    cwd: str | PathLike | None = None,
    git_dir: str | PathLike | None = None,
) -> bool:
    """Call Git and report success or failure of the command

    No output is shown, and no ``GitError`` is raised. Errors on starting
    the process (e.g., a ``cwd`` that does not exist) are still raised.
    """
    return asyncio.run(GitCommand(args, cwd=cwd, git_dir=git_dir).ok())


def call_git_oneline(
    args: list[str],
    *,
    cwd: str | PathLike | None = None,
    git_dir: str | PathLike | None = None,
    silence_errors: bool = False,
) -> str:
    """Call Git for a single line of output

    The decoded output is returned with any trailing newlines removed.

    Raises
    ------
    GitError if the call exits with a non-zero status.
    """
    return asyncio.run(
        GitCommand(args, cwd=cwd, git_dir=git_dir).oneline(
            silence_errors=silence_errors,
        )
    )


def call_git_lines(
    args: list[str],
    *,
    cwd: str | PathLike | None = None,
    git_dir: str | PathLike | None = None,
    silence_errors: bool = False,
) -> list[str]:
    """Call Git for any (small) number of lines of output

    Raises
    ------
    GitError if the call exits with a non-zero status.
    """
    return asyncio.run(
        GitCommand(args, cwd=cwd, git_dir=git_dir).array(
            silence_errors=silence_errors,
        )
    )
