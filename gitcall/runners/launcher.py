from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from os import PathLike

from gitcall.consts import GIT_DIR_ENVVAR

lgr = logging.getLogger('gitcall.runners')


def derive_env(
    git_dir: str | PathLike | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str] | None:
    """Return the environment for a Git process

    Without a ``git_dir`` override (``None`` or an empty value) ``None`` is
    returned, which lets the process inherit the environment of the parent
    process unchanged.

    With an override, a new mapping is returned. It is a copy of
    ``environ`` (default: ``os.environ``) with ``GIT_DIR`` set to
    ``git_dir``. ``environ`` itself is never modified, so the same
    source environment can be reused for any number of invocations
    with different overrides.
    """
    if not git_dir:
        return None
    return dict(
        os.environ if environ is None else environ,
        **{GIT_DIR_ENVVAR: os.fspath(git_dir)},
    )


async def spawn(
    cmd: list[str],
    *,
    cwd: str | PathLike | None = None,
    env: Mapping[str, str] | None = None,
    stdout: int,
    stderr: int,
) -> asyncio.subprocess.Process:
    """Start ``cmd`` as a child process without any input

    ``stdout`` and ``stderr`` are ``asyncio.subprocess.PIPE`` or
    ``asyncio.subprocess.DEVNULL``. Stdin is always connected to
    ``DEVNULL``.

    Any ``OSError`` on process creation (e.g., executable not found,
    missing working directory) is raised unmodified.
    """
    lgr.debug('Spawning %r in %s', cmd, cwd or os.getcwd())
    return await asyncio.create_subprocess_exec(
        *cmd,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=stdout,
        stderr=stderr,
        cwd=cwd,
        env=env,
    )
