from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from os import PathLike

from datasalad.runners import CommandError


class GitError(CommandError):
    """Raised when a Git process exits with a non-zero status

    The exception derives from ``datasalad``'s ``CommandError``, hence any
    code handling that generic exception also handles this one. In addition
    to the standard ``cmd``, ``msg``, ``returncode`` and ``cwd`` attributes,
    it exposes:

    - ``code``: the constant ``'GITERROR'``, to identify the error kind
      without an ``isinstance()`` check
    - ``exit_code``: the numeric exit code of the process
    - ``signal``: the number of the signal that terminated the process,
      or ``None`` when the process exited regularly

    ``str()`` of an instance is the message, verbatim. It includes any
    line prefix that was configured for the failed call.
    """

    code = 'GITERROR'

    def __init__(
        self,
        msg: str,
        exit_code: int,
        *,
        cmd: list[str],
        cwd: str | PathLike | None = None,
    ) -> None:
        super().__init__(
            cmd=cmd,
            msg=msg,
            returncode=exit_code,
            cwd=cwd,
        )

    @classmethod
    def from_returncode(
        cls,
        returncode: int,
        *,
        cmd: list[str],
        prefix: str = '',
        cwd: str | PathLike | None = None,
    ) -> GitError:
        """Build an error for a process that reported ``returncode``

        ``asyncio`` reports a process that was killed by a signal with
        a negative returncode (the negated signal number). Such a
        termination gets its own message.
        """
        tool = cmd[0]
        if returncode < 0:
            msg = f'{prefix}{tool} was terminated by signal {-returncode}'
        else:
            msg = f'{prefix}{tool} returned exit code {returncode}'
        return cls(msg, returncode, cmd=cmd, cwd=cwd)

    @property
    def exit_code(self) -> int:
        return self.returncode

    @property
    def signal(self) -> int | None:
        return -self.returncode if self.returncode < 0 else None

    def __str__(self) -> str:
        return self.msg

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.msg!r}, {self.returncode!r})'
