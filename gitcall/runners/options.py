from __future__ import annotations

from dataclasses import (
    dataclass,
    fields,
)
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from os import PathLike

from gitcall.consts import DEFAULT_GIT_EXECUTABLE


@dataclass(frozen=True)
class GitOptions:
    """Options of a command that apply to any of its executions"""

    cwd: str | PathLike | None = None
    """Working directory of the process, the current directory if ``None``"""
    git: str | None = None
    """Name or path of the executable to run instead of ``git``"""
    git_dir: str | PathLike | None = None
    """Value for ``GIT_DIR`` in the environment of the process"""

    @property
    def executable(self) -> str:
        return self.git or DEFAULT_GIT_EXECUTABLE


@dataclass(frozen=True)
class RunOptions:
    """Options of a single terminal call"""

    prefix: str = ''
    """String put in front of every line of forwarded output"""
    silence_errors: bool = False
    """If ``True``, the stderr of the process is discarded"""
    encoding: str | None = None
    """Encoding for decoding captured output, raw ``bytes`` if ``None``"""

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> RunOptions:
        """Create an instance from the keyword arguments of a terminal call

        Unlike the plain constructor, this reports unsupported options by
        name, and maps a ``None`` prefix to the empty default.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            msg = f'unsupported option(s): {", ".join(unknown)}'
            raise TypeError(msg)
        if kwargs.get('prefix') is None:
            kwargs.pop('prefix', None)
        return cls(**kwargs)
