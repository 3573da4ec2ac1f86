"""Execution of Git subprocesses

The main work horse is :class:`~gitcall.runners.GitCommand`, a builder for a
Git command line that is executed by one of its terminal methods. These
coroutines differ in how the output of the process is handled:

- ``ok()``: output is discarded, the result is ``True``/``False``
- ``pass_()``: output is forwarded (line-prefixed) to stdout/stderr
- ``capture()``: stdout is collected (and optionally transformed)
- ``oneline()``: like ``capture()``, minus trailing newlines
- ``array()``: like ``capture()``, but collected into a list of items

Non-zero exits are communicated with the :class:`~gitcall.runners.GitError`
exception (except for ``ok()``), a subclass of ``datasalad``'s
``CommandError``. In addition, a few blocking convenience functions are
provided for code that does not run an event loop.

.. currentmodule:: gitcall.runners
.. autosummary::
   :toctree: generated

   GitCommand
   GitError
   CommandError
   git
   call_git
   call_git_lines
   call_git_oneline
   call_git_success
"""

__all__ = [
    'CommandError',
    'GitCommand',
    'GitError',
    'git',
    'call_git',
    'call_git_lines',
    'call_git_oneline',
    'call_git_success',
]


from datasalad.runners import CommandError

from .command import (
    GitCommand,
    git,
)
from .errors import GitError
from .call import (
    call_git,
    call_git_lines,
    call_git_oneline,
    call_git_success,
)
