"""Run Git commands from async Python code

.. currentmodule:: gitcall
.. autosummary::
   :toctree: generated

   consts
   runners
"""

__all__ = [
    '__version__',
    'GitCommand',
    'GitError',
    'git',
]

from importlib.metadata import (
    PackageNotFoundError,
    version,
)

try:
    __version__ = version('gitcall')
except PackageNotFoundError:  # pragma: no cover
    __version__ = '0.0.0'

from gitcall.runners import (
    GitCommand,
    GitError,
    git,
)
