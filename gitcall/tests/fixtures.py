"""Collection of fixtures for facilitation test implementations"""

from __future__ import annotations

import os
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

import pytest

from gitcall.consts import GIT_DIR_ENVVAR
from gitcall.runners import call_git_lines
from gitcall.tests.utils import (
    init_repo_at,
    populate_fixture_repo,
)


@pytest.fixture(autouse=True, scope='function')  # noqa: PT003
def verify_pristine_environment():
    """No test must leave a modified ``GIT_DIR`` in the process environment.

    A ``GIT_DIR`` override for a single command must never leak into the
    environment of the test process.
    """
    pre = os.environ.get(GIT_DIR_ENVVAR)
    yield
    if pre != os.environ.get(GIT_DIR_ENVVAR):  # pragma: no cover
        msg = f'{GIT_DIR_ENVVAR} modification detected in the process environment'
        raise AssertionError(msg)


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def gitrepo(tmp_path_factory) -> Path:
    """Return the path to an initialized Git repository on branch ``master``"""
    # must use the factory to get a unique path even when a concrete
    # test also uses `tmp_path`
    path = tmp_path_factory.mktemp('gitrepo')
    return init_repo_at(path)


@pytest.fixture(scope='session')
def fixturerepo(tmp_path_factory) -> Generator[Path]:
    """Yield the path to a repository with a commit and a tag

    The repository is on branch ``master``, which has a single commit
    adding a ``README.md`` file. The lightweight tag ``v0.0.1`` points
    to this commit. See ``populate_fixture_repo()``.

    The fixture is session-scope and must not be modified. The fixture
    fails on teardown, if the set of refs changed.
    """
    path = tmp_path_factory.mktemp('fixturerepo')
    init_repo_at(path)
    populate_fixture_repo(path)
    refs = call_git_lines(['show-ref'], cwd=path)

    yield path

    if refs != call_git_lines(['show-ref'], cwd=path):
        msg = 'Unexpected modification of the fixture repository'
        raise AssertionError(msg)
