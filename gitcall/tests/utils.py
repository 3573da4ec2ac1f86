from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import (
        Path,
        PurePath,
    )

from gitcall.runners import call_git

test_identity = [
    '-c',
    'user.name=gitcall Tester',
    '-c',
    'user.email=test@example.com',
]


def call_git_addcommit(
    cwd: Path,
    paths: list[str | PurePath] | None = None,
    *,
    msg: str | None = None,
):
    if paths is None:
        paths = ['.']

    if msg is None:
        msg = 'done by call_git_addcommit()'

    call_git(['add'] + [str(p) for p in paths], cwd=cwd, capture_output=True)
    call_git(
        [
            *test_identity,
            'commit',
            '--no-gpg-sign',
            '-m',
            msg,
        ],
        cwd=cwd,
        capture_output=True,
    )


def init_repo_at(path: Path, *, branch: str = 'master') -> Path:
    """Initialize a Git repository at ``path`` with an unborn ``branch``

    The branch name is set explicitly, because the default branch name
    depends on the Git version and the user's configuration.
    """
    call_git(['init'], cwd=path, capture_output=True)
    call_git(
        ['symbolic-ref', 'HEAD', f'refs/heads/{branch}'],
        cwd=path,
        capture_output=True,
    )
    return path


readme_content = """\
# Fixture repository

This file is committed to the fixture repository.
Its content is compared verbatim by tests.
"""


def populate_fixture_repo(path: Path) -> None:
    """Create the commit and tag that the ``fixturerepo`` fixture provides

    ``path`` must be a freshly initialized repository. After this function
    ran, ``master`` has a single commit with a ``README.md`` file, and the
    lightweight tag ``v0.0.1`` points to this commit.
    """
    (path / 'README.md').write_text(readme_content)
    call_git_addcommit(path, ['README.md'], msg='Add README')
    call_git(['tag', 'v0.0.1'], cwd=path, capture_output=True)
