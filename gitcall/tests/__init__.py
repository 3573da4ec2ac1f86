__all__ = [
    'call_git_addcommit',
    'init_repo_at',
    'populate_fixture_repo',
    'readme_content',
]

from .utils import (
    call_git_addcommit,
    init_repo_at,
    populate_fixture_repo,
    readme_content,
)
