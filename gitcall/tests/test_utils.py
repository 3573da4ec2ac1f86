from gitcall.runners import (
    call_git_lines,
    call_git_oneline,
)
from gitcall.tests.utils import (
    populate_fixture_repo,
    readme_content,
)


def test_populate_fixture_repo(gitrepo):
    populate_fixture_repo(gitrepo)
    assert call_git_lines(['tag'], cwd=gitrepo) == ['v0.0.1']
    assert call_git_lines(['ls-files'], cwd=gitrepo) == ['README.md']
    assert call_git_oneline(['symbolic-ref', 'HEAD'], cwd=gitrepo) == (
        'refs/heads/master'
    )
    assert (gitrepo / 'README.md').read_text() == readme_content
