"""Fixture setup"""

__all__ = [
    'fixturerepo',
    'gitrepo',
    'verify_pristine_environment',
]


from gitcall.tests.fixtures import (
    # session-scope repository with a README.md commit and a v0.0.1 tag
    fixturerepo,
    # function-scope temporary Git repo
    gitrepo,
    # verify no test leaves a modified process environment behind
    verify_pristine_environment,
)
