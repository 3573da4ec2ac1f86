"""Assorted common constants"""

__all__ = [
    'DEFAULT_GIT_EXECUTABLE',
    'GIT_DIR_ENVVAR',
    'ARRAY_ENCODING',
    'READ_CHUNK_SIZE',
]

DEFAULT_GIT_EXECUTABLE = 'git'
"""Name of the executable that is run when no override is given"""

GIT_DIR_ENVVAR = 'GIT_DIR'
"""Environment variable pointing Git to an alternative repository location"""

ARRAY_ENCODING = 'utf-8'
"""Text encoding of captured output in array mode"""

READ_CHUNK_SIZE = 64 * 1024
"""Maximum number of bytes read from a child's output pipe in one go"""
