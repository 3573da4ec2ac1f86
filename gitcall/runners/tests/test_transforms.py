import pytest

from ..transforms import (
    decode,
    lines,
    replace,
)


def test_replace_bytes():
    stage = replace(b'master', b'branch')
    assert b''.join(stage([b'refs/heads/master\n'])) == b'refs/heads/branch\n'
    # matches across chunk boundaries
    assert b''.join(stage([b'refs/heads/mas', b'ter\n'])) == b'refs/heads/branch\n'
    assert b''.join(stage([b'm', b'a', b's', b't', b'e', b'r'])) == b'branch'
    # multiple matches, and partial matches that never complete
    assert (
        b''.join(stage([b'master mast', b'er maste', b'x master']))
        == b'branch branch mastex branch'
    )
    assert list(stage([])) == []
    # the stage can be reused
    assert b''.join(stage([b'master'])) == b'branch'


def test_replace_str():
    stage = replace('a', 'bb')
    assert ''.join(stage(['banana', 'a'])) == 'bbbnbbnbbbb'
    # no holding back of any output for single-character patterns
    assert list(stage(['xyz', 'a'])) == ['xyz', 'bb']


def test_replace_empty():
    with pytest.raises(ValueError, match='empty'):
        replace(b'', b'x')


def test_lines():
    assert list(lines()([b'a\nb', b'\nc'])) == [b'a', b'b', b'c']
    assert list(lines(keep_ends=True)([b'a\nb', b'\nc'])) == [b'a\n', b'b\n', b'c']
    assert list(lines()(['v0.0.1\n'])) == ['v0.0.1']


def test_decode():
    data = 'Grüße'.encode()
    assert ''.join(decode()([data[:3], data[3:]])) == 'Grüße'
    assert ''.join(decode('latin-1')([b'\xe4'])) == 'ä'
