import pytest

from inipp.normalize import normalize, strip_comment, trim


@pytest.mark.parametrize('line, expected', [
    ('', ''),
    ('  key = val \t\r\n', 'key = val'),
    ('\f\vx\v\f', 'x'),
    ('   ', ''),
    # only the ASCII set is trimmed
    ('\u00a0x\u00a0', '\u00a0x\u00a0'),
])
def test_trim(line, expected):
    assert trim(line) == expected
    assert trim(trim(line)) == trim(line)


@pytest.mark.parametrize('line, expected', [
    ('', ''),
    ('a = 1', 'a = 1'),
    ('a = 1 # comment', 'a = 1 '),
    ('a = 1 ; comment', 'a = 1 '),
    ('a = 1 ; x # y', 'a = 1 '),
    ('a = 1 # x ; y', 'a = 1 '),
    ('# whole line', ''),
    ('a = "#not quoted"', 'a = "'),
])
def test_strip_comment(line, expected):
    assert strip_comment(line) == expected
    assert strip_comment(strip_comment(line)) == strip_comment(line)


@pytest.mark.parametrize('line', [
    'a = 1 ; x # y', 'a = 1 # x ; y', 'a;b#c', 'a#b;c', 'plain',
])
def test_strip_comment_matches_two_passes(line):
    assert strip_comment(line) == strip_comment(strip_comment(line, '#'), ';')


def test_normalize():
    assert normalize('  [sect]   ; note\n') == '[sect]'
    assert normalize('\tkey = val # note  ') == 'key = val'
    assert normalize('   ;only comment') == ''
