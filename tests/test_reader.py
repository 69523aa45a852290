import io
import logging

import pytest

from inipp import IniReader, IniSyntaxError, load, loads

TEXT = 'title = Grüße\n[S]\nk = v\n'


def test_read_utf8(tmp_path):
    path = tmp_path / 'a.ini'
    path.write_text(TEXT, encoding='utf-8')
    ini = IniReader(str(path), encoding='utf-8').read()
    assert ini.get('title') == 'Grüße'
    assert ini.get('k', section='S') == 'v'


def test_read_falls_back_to_chardet(tmp_path, caplog):
    path = tmp_path / 'b.ini'
    path.write_bytes(TEXT.encode('utf-16'))
    with caplog.at_level(logging.WARNING, logger='inipp.reader'):
        ini = IniReader(str(path), encoding='utf-8').read()
    assert ini.get('title') == 'Grüße'
    assert any('not readable as utf-8' in r.getMessage()
               for r in caplog.records)


def test_read_syntax_error(tmp_path):
    path = tmp_path / 'c.ini'
    path.write_text('[S\n', encoding='utf-8')
    with pytest.raises(IniSyntaxError):
        IniReader(str(path), encoding='utf-8').read()


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        IniReader(str(tmp_path / 'nope.ini')).read()


def test_reader_str():
    reader = IniReader('x.ini', 'utf-8')
    assert reader.filename == 'x.ini'
    assert reader.encoding == 'utf-8'
    assert 'x.ini' in str(reader)


def test_load_and_loads():
    assert load(io.StringIO(TEXT)).to_dict() == loads(TEXT).to_dict()


@pytest.mark.parametrize('text', [
    'a=1\rb=2\n',
    '[S]\r\nk = v\r\n',
    '[S]\rk = v\r[T]\n',
])
def test_file_and_string_split_lines_alike(tmp_path, text):
    path = tmp_path / 'cr.ini'
    path.write_bytes(text.encode('utf-8'))
    from_file = IniReader(str(path), encoding='utf-8').read()
    assert from_file.to_dict() == loads(text).to_dict()


def test_bare_carriage_return_does_not_end_line(tmp_path):
    path = tmp_path / 'cr.ini'
    path.write_bytes(b'a=1\rb=2\n')
    ini = IniReader(str(path), encoding='utf-8').read()
    assert ini.header.to_dict() == {'a': '1\rb=2'}
