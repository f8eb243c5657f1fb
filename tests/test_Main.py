import io
import pytest

# The things we're testing
from hum2ly.__main__ import main, makeArgumentParser

# test utilities
from tests.Utilities import *

def writeKernFile(tmp_path, contents: str):
    krnPath = tmp_path / 'test.krn'
    krnPath.write_text(contents, encoding='utf-8')
    return krnPath

def test_makeArgumentParser():
    args = makeArgumentParser().parse_args([])
    CheckString(args.input_file, '-')
    CheckString(args.version, '2.18.2')

    args = makeArgumentParser().parse_args(['-v', '2.24.0', 'song.krn'])
    CheckString(args.input_file, 'song.krn')
    CheckString(args.version, '2.24.0')

def test_main_file(tmp_path, capsys):
    krnPath = writeKernFile(tmp_path, '**kern\n4c\n*-\n')
    assert main([str(krnPath)]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith('\\version "2.18.2"\n')
    assert '  c4\t\t% 4c\n' in captured.out
    CheckString(captured.err, '')

def test_main_version(tmp_path, capsys):
    krnPath = writeKernFile(tmp_path, '**kern\n4c\n*-\n')
    assert main(['--version', '2.24.0', str(krnPath)]) == 0
    assert capsys.readouterr().out.startswith('\\version "2.24.0"\n')

def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('**kern\n4e\n*-\n'))
    assert main(['-']) == 0
    assert '  e4\t\t% 4e\n' in capsys.readouterr().out

def test_main_failure(tmp_path, capsys):
    # still exits with 0, and still prints what it could convert
    krnPath = writeKernFile(tmp_path, '**kern\n4c 4e\n*-\n')
    assert main([str(krnPath)]) == 0
    captured = capsys.readouterr()
    assert f'Error converting file: {krnPath}' in captured.err
    assert captured.out.startswith('% Error: Cannot convert chords yet: 4c 4e\n')
    assert '\\score {\n' in captured.out

def test_main_failureStdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('**kern\n4c 4e\n*-\n'))
    assert main([]) == 0
    assert 'Error converting file: <STDIN>' in capsys.readouterr().err

def test_main_missingFile(tmp_path, capsys):
    krnPath = tmp_path / 'missing.krn'
    assert main([str(krnPath)]) == 0
    captured = capsys.readouterr()
    assert f'Error converting file: {krnPath}' in captured.err
    CheckString(captured.out, '')
