"""
Tests for the command-line interface.
"""

import runpy
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from hd import engine as engine_module
from hd.cli import main, parse_int_literal


@pytest.fixture
def sample(tmp_path):
    test_file = tmp_path / "sample.bin"
    test_file.write_bytes(bytes(48) + b'tail')
    return test_file


@pytest.mark.parametrize("text, value", [
    ("16", 16),
    ("0x10", 16),
    ("0X1f", 31),
    ("010", 8),
    ("0", 0),
    ("0o17", 15),
    (" 42 ", 42),
])
def test_parse_int_literal(text, value):
    assert parse_int_literal(text) == value


@pytest.mark.parametrize("text", ["", "abc", "0x", "09", "1.5"])
def test_parse_int_literal_rejects(text):
    with pytest.raises(ValueError):
        parse_int_literal(text)


def test_default_dump(sample, capsys):
    assert main([str(sample)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "00000000:  00 00 00 00 00 00 00 00  00 00 00 00 00 00 00 00  ................",
        " * ",
        "00000030:  74 61 69 6c " + " " * 37 + " tail" + " " * 12,
    ]


def test_all_flag_disables_elision(sample, capsys):
    assert main(['-a', str(sample)]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 4


def test_double_space(sample, capsys):
    assert main(['-d', str(sample)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "00000000:  00 00 00 00 00 00 00 00  00 00 00 00 00 00 00 00  ................",
        "",
        " * ",
        "",
        "00000030:  74 61 69 6c " + " " * 37 + " tail" + " " * 12,
        "",
    ]


def test_offset_count_and_width(sample, capsys):
    assert main(['-s', '0x30', '-c', '2', '-w', '4', str(sample)]) == 0
    assert capsys.readouterr().out == "00000030:  74 61        ta  \n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.bin")]) == 2
    err = capsys.readouterr().err
    assert err.startswith("hd: Cannot open")


def test_offset_beyond_end(sample, capsys):
    assert main(['-s', '1000', str(sample)]) == 2
    assert "beyond end" in capsys.readouterr().err


def test_zero_width(sample, capsys):
    assert main(['-w', '0', str(sample)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid width" in captured.err


@pytest.mark.parametrize("argv", [
    [],
    ['a.bin', 'b.bin'],
    ['-w', 'wide', 'a.bin'],
    ['-x', 'a.bin'],
])
def test_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 1
    assert "Usage: hd [-a] [-d]" in capsys.readouterr().err


def test_out_of_memory_exit_code(sample, capsys, monkeypatch):
    def no_memory(row, config, wide_address):
        raise MemoryError

    monkeypatch.setattr(engine_module, "format_row", no_memory)
    assert main([str(sample)]) == 3
    assert capsys.readouterr().err.startswith("hd: Out of memory")


def test_run_as_module(sample, capsys, monkeypatch):
    """Test that python -m hd runs the command line."""
    monkeypatch.setattr(sys, "argv", ["hd", "-c", "2", str(sample)])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("hd", run_name="__main__")
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("00000000:  00 00 ")


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['-V'])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("hd ")


if __name__ == '__main__':
    pytest.main([__file__])
