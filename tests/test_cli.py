"""End-to-end CLI tests executed directly via :func:`kmpscan.cli.main`."""

import io as stdio
import json
import logging
import os
import sys
from pathlib import Path

import pytest

from kmpscan import cli


@pytest.fixture(autouse=True)
def _restore_package_logger():
    package_logger = logging.getLogger("kmpscan")
    handlers, level = package_logger.handlers[:], package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


def _write(path: Path, data: bytes) -> Path:
    path.write_bytes(data)
    return path


def _stdin(monkeypatch: pytest.MonkeyPatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", stdio.TextIOWrapper(stdio.BytesIO(data)))


def test_cli_found_from_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _stdin(monkeypatch, b"the quick brown fox\n")
    assert cli.main(["brown"]) == cli.EXIT_FOUND
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert out[0].startswith("KMP: ")
    assert out[0].endswith(" us")


def test_cli_verbose_not_found(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    text = _write(tmp_path / "text.txt", b"aaaa\n")
    assert cli.main(["--verbose", "--input", str(text), "xyz"]) == cli.EXIT_NOT_FOUND
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Search: pattern = 'xyz', text length = 4"
    assert out[1].startswith("KMP: ")
    assert out[2] == "Output: not found"


def test_cli_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    text = _write(tmp_path / "text.txt", b"aabaabaaba\n")
    assert cli.main(["--format", "json", "--input", str(text), "aaba"]) == cli.EXIT_FOUND
    payload = json.loads(capsys.readouterr().out)
    assert payload["found"] is True
    assert payload["offset"] == 0
    assert payload["text_length"] == 10
    assert payload["pattern"] == "aaba"


def test_cli_max_length_truncates(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    text = _write(tmp_path / "text.txt", b"abcdefneedle\n")
    assert cli.main(["--max-length", "6", "--input", str(text), "needle"]) == cli.EXIT_NOT_FOUND
    assert "truncated" in capsys.readouterr().err


def test_cli_writes_to_out_file(tmp_path: Path) -> None:
    text = _write(tmp_path / "text.txt", b"xxab\n")
    out = tmp_path / "report.txt"
    assert cli.main(["--verbose", "--input", str(text), "--out", str(out), "ab"]) == cli.EXIT_FOUND
    assert out.read_text().splitlines()[-1] == "Output: found at offset 2"


def test_cli_empty_pattern(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([""]) == cli.EXIT_INVALID
    assert capsys.readouterr().err.startswith("Error: pattern must not be empty")


def test_cli_usage_errors(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["a", "b"])
    assert excinfo.value.code == 2
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--max-length", "0", "a"])
    assert excinfo.value.code == 2
    assert "usage: kmpscan" in capsys.readouterr().err


def test_cli_invalid_encoding(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--encoding", "ascii", "€"]) == cli.EXIT_INVALID
    assert capsys.readouterr().err.startswith("Error: ")


def test_cli_raw_byte_pattern(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    text = _write(tmp_path / "text.txt", b"ab\xffcd\n")
    pattern = os.fsdecode(b"\xffc")
    assert cli.main(["--verbose", "--input", str(text), pattern]) == cli.EXIT_FOUND
    assert capsys.readouterr().out.splitlines()[-1] == "Output: found at offset 2"


def test_cli_explicit_encoding(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    text = _write(tmp_path / "text.txt", "xa".encode("utf-16-le") + b"\n")
    args = ["--encoding", "utf-16-le", "--format", "json", "--input", str(text), "a"]
    assert cli.main(args) == cli.EXIT_FOUND
    assert json.loads(capsys.readouterr().out)["offset"] == 2


@pytest.mark.parametrize("encoding", ["utf-16", "utf-32", "utf-8-sig", "no-such-codec", "rot13"])
def test_cli_rejects_unusable_encodings(encoding: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--encoding", encoding, "a"])
    assert excinfo.value.code == 2
    assert "--encoding" in capsys.readouterr().err


def test_cli_leaves_root_logger_alone(tmp_path: Path) -> None:
    text = _write(tmp_path / "text.txt", b"abc\n")
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    cli.main(["--log-level", "DEBUG", "--input", str(text), "b"])
    assert root.handlers == handlers
    assert root.level == level
    assert logging.getLogger("kmpscan").handlers
