from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

import utf8util
from utf8util.cli import main


def test_cli_checks_file(tmp_path: Path):
    f = tmp_path / "test.txt"
    f.write_bytes("Héllo wörld".encode())
    result = subprocess.run(
        [sys.executable, "-m", "utf8util.cli", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == f"{f}: well-formed"


def test_cli_malformed_file_exit_status(tmp_path: Path):
    f = tmp_path / "test.txt"
    f.write_bytes("Héllo".encode("latin-1"))
    result = subprocess.run(
        [sys.executable, "-m", "utf8util.cli", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 1
    assert result.stdout.strip() == f"{f}: malformed"


def test_cli_stdin():
    result = subprocess.run(
        [sys.executable, "-m", "utf8util.cli"],
        input="Grüße 🌍".encode(),
        capture_output=True,
    )
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "stdin: well-formed"


def test_cli_stdin_length():
    result = subprocess.run(
        [sys.executable, "-m", "utf8util.cli", "--length", "--minimal"],
        input="héllo 🌍".encode(),
        capture_output=True,
    )
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "11"


def test_cli_version():
    result = subprocess.run(
        [sys.executable, "-m", "utf8util.cli", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert utf8util.__version__ in result.stdout


def test_cli_verbose_logs_reason(tmp_path: Path):
    f = tmp_path / "test.txt"
    f.write_bytes(b"abc\xed\xa0\x80")
    result = subprocess.run(
        [sys.executable, "-m", "utf8util.cli", "-v", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 1
    assert "malformed UTF-8 at byte 3: encoded surrogate code point" in result.stderr


def test_cli_minimal_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes(b"Hello world")
    main(["--minimal", str(f)])
    captured = capsys.readouterr()
    assert captured.out.strip() == "well-formed"


def test_cli_multiple_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f1 = tmp_path / "a.txt"
    f2 = tmp_path / "b.txt"
    f1.write_bytes(b"Hello")
    f2.write_bytes(b"\xc0\x80")
    with pytest.raises(SystemExit) as exc_info:
        main([str(f1), str(f2)])
    assert exc_info.value.code == 1
    lines = capsys.readouterr().out.strip().split("\n")
    assert lines == [f"{f1}: well-formed", f"{f2}: malformed"]


def test_cli_nonexistent_file(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit, match="1"):
        main(["nonexistent_file_xyz.txt"])
    captured = capsys.readouterr()
    assert "utf8check: nonexistent_file_xyz.txt:" in captured.err


def test_cli_length(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes("héllo 🌍".encode())
    main(["--length", str(f)])
    captured = capsys.readouterr()
    assert captured.out.strip() == f"{f}: 11 bytes"


def test_cli_length_unpaired_surrogate(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
):
    f = tmp_path / "test.txt"
    f.write_bytes(b"ab\xed\xa0\x80")
    with pytest.raises(SystemExit, match="1"):
        main(["--length", str(f)])
    captured = capsys.readouterr()
    assert "Unpaired surrogate at index 2" in captured.err


def test_cli_length_undecodable(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes(b"\xff")
    with pytest.raises(SystemExit, match="1"):
        main(["--length", str(f)])
    captured = capsys.readouterr()
    assert "utf8check:" in captured.err
