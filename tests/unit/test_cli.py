"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from mpcodec import __version__
from mpcodec.cli.main import main
from mpcodec.cli.selftest import SELFTEST_CASES, same


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "mpcodec.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "mpcodec: MessagePack-compatible binary codec" in result.stdout
    assert "--roundtrip" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "mpcodec.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert f"mpcodec {__version__}" in result.stdout


def test_cli_selftest_subprocess() -> None:
    """Test the self test passes end to end."""
    result = subprocess.run(
        [sys.executable, "-m", "mpcodec.cli.main", "--selftest"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "FAIL" not in result.stdout
    assert f"{len(SELFTEST_CASES)}/{len(SELFTEST_CASES)} cases passed." in result.stdout


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no arguments (should show help)."""
    assert main([]) == 0
    assert "mpcodec: MessagePack-compatible binary codec" in capsys.readouterr().out


def test_cli_encode(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --encode prints hex."""
    assert main(["--encode", '{"a": 1}']) == 0
    assert capsys.readouterr().out.strip() == "81 a1 61 01"


def test_cli_decode(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --decode prints a structural dump."""
    assert main(["--decode", "93 01 02 03"]) == 0
    assert capsys.readouterr().out.splitlines() == ["array(3)", "  int 1", "  int 2", "  int 3"]


def test_cli_roundtrip(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --roundtrip reports PASS."""
    assert main(["--roundtrip", "[1, -129, 1.5, \"x\"]"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "94 01 d1 ff 7f cb 3f f8 00 00 00 00 00 00 a1 78"
    assert out.rstrip().endswith("PASS")


def test_cli_decode_errors(capsys: pytest.CaptureFixture[str]) -> None:
    """Test codec errors go to stderr with exit code 1."""
    assert main(["--decode", "c1"]) == 1
    assert "0xC1" in capsys.readouterr().err

    assert main(["--decode", "d1 80"]) == 1
    assert "Truncated" in capsys.readouterr().err

    assert main(["--decode", "a1 ff", "--require-utf8"]) == 1
    assert "UTF-8" in capsys.readouterr().err

    assert main(["--decode", "91" * 600 + "c0"]) == 1
    assert "exceeds max_depth=256" in capsys.readouterr().err


def test_cli_bad_input(capsys: pytest.CaptureFixture[str]) -> None:
    """Test malformed hex and JSON."""
    assert main(["--decode", "zz"]) == 1
    assert "Error" in capsys.readouterr().err

    assert main(["--encode", "{not json"]) == 1
    assert "Error" in capsys.readouterr().err


def test_cli_out_of_range(capsys: pytest.CaptureFixture[str]) -> None:
    """Test encode errors."""
    assert main(["--encode", str(1 << 64)]) == 1
    assert "outside the representable range" in capsys.readouterr().err


def test_cli_force_bin(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --bin-type/--force-bin reach the encoder."""
    assert main(["--encode", '"ab"', "--bin-type", "--force-bin"]) == 0
    assert capsys.readouterr().out.strip() == "c4 02 61 62"


def test_same_is_strict() -> None:
    """Test the self test comparison distinguishes types."""
    assert same([1, {"a": 2.0}], [1, {"a": 2.0}])
    assert not same(1, True)
    assert not same(1, 1.0)
    assert not same({"a": 1, "b": 2}, {"b": 2, "a": 1})
    assert same(float("nan"), float("nan"))
