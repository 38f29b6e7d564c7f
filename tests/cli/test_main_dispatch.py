"""
Tests for CLI argument parsing and dispatch.

Handlers are patched on the `commands` facade, so only wiring is verified.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from skidc.cli.__main__ import main


@patch("skidc.cli.commands.handle_build", return_value=0)
def test_build_defaults(mock_handle):
  assert main(["build", "prog.skid"]) == 0
  mock_handle.assert_called_once_with(Path("prog.skid"), None, None, None)


@patch("skidc.cli.commands.handle_build", return_value=1)
def test_build_flags_and_exit_code(mock_handle):
  assert main(["build", "prog.skid", "--strict", "--keep-go", "--go", "go1.22"]) == 1
  mock_handle.assert_called_once_with(Path("prog.skid"), True, True, "go1.22")


@patch("skidc.cli.commands.handle_emit", return_value=0)
def test_emit_with_out(mock_handle):
  main(["emit", "prog.skid", "--out", "build/prog.go"])
  mock_handle.assert_called_once_with(Path("prog.skid"), Path("build/prog.go"), None)


@patch("skidc.cli.commands.handle_tokens", return_value=0)
def test_tokens(mock_handle):
  main(["tokens", "prog.skid"])
  mock_handle.assert_called_once_with(Path("prog.skid"))


def test_missing_command_exits():
  with pytest.raises(SystemExit):
    main([])


def test_version(capsys):
  with pytest.raises(SystemExit) as exc:
    main(["--version"])
  assert exc.value.code == 0
  assert "0.1.0" in capsys.readouterr().out
