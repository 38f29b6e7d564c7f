"""
Tests for the SkidEngine orchestration and the high-level `transpile` API.

Verifies:
1.  Lenient mode: diagnostics become warnings, conversion succeeds.
2.  Strict mode: diagnostics become errors, conversion fails.
3.  `skidc.transpile` raises ValueError only in strict mode.
"""

import pytest

import skidc
from skidc.config import RuntimeConfig
from skidc.core.engine import SkidEngine

MALFORMED = "let x int\nprint x\n"


def test_clean_run():
  res = SkidEngine().run("let x int 5\nprint x\n")

  assert res.success
  assert not res.has_errors
  assert res.warnings == []
  assert res.token_count == 2
  assert "\tvar x int = 5" in res.code


def test_lenient_mode_collects_warnings():
  res = SkidEngine().run(MALFORMED)

  assert res.success
  assert res.errors == []
  assert res.warnings == ["line 1: 'let': typed declaration of 'x' has no value"]
  assert "var x" not in res.code


def test_strict_mode_fails():
  res = SkidEngine(RuntimeConfig(strict_mode=True)).run(MALFORMED)

  assert not res.success
  assert res.has_errors
  assert res.warnings == []
  assert "typed declaration" in res.errors[0]


def test_strict_mode_clean_input_succeeds():
  res = SkidEngine(RuntimeConfig(strict_mode=True)).run("print 1\n")
  assert res.success


def test_tokenize_only():
  tokens = SkidEngine().tokenize("# c\nprint 1")
  assert [(t.command, t.args, t.line) for t in tokens] == [("print", ["1"], 2)]


def test_transpile_api():
  code = skidc.transpile("let y 5\nprint y")
  assert "\ty := 5" in code
  assert code.startswith("package main")


def test_transpile_lenient_skips_bad_lines():
  code = skidc.transpile("mystery 1\nprint 2")
  assert "mystery" not in code


def test_transpile_strict_raises():
  with pytest.raises(ValueError, match="Transpilation failed"):
    skidc.transpile("mystery 1", strict=True)


def test_transpile_strict_rejects_closer_crossing_try():
  with pytest.raises(ValueError, match="closes 'if' opened on line 1 outside try"):
    skidc.transpile("if x\ntry\nend\nendtry\nend\n", strict=True)
