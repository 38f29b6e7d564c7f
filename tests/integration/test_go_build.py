"""
End-to-end tests against a real Go toolchain.

Skipped when `go` is not on PATH.
"""

import shutil
import subprocess

import pytest

from skidc.cli.__main__ import main
from skidc.compiler.toolchain import binary_name

pytestmark = pytest.mark.skipif(shutil.which("go") is None, reason="Go toolchain not installed")


def _build_and_run(skid_file, text: str) -> str:
  path = skid_file(text)
  assert main(["build", str(path)]) == 0
  binary = binary_name(path)
  assert binary.exists()
  assert not path.with_suffix(".go").exists()
  proc = subprocess.run([str(binary)], capture_output=True, text=True, check=True)
  return proc.stdout


def test_round_trip_prints_value(skid_file):
  assert _build_and_run(skid_file, "let x int 5\nprint x\n") == "5\n"


def test_function_call(skid_file):
  src = "func add a int b int -> int\nreturn a + b\nendfunc\nprint add(2, 3)\n"
  assert _build_and_run(skid_file, src) == "5\n"


def test_recover_guarded_scope(skid_file):
  src = 'try\ncall panic "boom"\ncatch e\nprint "recovered:", e\nendtry\nprint "after"\n'
  assert _build_and_run(skid_file, src) == "recovered: boom\nafter\n"


def test_struct_and_loop(skid_file):
  src = """
struct Counter
field N int
endstruct
let c Counter{}
for i := 0; i < 4; i++
set c.N c.N + i
end
printf "%d\\n" c.N
"""
  assert _build_and_run(skid_file, src) == "6\n"
