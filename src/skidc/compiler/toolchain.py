"""
Go Toolchain Driver.

Turns generated Go source into a native binary:

1. Writes the source next to the `.skid` input as an intermediate `.go` file.
2. Runs `go build -o <binary> <file.go>`; the toolchain writes to the inherited
   stdout and stderr.
3. Removes the intermediate file (unless configured to keep it).

The generator never touches the filesystem; everything with side effects
lives here.
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from skidc.config import RuntimeConfig

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".skid"


class BuildError(Exception):
  """Raised when writing, building or cleaning up generated code fails."""

  pass


def strip_source_suffix(source: Path) -> Path:
  """Removes a trailing `.skid` suffix, leaving other suffixes alone."""
  if source.suffix == SOURCE_SUFFIX:
    return source.with_suffix("")
  return source


def binary_name(source: Path, platform: Optional[str] = None) -> Path:
  """
  Resolves the executable path for a `.skid` source.

  Args:
      source: The DSL source file.
      platform: Platform string in `sys.platform` form. Defaults to the host.

  Returns:
      Path: `prog` for `prog.skid`, or `prog.exe` on Windows.
  """
  base = strip_source_suffix(source)
  if (platform or sys.platform).startswith("win"):
    return base.with_name(base.name + ".exe")
  return base


def intermediate_path(source: Path) -> Path:
  """Path of the generated `.go` file for `source`."""
  base = strip_source_suffix(source)
  return base.with_name(base.name + ".go")


class GoToolchain:
  """
  Thin wrapper around the `go build` command.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None) -> None:
    """
    Args:
        config: Runtime settings (executable, flags, intermediate handling).
    """
    self.config = config or RuntimeConfig()

  def build_command(self, go_file: Path, output: Path) -> List[str]:
    """Assembles the argv for `go build`."""
    return [self.config.go_binary, "build", *self.config.build_flags, "-o", str(output), str(go_file)]

  def build(self, source: Path, code: str) -> Path:
    """
    Builds `code` into an executable named after `source`.

    Args:
        source: The `.skid` file the code was generated from.
        code: Generated Go source.

    Returns:
        Path: The built binary.

    Raises:
        BuildError: If any step fails.
    """
    go_file = intermediate_path(source)
    output = binary_name(source)

    try:
      go_file.write_text(code, encoding="utf-8")
    except OSError as e:
      raise BuildError(f"error writing intermediate Go file: {e}") from e

    cmd = self.build_command(go_file, output)
    logger.debug("Running %s", " ".join(cmd))
    try:
      subprocess.run(cmd, check=True)
    except FileNotFoundError as e:
      raise BuildError(f"error building binary: toolchain '{self.config.go_binary}' not found") from e
    except subprocess.CalledProcessError as e:
      raise BuildError(f"error building binary: {e}") from e

    if not self.config.keep_intermediate:
      try:
        go_file.unlink()
      except OSError as e:
        raise BuildError(f"error removing intermediate Go file: {e}") from e

    return output
