"""
Shared input handling for CLI commands.

Reads a `.skid` file, runs it through the engine and reports diagnostics,
so each command handler only deals with its own output.
"""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.markup import escape

from skidc.compiler.toolchain import SOURCE_SUFFIX
from skidc.config import RuntimeConfig
from skidc.core.conversion_result import ConversionResult
from skidc.core.engine import SkidEngine
from skidc.utils.console import log_error, log_warning


def read_source(path: Path) -> Optional[str]:
  """
  Validates and reads a DSL source file.

  Args:
      path: The file given on the command line.

  Returns:
      The file contents, or None (after logging) if the file is unusable.
  """
  if path.suffix != SOURCE_SUFFIX:
    log_error(f"Input file must have {SOURCE_SUFFIX} extension: [path]{escape(str(path))}[/path]")
    return None

  if not path.is_file():
    log_error(f"Input not found: [path]{escape(str(path))}[/path]")
    return None

  try:
    return path.read_text(encoding="utf-8")
  except OSError as e:
    log_error(f"Error reading file: {escape(str(e))}")
    return None


def load_config(path: Path, **overrides) -> Optional[RuntimeConfig]:
  """
  Resolves runtime settings for a source file.

  Configuration is searched from the file's directory upwards. `overrides`
  are passed to `RuntimeConfig.load`.

  Returns:
      The configuration, or None (after logging) if it is invalid.
  """
  try:
    return RuntimeConfig.load(search_path=path.parent, **overrides)
  except ValidationError as e:
    log_error(f"Invalid skidc configuration in pyproject.toml: {escape(str(e))}")
    return None


def convert_file(path: Path, config: RuntimeConfig) -> Optional[ConversionResult]:
  """
  Reads and transpiles `path`, logging every diagnostic.

  Args:
      path: The `.skid` source.
      config: Resolved runtime settings.

  Returns:
      The result if generation succeeded, otherwise None.
  """
  code = read_source(path)
  if code is None:
    return None

  result = SkidEngine(config=config).run(code)

  for msg in result.warnings:
    log_warning(f"{escape(path.name)}: {escape(msg)}")
  for msg in result.errors:
    log_error(f"{escape(path.name)}: {escape(msg)}")

  if not result.success:
    log_error(f"Transpilation of [path]{escape(str(path))}[/path] failed in strict mode.")
    return None

  return result
