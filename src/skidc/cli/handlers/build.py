"""
Build Command Handler.

Implements `skidc build`: transpile a `.skid` file and hand the generated
Go source to the toolchain, producing a binary next to the input.
"""

from pathlib import Path
from typing import Optional

from rich.markup import escape

from skidc.cli.handlers.source import convert_file, load_config
from skidc.compiler.toolchain import BuildError, GoToolchain
from skidc.utils.console import log_error, log_info, log_success


def handle_build(
  input_path: Path,
  strict: Optional[bool] = None,
  keep_go: Optional[bool] = None,
  go_binary: Optional[str] = None,
) -> int:
  """
  Handles the 'build' command execution.

  Args:
      input_path: The `.skid` source file.
      strict: Overrides strict mode from configuration.
      keep_go: Keep the intermediate `.go` file.
      go_binary: Overrides the Go executable.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  config = load_config(input_path, strict_mode=strict, keep_intermediate=keep_go, go_binary=go_binary)
  if config is None:
    return 1

  result = convert_file(input_path, config)
  if result is None:
    return 1

  log_info(f"Building [path]{escape(str(input_path))}[/path] ({result.token_count} commands)...")
  try:
    binary = GoToolchain(config).build(input_path, result.code)
  except BuildError as e:
    log_error(f"Error: {escape(str(e))}")
    return 1

  log_success(f"Built successfully: [path]{escape(str(binary))}[/path]")
  return 0
