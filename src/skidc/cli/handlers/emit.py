"""
Emit and Tokens Command Handlers.

`skidc emit` writes the generated Go source to a file (or stdout) without
invoking the toolchain. `skidc tokens` shows how the lexer split each line.
"""

from pathlib import Path
from typing import Optional

from rich.markup import escape
from rich.table import Table

from skidc.cli.handlers.source import convert_file, load_config, read_source
from skidc.compiler.tokens import SkidLexer
from skidc.utils.console import console, log_error, log_success


def handle_emit(input_path: Path, output_path: Optional[Path], strict: Optional[bool] = None) -> int:
  """
  Handles the 'emit' command execution.

  Args:
      input_path: The `.skid` source file.
      output_path: Destination for the Go file. Prints to stdout when None.
      strict: Overrides strict mode from configuration.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  config = load_config(input_path, strict_mode=strict)
  if config is None:
    return 1
  result = convert_file(input_path, config)
  if result is None:
    return 1

  if output_path is None:
    print(result.code, end="")
    return 0

  try:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.code, encoding="utf-8")
  except OSError as e:
    log_error(f"Failed to write {escape(str(output_path))}: {escape(str(e))}")
    return 1

  log_success(f"Transpiled: [path]{escape(str(input_path))}[/path] -> [path]{escape(str(output_path))}[/path]")
  return 0


def handle_tokens(input_path: Path) -> int:
  """
  Handles the 'tokens' command: renders the token stream as a table.

  Args:
      input_path: The `.skid` source file.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  code = read_source(input_path)
  if code is None:
    return 1

  table = Table(title=f"Tokens: {input_path.name}")
  table.add_column("Line", justify="right", style="dim")
  table.add_column("Command", style="cyan")
  table.add_column("Args")

  for token in SkidLexer().tokenize(code):
    table.add_row(str(token.line), escape(token.command), escape(" | ".join(token.args)))

  console.print(table)
  return 0
