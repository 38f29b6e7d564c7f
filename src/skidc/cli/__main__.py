"""
Main Entry Point for the skidc CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `skidc.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from skidc.cli import commands
from skidc.utils.console import set_verbose
from skidc import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="skidc: Skid to Go transpiler")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: BUILD ---
  cmd_build = subparsers.add_parser("build", help="Transpile a .skid file and build a native binary")
  cmd_build.add_argument("path", type=Path, help="Input .skid source file")
  cmd_build.add_argument(
    "--strict",
    action="store_true",
    default=None,
    help="Fail on malformed commands instead of skipping them (Overrides config)",
  )
  cmd_build.add_argument(
    "--keep-go",
    action="store_true",
    default=None,
    help="Keep the intermediate .go file",
  )
  cmd_build.add_argument("--go", dest="go_binary", default=None, help="Go executable (default: from toml, or 'go')")

  # --- Command: EMIT ---
  cmd_emit = subparsers.add_parser("emit", help="Transpile a .skid file to Go source without building")
  cmd_emit.add_argument("path", type=Path, help="Input .skid source file")
  cmd_emit.add_argument("--out", type=Path, default=None, help="Output .go file (default: stdout)")
  cmd_emit.add_argument(
    "--strict",
    action="store_true",
    default=None,
    help="Fail on malformed commands instead of skipping them (Overrides config)",
  )

  # --- Command: TOKENS ---
  cmd_tok = subparsers.add_parser("tokens", help="Show how each line of a .skid file is tokenized")
  cmd_tok.add_argument("path", type=Path, help="Input .skid source file")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "build":
    return commands.handle_build(args.path, args.strict, args.keep_go, args.go_binary)

  elif args.command == "emit":
    return commands.handle_emit(args.path, args.out, args.strict)

  elif args.command == "tokens":
    return commands.handle_tokens(args.path)

  return 0


if __name__ == "__main__":
  sys.exit(main())
