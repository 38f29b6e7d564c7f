"""
Go Code Generator.

Walks a token sequence once, dispatching each token to its command rule,
then assembles the package header, sorted import block, top-level
declarations and `main` function into a single Go source file.
"""

import logging
from typing import List, Optional

from skidc.compiler.context import GenerationContext
from skidc.compiler.rules import flush_try, get_rule
from skidc.compiler.tokens import Token
from skidc.enums import Command

logger = logging.getLogger(__name__)

PACKAGE_HEADER = "package main"
ENTRY_OPEN = "func main() {"
ENTRY_CLOSE = "}"


class GoGenerator:
  """
  Converts Skid tokens into Go source text.

  Each call to `generate` uses a fresh `GenerationContext`; the context of
  the most recent call is kept on `self.context` for inspection. It is None
  until the first call.
  """

  def __init__(self) -> None:
    self.context: Optional[GenerationContext] = None

  def generate(self, tokens: List[Token]) -> str:
    """
    Generates a complete Go program.

    Malformed or unknown commands never stop generation; they are recorded
    on `self.context.diagnostics`.

    Args:
        tokens: Output of `SkidLexer.tokenize`.

    Returns:
        str: The Go source, terminated by a newline.
    """
    ctx = GenerationContext()
    self.context = ctx

    for token in tokens:
      ctx.begin(token)
      command = Command.lookup(token.command)
      if command is None:
        ctx.report("unknown command")
        continue
      get_rule(command)(token, ctx)

    self._finish(ctx)
    logger.debug("Generated %d statements, %d top-level lines", len(ctx.main_body), len(ctx.top_level))
    return self.assemble(ctx)

  def _finish(self, ctx: GenerationContext) -> None:
    """Reports unclosed blocks and flushes any try left open."""
    while ctx.try_frames:
      frame = ctx.try_frames[-1]
      ctx.report("try is never closed", command=Command.TRY.value, line=frame.line)
      flush_try(ctx)

    for block in ctx.main_blocks + ctx.top_blocks:
      ctx.report(f"{block.kind.value} is never closed", command=block.kind.value, line=block.line)

  @staticmethod
  def assemble(ctx: GenerationContext) -> str:
    """
    Joins the context buffers into the final file layout.

    Args:
        ctx: A populated generation context.

    Returns:
        str: Header, imports, top-level declarations and the `main` function.
    """
    lines = [PACKAGE_HEADER, "", "import ("]
    lines.extend(f'\t"{pkg}"' for pkg in ctx.sorted_imports())
    lines.append(")")
    lines.append("")
    lines.extend(ctx.top_level)
    lines.append(ENTRY_OPEN)
    lines.extend(ctx.main_body)
    lines.append(ENTRY_CLOSE)
    return "\n".join(lines) + "\n"


def generate(tokens: List[Token]) -> str:
  """Convenience wrapper around `GoGenerator.generate`."""
  return GoGenerator().generate(tokens)
