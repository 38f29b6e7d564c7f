"""
Orchestration Engine.

This module provides the `SkidEngine`, the driver for a single transpilation:

1.  **Lexing**: `SkidLexer` turns the raw text into one token per line.
2.  **Generation**: `GoGenerator` walks the tokens and assembles Go source.
3.  **Diagnostics Policy**: diagnostics recorded during generation become
    warnings in lenient mode, or errors (and a failed result) in strict mode.

The engine performs no I/O; building binaries is left to
`skidc.compiler.toolchain`.
"""

import logging
from typing import List, Optional

from skidc.compiler.generator import GoGenerator
from skidc.compiler.tokens import SkidLexer, Token
from skidc.config import RuntimeConfig
from skidc.core.conversion_result import ConversionResult
from skidc.enums import Severity

logger = logging.getLogger(__name__)


class SkidEngine:
  """
  The main compilation unit.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None) -> None:
    """
    Initializes the Engine.

    Args:
        config: Runtime settings. Defaults to lenient mode.
    """
    self.config = config or RuntimeConfig()
    self.lexer = SkidLexer()

  def tokenize(self, code: str) -> List[Token]:
    """Runs the lexing stage only."""
    return self.lexer.tokenize(code)

  def run(self, code: str) -> ConversionResult:
    """
    Transpiles Skid source into Go.

    Args:
        code (str): The `.skid` source text.

    Returns:
        ConversionResult: Generated code plus diagnostics.
    """
    tokens = self.tokenize(code)
    generator = GoGenerator()
    go_code = generator.generate(tokens)

    diagnostics = generator.context.diagnostics
    if self.config.strict_mode:
      for diag in diagnostics:
        diag.severity = Severity.ERROR

    for diag in diagnostics:
      logger.debug("Diagnostic (%s): %s", diag.severity.value, diag)

    errors = [str(d) for d in diagnostics if d.severity == Severity.ERROR]
    warnings = [str(d) for d in diagnostics if d.severity == Severity.WARNING]

    return ConversionResult(
      code=go_code,
      errors=errors,
      warnings=warnings,
      success=not errors,
      token_count=len(tokens),
    )
