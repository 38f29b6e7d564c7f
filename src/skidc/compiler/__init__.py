"""
Compiler Package.

The in-process stages of the Skid transpiler: the line tokenizer, the
generation context, the per-command rule table and the Go generator, plus
the `go build` driver that turns generated source into a binary.
"""

from skidc.compiler.context import Diagnostic, GenerationContext
from skidc.compiler.generator import GoGenerator
from skidc.compiler.tokens import SkidLexer, Token
from skidc.compiler.toolchain import BuildError, GoToolchain

__all__ = [
  "BuildError",
  "Diagnostic",
  "GenerationContext",
  "GoGenerator",
  "GoToolchain",
  "SkidLexer",
  "Token",
]
