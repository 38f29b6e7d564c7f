"""
Enumerations for skidc.

This module defines the closed vocabularies shared across the compiler:
DSL commands, recognised type keywords, block kinds and diagnostic severities.
"""

from enum import Enum
from typing import Optional


class Command(str, Enum):
  """
  Every command the DSL understands.

  The generator dispatches on these members. Each one must have exactly one
  registered rule in `skidc.compiler.rules`.
  """

  PRINT = "print"
  PRINTF = "printf"
  LET = "let"
  SET = "set"
  IF = "if"
  ELSE = "else"
  END = "end"
  WHILE = "while"
  FOR = "for"
  FUNC = "func"
  ENDFUNC = "endfunc"
  CALL = "call"
  RETURN = "return"
  INPUT = "input"
  SWITCH = "switch"
  CASE = "case"
  DEFAULT = "default"
  ENDSWITCH = "endswitch"
  TRY = "try"
  CATCH = "catch"
  ENDTRY = "endtry"
  STRUCT = "struct"
  FIELD = "field"
  ENDSTRUCT = "endstruct"
  INC = "inc"
  DEC = "dec"
  CONST = "const"
  IMPORT = "import"

  @classmethod
  def lookup(cls, name: str) -> Optional["Command"]:
    """
    Resolves a raw command string.

    Args:
        name (str): The first token of a DSL line.

    Returns:
        Optional[Command]: The member, or None if the command is unknown.
    """
    try:
      return cls(name)
    except ValueError:
      return None


class TypeKeyword(str, Enum):
  """Type names accepted by `let`, `const` and `input`."""

  INT = "int"
  FLOAT64 = "float64"
  STRING = "string"
  BOOL = "bool"
  RUNE = "rune"
  BYTE = "byte"
  INT_SLICE = "[]int"
  STRING_SLICE = "[]string"
  FLOAT64_SLICE = "[]float64"


_TYPE_NAMES = frozenset(t.value for t in TypeKeyword)


def is_type_keyword(word: str) -> bool:
  """Returns True if `word` is one of the recognised type keywords."""
  return word in _TYPE_NAMES


class BlockKind(str, Enum):
  """
  Block constructs tracked for nesting diagnostics.

  Main-body blocks (IF, WHILE, FOR, SWITCH) and top-level blocks
  (FUNC, STRUCT) live on separate stacks.
  """

  IF = "if"
  WHILE = "while"
  FOR = "for"
  SWITCH = "switch"
  FUNC = "func"
  STRUCT = "struct"


class Severity(str, Enum):
  """Severity of a generation diagnostic."""

  WARNING = "warning"
  ERROR = "error"
