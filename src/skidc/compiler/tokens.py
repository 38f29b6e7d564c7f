"""
Skid Tokenizer Definition.

Provides a character-level state machine (`SkidLexer`) that decomposes raw
`.skid` source text into a flat list of `Token` records, one per logical line.

Each line is split on unquoted, unbracketed whitespace. Quoted spans
(`"..."`, `'...'`) and bracketed spans (`[...]`) stay intact as single tokens,
and a backslash escapes the following character. Quote and bracket state never
carries over from one line to the next.
"""

from dataclasses import dataclass, field
from typing import List

_QUOTES = ("'", '"')
_WHITESPACE = (" ", "\t")


@dataclass
class Token:
  """
  Represents one parsed DSL line.

  Attributes:
      command: The first word of the line (e.g. "let").
      args: The remaining words, in source order.
      line: Line number in source (1-based).
  """

  command: str
  args: List[str] = field(default_factory=list)
  line: int = 0


class SkidLexer:
  """
  Line-oriented lexer for the Skid DSL.
  """

  COMMENT_PREFIX = "#"

  def tokenize_line(self, line: str) -> List[str]:
    """
    Splits a single line into words.

    Args:
        line: One physical line of source, already trimmed.

    Returns:
        The words of the line. Quoted and bracketed spans keep their
        delimiters and inner whitespace.
    """
    words: List[str] = []
    current: List[str] = []
    quote = ""
    depth = 0
    escape = False

    for char in line:
      if escape:
        current.append(char)
        escape = False
        continue

      if char == "\\":
        escape = True
      elif char in _QUOTES:
        if not quote:
          quote = char
        elif quote == char:
          quote = ""
        current.append(char)
      elif char == "[":
        if not quote:
          depth += 1
        current.append(char)
      elif char == "]":
        if not quote and depth > 0:
          depth -= 1
        current.append(char)
      elif char in _WHITESPACE:
        if not quote and depth == 0:
          if current:
            words.append("".join(current))
            current = []
        else:
          current.append(char)
      else:
        current.append(char)

    # A dangling escape at end of line is simply never consumed.
    if current:
      words.append("".join(current))

    return words

  def tokenize(self, text: str) -> List[Token]:
    """
    Tokenizes a whole source file.

    Blank lines and lines starting with `#` are skipped.

    Args:
        text: Raw `.skid` source.

    Returns:
        One Token per non-blank, non-comment line.
    """
    tokens: List[Token] = []
    for line_num, raw in enumerate(text.split("\n"), start=1):
      stripped = raw.strip()
      if not stripped or stripped.startswith(self.COMMENT_PREFIX):
        continue

      words = self.tokenize_line(stripped)
      if not words:
        continue

      tokens.append(Token(command=words[0], args=words[1:], line=line_num))
    return tokens


def lex(text: str) -> List[Token]:
  """Convenience wrapper around `SkidLexer.tokenize`."""
  return SkidLexer().tokenize(text)
