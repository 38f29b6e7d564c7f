"""
Generation Context.

Holds all mutable state for a single generation pass: the import set, the
two output buffers, the open struct, block-nesting stacks, pending `try`
frames and the diagnostics collected along the way.

A fresh context is created for every `GoGenerator.generate` call and is
passed explicitly to each command rule.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set

from skidc.compiler.tokens import Token
from skidc.enums import BlockKind, Severity

DEFAULT_IMPORT = "fmt"

MAIN_INDENT = "\t"


@dataclass
class Diagnostic:
  """
  A non-fatal complaint about one token.

  Attributes:
      line: Source line number (0 if the issue is not tied to a line).
      command: The raw command of the offending token.
      message: Human readable description.
      severity: Reported severity, before strict-mode promotion.
  """

  line: int
  command: str
  message: str
  severity: Severity = Severity.WARNING

  def __str__(self) -> str:
    loc = f"line {self.line}" if self.line else "end of input"
    return f"{loc}: '{self.command}': {self.message}"


@dataclass
class OpenBlock:
  """A block opener waiting for its closer."""

  kind: BlockKind
  line: int


@dataclass
class TryFrame:
  """
  Buffers the body and handler of an open `try` until `endtry`.

  The deferred recover handler has to be installed before the body runs, so
  neither part can be streamed straight into the main body.
  """

  line: int
  depth: int = 0
  body: List[str] = field(default_factory=list)
  handler: List[str] = field(default_factory=list)
  in_handler: bool = False

  def append(self, line: str) -> None:
    """Appends to whichever section is currently being written."""
    if self.in_handler:
      self.handler.append(line)
    else:
      self.body.append(line)


class GenerationContext:
  """
  Exclusively-owned state for one generation pass.
  """

  def __init__(self) -> None:
    self.imports: Set[str] = {DEFAULT_IMPORT}
    self.main_body: List[str] = []
    self.top_level: List[str] = []
    self.current_struct: Optional[str] = None
    self.diagnostics: List[Diagnostic] = []

    self.main_blocks: List[OpenBlock] = []
    self.top_blocks: List[OpenBlock] = []
    self.try_frames: List[TryFrame] = []

    self._token: Optional[Token] = None

  # --- Token bookkeeping ---

  def begin(self, token: Token) -> None:
    """Marks `token` as the one currently being processed."""
    self._token = token

  @property
  def line(self) -> int:
    """Line number of the token being processed."""
    return self._token.line if self._token else 0

  # --- Emission ---

  def emit_main(self, line: str) -> None:
    """
    Appends one statement line to the main body.

    Lines emitted while a `try` is open are held on the innermost frame.
    """
    text = MAIN_INDENT + line
    if self.try_frames:
      self.try_frames[-1].append(text)
    else:
      self.main_body.append(text)

  def emit_top(self, line: str) -> None:
    """Appends one line to the top-level declarations buffer."""
    self.top_level.append(line)

  def add_import(self, package: str) -> None:
    """Registers a package for the import block. Duplicates collapse."""
    self.imports.add(package)

  def sorted_imports(self) -> List[str]:
    """Returns the import set in a stable, sorted order."""
    return sorted(self.imports)

  # --- Diagnostics ---

  def report(self, message: str, command: Optional[str] = None, line: Optional[int] = None) -> None:
    """
    Records a diagnostic against the current token.

    Args:
        message: Description of the problem.
        command: Overrides the command name (defaults to current token).
        line: Overrides the line number (defaults to current token).
    """
    cmd = command if command is not None else (self._token.command if self._token else "")
    where = line if line is not None else self.line
    self.diagnostics.append(Diagnostic(line=where, command=cmd, message=message))

  # --- Block nesting ---

  def open_main(self, kind: BlockKind) -> None:
    self.main_blocks.append(OpenBlock(kind, self.line))

  def open_top(self, kind: BlockKind) -> None:
    self.top_blocks.append(OpenBlock(kind, self.line))

  def _main_floor(self) -> int:
    """Number of main-body blocks opened outside the innermost try."""
    return self.try_frames[-1].depth if self.try_frames else 0

  def peek_main(self) -> Optional[BlockKind]:
    """
    Kind of the innermost open main-body block, if any.

    Blocks opened outside the innermost `try` are not visible from inside it.
    """
    if len(self.main_blocks) <= self._main_floor():
      return None
    return self.main_blocks[-1].kind

  def close_main(self, *kinds: BlockKind) -> None:
    """
    Pops the innermost main-body block, reporting a mismatch if it is not
    one of `kinds`. A closer with nothing open is reported and ignored.

    Inside a `try`, a closer that would reach a block opened before the `try`
    is reported and leaves that block open.
    """
    floor = self._main_floor()
    if floor and len(self.main_blocks) <= floor:
      outer = self.main_blocks[-1]
      self.report(f"closes '{outer.kind.value}' opened on line {outer.line} outside try")
      return
    self._close(self.main_blocks, kinds)

  def close_top(self, *kinds: BlockKind) -> None:
    """Top-level counterpart of `close_main`."""
    self._close(self.top_blocks, kinds)

  def _close(self, stack: List[OpenBlock], kinds: tuple) -> None:
    expected = "/".join(k.value for k in kinds)
    if not stack:
      self.report(f"no open {expected} block to close")
      return

    block = stack.pop()
    if block.kind not in kinds:
      self.report(f"closes '{block.kind.value}' opened on line {block.line}, expected {expected}")
