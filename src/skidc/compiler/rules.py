"""
Command Rule Registry.

One rule per DSL command. A rule receives the token and the generation
context, reads the token's arguments, appends lines to the context's buffers
and records diagnostics for malformed input. Rules never raise on bad DSL:
a malformed token produces no output and one diagnostic.

Rules are registered with the `register_rule` decorator. Importing this
module fails if any `Command` member is left without a rule.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from skidc.compiler.context import GenerationContext, TryFrame
from skidc.compiler.tokens import Token
from skidc.enums import BlockKind, Command, is_type_keyword

RuleFunction = Callable[[Token, GenerationContext], None]

_RULES: Dict[Command, RuleFunction] = {}

RETURN_MARKER = "->"


def register_rule(*commands: Command) -> Callable[[RuleFunction], RuleFunction]:
  """
  Decorator binding a rule function to one or more commands.

  Args:
      *commands: The commands handled by the decorated function.
  """

  def decorator(func: RuleFunction) -> RuleFunction:
    for command in commands:
      if command in _RULES:
        raise ValueError(f"Duplicate rule for command '{command.value}'")
      _RULES[command] = func
    return func

  return decorator


def get_rule(command: Command) -> RuleFunction:
  """Returns the rule registered for `command`."""
  return _RULES[command]


def _joined(args: List[str]) -> str:
  return " ".join(args)


def _require(token: Token, ctx: GenerationContext, count: int) -> bool:
  """Reports and returns False if `token` has fewer than `count` args."""
  if len(token.args) < count:
    noun = "argument" if count == 1 else "arguments"
    ctx.report(f"expects at least {count} {noun}, got {len(token.args)}")
    return False
  return True


def _declaration(token: Token, ctx: GenerationContext, keyword: str, untyped: str) -> Optional[str]:
  """
  Shared typed/untyped branching for `let` and `const`.

  Returns:
      The declaration text, or None if the token is malformed.
  """
  if not _require(token, ctx, 2):
    return None

  name, second = token.args[0], token.args[1]
  if is_type_keyword(second):
    if len(token.args) < 3:
      ctx.report(f"typed declaration of '{name}' has no value")
      return None
    return f"{keyword} {name} {second} = {_joined(token.args[2:])}"

  return untyped.format(name=name, value=_joined(token.args[1:]))


# --- Output & variables ---


@register_rule(Command.PRINT)
def rule_print(token: Token, ctx: GenerationContext) -> None:
  ctx.emit_main(f"fmt.Println({_joined(token.args)})")


@register_rule(Command.PRINTF)
def rule_printf(token: Token, ctx: GenerationContext) -> None:
  if not _require(token, ctx, 1):
    return
  fmt_str, values = token.args[0], token.args[1:]
  if values:
    ctx.emit_main(f"fmt.Printf({fmt_str}, {', '.join(values)})")
  else:
    ctx.emit_main(f"fmt.Printf({fmt_str})")


@register_rule(Command.LET)
def rule_let(token: Token, ctx: GenerationContext) -> None:
  decl = _declaration(token, ctx, "var", "{name} := {value}")
  if decl:
    ctx.emit_main(decl)


@register_rule(Command.SET)
def rule_set(token: Token, ctx: GenerationContext) -> None:
  if not _require(token, ctx, 2):
    return
  ctx.emit_main(f"{token.args[0]} = {_joined(token.args[1:])}")


@register_rule(Command.INC, Command.DEC)
def rule_step(token: Token, ctx: GenerationContext) -> None:
  if len(token.args) != 1:
    ctx.report(f"expects exactly 1 argument, got {len(token.args)}")
    return
  op = "++" if token.command == Command.INC.value else "--"
  ctx.emit_main(f"{token.args[0]}{op}")


@register_rule(Command.INPUT)
def rule_input(token: Token, ctx: GenerationContext) -> None:
  args = token.args
  if len(args) == 2 and is_type_keyword(args[1]):
    ctx.emit_main(f"var {args[0]} {args[1]}")
    ctx.emit_main(f"fmt.Scan(&{args[0]})")
  elif len(args) == 1:
    ctx.emit_main(f"fmt.Scan(&{args[0]})")
  else:
    ctx.report("expects a variable name and an optional type keyword")


@register_rule(Command.CALL)
def rule_call(token: Token, ctx: GenerationContext) -> None:
  if not _require(token, ctx, 1):
    return
  ctx.emit_main(f"{token.args[0]}({', '.join(token.args[1:])})")


# --- Control flow ---


@register_rule(Command.IF)
def rule_if(token: Token, ctx: GenerationContext) -> None:
  ctx.open_main(BlockKind.IF)
  ctx.emit_main(f"if {_joined(token.args)} {{")


@register_rule(Command.ELSE)
def rule_else(token: Token, ctx: GenerationContext) -> None:
  if ctx.peek_main() != BlockKind.IF:
    ctx.report("else without an open if")
  ctx.emit_main("} else {")


@register_rule(Command.WHILE, Command.FOR)
def rule_loop(token: Token, ctx: GenerationContext) -> None:
  kind = BlockKind.WHILE if token.command == Command.WHILE.value else BlockKind.FOR
  ctx.open_main(kind)
  ctx.emit_main(f"for {_joined(token.args)} {{")


@register_rule(Command.END)
def rule_end(token: Token, ctx: GenerationContext) -> None:
  ctx.close_main(BlockKind.IF, BlockKind.WHILE, BlockKind.FOR)
  ctx.emit_main("}")


@register_rule(Command.SWITCH)
def rule_switch(token: Token, ctx: GenerationContext) -> None:
  ctx.open_main(BlockKind.SWITCH)
  ctx.emit_main(f"switch {_joined(token.args)} {{")


@register_rule(Command.CASE)
def rule_case(token: Token, ctx: GenerationContext) -> None:
  if ctx.peek_main() != BlockKind.SWITCH:
    ctx.report("case without an open switch")
  ctx.emit_main(f"case {_joined(token.args)}:")


@register_rule(Command.DEFAULT)
def rule_default(token: Token, ctx: GenerationContext) -> None:
  if ctx.peek_main() != BlockKind.SWITCH:
    ctx.report("default without an open switch")
  ctx.emit_main("default:")


@register_rule(Command.ENDSWITCH)
def rule_endswitch(token: Token, ctx: GenerationContext) -> None:
  ctx.close_main(BlockKind.SWITCH)
  ctx.emit_main("}")


# --- Recover-guarded scope ---


@register_rule(Command.TRY)
def rule_try(token: Token, ctx: GenerationContext) -> None:
  ctx.try_frames.append(TryFrame(line=ctx.line, depth=len(ctx.main_blocks)))


@register_rule(Command.CATCH)
def rule_catch(token: Token, ctx: GenerationContext) -> None:
  if not ctx.try_frames:
    ctx.report("catch without an open try")
    return

  frame = ctx.try_frames[-1]
  _check_try_depth(frame, ctx)
  if frame.in_handler:
    ctx.report(f"second catch for try opened on line {frame.line}")
  frame.in_handler = True

  if token.args:
    name = token.args[0]
    frame.handler.append(f"\t{name} := err")
    frame.handler.append(f"\t_ = {name}")
  frame.handler.append("\t// Handle error")


@register_rule(Command.ENDTRY)
def rule_endtry(token: Token, ctx: GenerationContext) -> None:
  if not ctx.try_frames:
    ctx.report("endtry without an open try")
    return
  _check_try_depth(ctx.try_frames[-1], ctx)
  flush_try(ctx)


def _check_try_depth(frame: TryFrame, ctx: GenerationContext) -> None:
  if len(ctx.main_blocks) > frame.depth:
    inner = ctx.main_blocks[-1]
    ctx.report(f"'{inner.kind.value}' opened on line {inner.line} is still open inside try")


def flush_try(ctx: GenerationContext) -> None:
  """
  Pops the innermost try frame and writes it out as a self-invoking closure
  whose deferred function recovers from a panic and runs the handler.
  """
  frame = ctx.try_frames.pop()
  ctx.emit_main("func() {")
  ctx.emit_main("\tdefer func() {")
  ctx.emit_main("\t\tif err := recover(); err != nil {")
  for line in frame.handler:
    ctx.emit_main("\t\t" + line)
  ctx.emit_main("\t\t}")
  ctx.emit_main("\t}()")
  for line in frame.body:
    ctx.emit_main(line)
  ctx.emit_main("}()")


# --- Top-level declarations ---


@dataclass
class FuncHeader:
  """
  The pieces of a `func` line.

  Attributes:
      receiver: Method receiver text such as "(p *Point)", or "".
      name: Function name.
      params: (name, type) pairs in order.
      return_type: Return type text, or "".
      dropped: An unpaired trailing parameter word, if one was discarded.
  """

  receiver: str
  name: str
  params: List[Tuple[str, str]] = field(default_factory=list)
  return_type: str = ""
  dropped: Optional[str] = None

  def render(self) -> str:
    """Formats the header as a Go function signature opening a block."""
    param_str = ", ".join(f"{p} {t}" for p, t in self.params)
    prefix = f"func {self.receiver} " if self.receiver else "func "
    text = f"{prefix}{self.name}({param_str})"
    if self.return_type:
      text += f" {self.return_type}"
    return text + " {"


def parse_func_header(args: List[str]) -> Optional[FuncHeader]:
  """
  Splits `func` arguments into receiver, name, parameters and return type.

  A first argument starting with "(" is a method receiver and the function
  name follows it. The first "->" ends the parameter list; the words after it,
  up to the next "->", form the return type. Parameters are read as
  (name, type) pairs and an unpaired trailing word is dropped.

  Args:
      args: The arguments of a `func` token.

  Returns:
      The parsed header, or None if no function name is present.
  """
  if not args:
    return None

  receiver = ""
  if args[0].startswith("("):
    if len(args) < 2:
      return None
    receiver, name, rest = args[0], args[1], args[2:]
  else:
    name, rest = args[0], args[1:]

  return_type = ""
  if RETURN_MARKER in rest:
    idx = rest.index(RETURN_MARKER)
    tail = rest[idx + 1 :]
    if RETURN_MARKER in tail:
      tail = tail[: tail.index(RETURN_MARKER)]
    return_type = _joined(tail)
    rest = rest[:idx]

  params = [(rest[i], rest[i + 1]) for i in range(0, len(rest) - 1, 2)]
  dropped = rest[-1] if len(rest) % 2 else None
  return FuncHeader(receiver, name, params, return_type, dropped)


@register_rule(Command.FUNC)
def rule_func(token: Token, ctx: GenerationContext) -> None:
  header = parse_func_header(token.args)
  if header is None:
    ctx.report("expects a function name")
    return
  if header.dropped is not None:
    ctx.report(f"unpaired parameter '{header.dropped}' dropped")

  ctx.open_top(BlockKind.FUNC)
  ctx.emit_top(header.render())


@register_rule(Command.ENDFUNC)
def rule_endfunc(token: Token, ctx: GenerationContext) -> None:
  ctx.close_top(BlockKind.FUNC)
  ctx.emit_top("}")


@register_rule(Command.RETURN)
def rule_return(token: Token, ctx: GenerationContext) -> None:
  if not any(b.kind == BlockKind.FUNC for b in ctx.top_blocks):
    ctx.report("return outside of func")
  if token.args:
    ctx.emit_top(f"\treturn {_joined(token.args)}")
  else:
    ctx.emit_top("\treturn")


@register_rule(Command.STRUCT)
def rule_struct(token: Token, ctx: GenerationContext) -> None:
  if not _require(token, ctx, 1):
    return
  if ctx.current_struct:
    ctx.report(f"struct '{ctx.current_struct}' is still open")
  ctx.current_struct = token.args[0]
  ctx.open_top(BlockKind.STRUCT)
  ctx.emit_top(f"type {ctx.current_struct} struct {{")


@register_rule(Command.FIELD)
def rule_field(token: Token, ctx: GenerationContext) -> None:
  if not ctx.current_struct:
    ctx.report("field outside of struct")
    return
  if not _require(token, ctx, 2):
    return
  ctx.emit_top(f"\t{token.args[0]} {_joined(token.args[1:])}")


@register_rule(Command.ENDSTRUCT)
def rule_endstruct(token: Token, ctx: GenerationContext) -> None:
  if not ctx.current_struct:
    ctx.report("endstruct without an open struct")
    return
  ctx.close_top(BlockKind.STRUCT)
  ctx.emit_top("}")
  ctx.current_struct = None


@register_rule(Command.CONST)
def rule_const(token: Token, ctx: GenerationContext) -> None:
  decl = _declaration(token, ctx, "const", "const {name} = {value}")
  if decl:
    ctx.emit_top(decl)


@register_rule(Command.IMPORT)
def rule_import(token: Token, ctx: GenerationContext) -> None:
  if not _require(token, ctx, 1):
    return
  ctx.add_import(_joined(token.args))


_missing = [c.value for c in Command if c not in _RULES]
if _missing:
  raise RuntimeError(f"Commands without a generation rule: {', '.join(_missing)}")
