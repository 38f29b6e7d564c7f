"""
Tests for the Skid line tokenizer.

Verifies:
1.  Whitespace splitting with quoted and bracketed spans kept intact.
2.  Escapes (including a dangling escape at end of line).
3.  Comment and blank line skipping.
4.  Per-line reset of quote and bracket state.
5.  Line numbers on tokens.
"""

import pytest

from skidc.compiler.tokens import SkidLexer, Token, lex


@pytest.fixture
def lexer():
  return SkidLexer()


def test_bracketed_span_is_one_token(lexer):
  assert lexer.tokenize_line("let x int [1 2 3]") == ["let", "x", "int", "[1 2 3]"]


def test_quoted_span_keeps_quotes_and_spaces(lexer):
  assert lexer.tokenize_line('print "hello world" x') == ["print", '"hello world"', "x"]


def test_single_quotes(lexer):
  assert lexer.tokenize_line("let c rune 'a b'") == ["let", "c", "rune", "'a b'"]


def test_other_quote_inside_quote_is_literal(lexer):
  """A ' inside "..." neither opens nor closes anything."""
  assert lexer.tokenize_line('print "it\'s fine" y') == ["print", '"it\'s fine"', "y"]


def test_brackets_inside_quotes_do_not_nest(lexer):
  assert lexer.tokenize_line('print "[" x') == ["print", '"["', "x"]


def test_nested_brackets(lexer):
  assert lexer.tokenize_line("let m [[1 2] [3 4]] z") == ["let", "m", "[[1 2] [3 4]]", "z"]


def test_unmatched_close_bracket_does_not_go_negative(lexer):
  assert lexer.tokenize_line("print a] b") == ["print", "a]", "b"]


def test_escaped_space_does_not_split(lexer):
  """The backslash is consumed; the space it escapes is kept."""
  assert lexer.tokenize_line(r'print "a\ b"') == ["print", '"a b"']
  assert lexer.tokenize_line(r"print a\ b") == ["print", "a b"]


def test_escaped_quote_does_not_open_quote(lexer):
  assert lexer.tokenize_line(r"print \"a b") == ["print", '"a', "b"]


def test_trailing_escape_is_dropped(lexer):
  assert lexer.tokenize_line("print x\\") == ["print", "x"]


def test_tabs_separate_tokens(lexer):
  assert lexer.tokenize_line("set\tx\t5") == ["set", "x", "5"]


def test_repeated_whitespace_yields_no_empty_tokens(lexer):
  assert lexer.tokenize_line("set   x    5") == ["set", "x", "5"]


def test_unterminated_quote_is_flushed(lexer):
  assert lexer.tokenize_line('print "never closed') == ["print", '"never closed']


def test_comments_and_blank_lines_are_skipped(lexer):
  text = "# header comment\n\n   \n   # indented comment\nprint 1\n"
  tokens = lexer.tokenize(text)
  assert len(tokens) == 1
  assert tokens[0] == Token(command="print", args=["1"], line=5)


def test_state_resets_between_lines(lexer):
  """An unterminated quote on one line does not swallow the next line."""
  tokens = lexer.tokenize('print "open\nlet y 2')
  assert [t.command for t in tokens] == ["print", "let"]
  assert tokens[0].args == ['"open']
  assert tokens[1].args == ["y", "2"]


def test_command_and_args_split(lexer):
  tokens = lexer.tokenize("  func add a int b int -> int  ")
  assert tokens[0].command == "func"
  assert tokens[0].args == ["add", "a", "int", "b", "int", "->", "int"]


def test_command_without_args(lexer):
  tokens = lexer.tokenize("endfunc")
  assert tokens[0].args == []


def test_line_numbers_track_physical_lines():
  tokens = lex("print 1\n# skip\n\nprint 2\r\nprint 3")
  assert [t.line for t in tokens] == [1, 4, 5]
  assert tokens[1].args == ["2"]


def test_hash_inside_line_is_not_a_comment(lexer):
  assert lexer.tokenize_line('print "#1"') == ["print", '"#1"']


def test_empty_input():
  assert lex("") == []
