"""
Central Logging and Console Utilities.

All user-facing output from the CLI goes through the standard `logging`
library, rendered by a `rich` handler. The handler writes to a swappable
console so tests (or embedding applications) can capture output by injecting
a recording `Console` via `set_console`.

Attributes:
    console (_ConsoleProxy): Stable module-level reference to the active console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "code": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Forwards printing to a replaceable `rich.console.Console`.

  Swapping the backend also re-binds the root logger's `RichHandler`, so
  `logging` output follows the console.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._level = logging.INFO
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """The currently active console."""
    return self._backend

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Restores a fresh standard output console at INFO level."""
    self._backend = Console(theme=_THEME)
    self._level = logging.INFO
    self._configure_logging()

  def set_level(self, level: int) -> None:
    """Changes the root logging threshold (e.g. DEBUG for `--verbose`)."""
    self._level = level
    logging.getLogger().setLevel(level)

  def _configure_logging(self) -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    root_logger.setLevel(self._level)
    root_logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards `print` calls to the active backend."""
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Routes console printing and logging to `new_console`.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Routes output back to standard output."""
  console.reset()


def get_console() -> Console:
  """Returns the active console backend."""
  return console.backend


def set_verbose(enabled: bool) -> None:
  """Switches the log threshold between DEBUG and INFO."""
  console.set_level(logging.DEBUG if enabled else logging.INFO)


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message content. Can include rich markup like [path].
  """
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """
  Logs a success message at the custom SUCCESS level.

  Args:
      msg (str): The message content.
  """
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message.

  Args:
      msg (str): The message content.
  """
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """
  Logs an error message.

  Args:
      msg (str): The message content.
  """
  logging.error(f"❌ {msg}", extra={"markup": True})
