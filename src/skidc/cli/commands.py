"""
CLI Command Handlers Facade.

Re-exports the handlers from `skidc.cli.handlers` so the dispatcher (and
tests patching it) have a single import location.
"""

from skidc.cli.handlers.build import handle_build
from skidc.cli.handlers.emit import handle_emit, handle_tokens

__all__ = [
  "handle_build",
  "handle_emit",
  "handle_tokens",
]
