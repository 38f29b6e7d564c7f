from .build import handle_build
from .emit import handle_emit, handle_tokens

__all__ = [
  "handle_build",
  "handle_emit",
  "handle_tokens",
]
