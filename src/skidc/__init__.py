"""
skidc Package.

A source-to-source transpiler from the line-oriented Skid scripting language
to Go. Each DSL line becomes a token; each token is mapped by a per-command
rule onto Go statements or top-level declarations, and the result is
assembled into a single `package main` file ready for `go build`.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import skidc
    go_code = skidc.transpile("let x int 5\\nprint x")
    print(go_code)

Engine Usage
^^^^^^^^^^^^

.. code-block:: python

    from skidc import SkidEngine, RuntimeConfig

    engine = SkidEngine(config=RuntimeConfig(strict_mode=True))
    res = engine.run(source_text)

    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from skidc.config import RuntimeConfig
from skidc.core.engine import SkidEngine
from skidc.core.conversion_result import ConversionResult

__version__ = "0.1.0"


def transpile(code: str, strict: bool = False) -> str:
  """
  Transpiles Skid source text to Go source text.

  Args:
      code (str): The `.skid` source to convert.
      strict (bool): If True, any malformed or unknown command is an error.
                     If False (default), such lines are skipped.

  Returns:
      str: The generated Go source.

  Raises:
      ValueError: If strict mode is on and diagnostics were raised.
  """
  config = RuntimeConfig(strict_mode=strict)
  result = SkidEngine(config=config).run(code)

  if not result.success:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Transpilation failed:\n{error_msg}")

  return result.code


__all__ = [
  "ConversionResult",
  "RuntimeConfig",
  "SkidEngine",
  "transpile",
  "__version__",
]
