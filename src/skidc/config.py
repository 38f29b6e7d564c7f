"""
Runtime Configuration Store.

Settings are read from the nearest `pyproject.toml` `[tool.skidc]` table and
may be overridden by CLI arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

CONFIG_SECTION = "skidc"


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the transpiler and toolchain.
  """

  strict_mode: bool = Field(False, description="If True, any generation diagnostic fails the conversion.")
  go_binary: str = Field("go", description="Executable used to build generated sources.")
  build_flags: List[str] = Field(default_factory=list, description="Extra flags passed to `go build`.")
  keep_intermediate: bool = Field(False, description="Keep the generated .go file after building.")

  @field_validator("go_binary")
  @classmethod
  def validate_go_binary(cls, v: str) -> str:
    """
    Ensures the toolchain executable name is not blank.

    Args:
        v (str): The configured executable.

    Returns:
        str: The trimmed executable name.

    Raises:
        ValueError: If the value is empty.
    """
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("go_binary must not be empty")
    return v_clean

  @classmethod
  def load(
    cls,
    strict_mode: Optional[bool] = None,
    go_binary: Optional[str] = None,
    build_flags: Optional[List[str]] = None,
    keep_intermediate: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        strict_mode (Optional[bool]): Override for strict mode.
        go_binary (Optional[str]): Override for the Go executable.
        build_flags (Optional[List[str]]): Extra build flags, appended to TOML ones.
        keep_intermediate (Optional[bool]): Override for keeping the .go file.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValidationError: If a TOML value has the wrong type or is invalid.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    final_strict = strict_mode if strict_mode is not None else toml_config.get("strict_mode", False)
    final_go = go_binary or toml_config.get("go_binary", "go")
    toml_flags = toml_config.get("build_flags", [])
    # A non-list TOML value is passed through so validation rejects it.
    final_flags = toml_flags + list(build_flags or []) if isinstance(toml_flags, list) else toml_flags

    if keep_intermediate is not None:
      final_keep = keep_intermediate
    else:
      final_keep = toml_config.get("keep_intermediate", False)

    return cls(
      strict_mode=final_strict,
      go_binary=final_go,
      build_flags=final_flags,
      keep_intermediate=final_keep,
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(CONFIG_SECTION, {}), parent

  return {}, None
