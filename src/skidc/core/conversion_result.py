"""
Data structures representing the output of the conversion pipeline.

This module defines the `ConversionResult` Pydantic model, which encapsulates
the generated Go code and any diagnostics raised while producing it.
"""

from typing import List

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
  """
  Container for the results of a transpilation job.
  """

  code: str = Field(default="", description="The generated Go source code.")
  errors: List[str] = Field(default_factory=list, description="Diagnostics that fail the conversion.")
  warnings: List[str] = Field(default_factory=list, description="Diagnostics tolerated in lenient mode.")
  success: bool = Field(
    default=True,
    description="True if the code may be handed to the toolchain.",
  )
  token_count: int = Field(default=0, description="Number of DSL tokens processed.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
