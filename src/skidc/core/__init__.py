"""
Core Package.

Orchestration of the lexing and generation stages and the result model
returned to callers.
"""

from skidc.core.conversion_result import ConversionResult
from skidc.core.engine import SkidEngine

__all__ = ["ConversionResult", "SkidEngine"]
