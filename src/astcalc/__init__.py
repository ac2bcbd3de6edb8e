"""
astcalc - parser-combinator calculator.

Parses arithmetic and trigonometric expressions such as ``(1+2)*3`` or
``sen(54)`` into an AST and evaluates it to a number.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.calc_lang import calculate, evaluate, parse
from .core.errors import AstCalcError, EvaluationError, ExpressionParseError
from .core.results import Err, Ok, Result

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse",
    "evaluate",
    "calculate",
    "Ok",
    "Err",
    "Result",
    "AstCalcError",
    "EvaluationError",
    "ExpressionParseError",
]
