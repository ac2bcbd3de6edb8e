"""Core astcalc functionality: results, combinators, AST, grammar, evaluator, config."""

from . import ir
from .calc_lang import calculate, evaluate, parse
from .config import CalculatorConfig, find_config, load_config, resolve_config
from .errors import (
    AstCalcError,
    ConfigError,
    EvaluationError,
    ExpressionParseError,
    NestingTooDeepError,
    UnknownNodeTypeError,
    UnsupportedOperatorError,
)
from .results import Err, Ok, Result

__all__ = [
    "ir",
    "parse",
    "evaluate",
    "calculate",
    "Ok",
    "Err",
    "Result",
    "CalculatorConfig",
    "load_config",
    "find_config",
    "resolve_config",
    "AstCalcError",
    "ConfigError",
    "EvaluationError",
    "ExpressionParseError",
    "NestingTooDeepError",
    "UnknownNodeTypeError",
    "UnsupportedOperatorError",
]
