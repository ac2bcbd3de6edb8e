"""
Calculator expression language.

Grammar and evaluator for arithmetic and trigonometric expressions.

Usage:
    from astcalc.core.calc_lang import evaluate, parse

    result = parse("sen(54)")
    value = evaluate(result.value)
    # value ≈ 0.809
"""

from astcalc.core.calc_lang.evaluator import calculate, evaluate
from astcalc.core.calc_lang.grammar import parse

__all__ = ["calculate", "evaluate", "parse"]
