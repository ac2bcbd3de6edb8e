"""
Parser-combinator toolkit.

``Parser`` carries the combinators (``and_then``, ``or_else``, ``map``,
``filter``); ``primitives`` builds the leaf parsers.
"""

from astcalc.core.parsing.parser import Parser
from astcalc.core.parsing.primitives import lazy, literal, one_of, regex, succeed

__all__ = ["Parser", "lazy", "literal", "one_of", "regex", "succeed"]
