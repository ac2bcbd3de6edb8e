"""
Calculator AST node types.

Two node variants cover the whole language:
- Literal: a number, including the constants pi and e
- Function: a named application to ordered arguments. The binary
  operators + - * / % are two-argument functions named by their symbol;
  sen, cos, tang, arcsen, arccos, arctang take one argument.

Nodes are frozen and built bottom-up by the grammar.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


class BinaryOperator(StrEnum):
    """Binary arithmetic operators, stored as two-argument functions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


class UnaryFunction(StrEnum):
    """Trigonometric functions. Angles are in degrees."""

    SEN = "sen"
    COS = "cos"
    TANG = "tang"
    ARCSEN = "arcsen"
    ARCCOS = "arccos"
    ARCTANG = "arctang"


OPERATOR_SYMBOLS = frozenset(op.value for op in BinaryOperator)
FUNCTION_NAMES = frozenset(fn.value for fn in UnaryFunction)


def arity(name: str) -> int | None:
    """Number of arguments a function node named ``name`` must carry.

    Returns None for names the language does not define.
    """
    if name in OPERATOR_SYMBOLS:
        return 2
    if name in FUNCTION_NAMES:
        return 1
    return None


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric leaf."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


class Function(BaseModel):
    """
    Function or operator application: name(arg, ...).

    Examples:
        - Function(name="sen", arguments=[Literal(value=45)]) → sen(45)
        - Function(name="+", arguments=[Literal(value=1), Literal(value=2)]) → (1 + 2)
    """

    name: str = Field(description="Function name or operator symbol")
    arguments: list[AstNode] = Field(default_factory=list, description="Ordered arguments")

    model_config = ConfigDict(frozen=True)

    @property
    def is_operator(self) -> bool:
        return self.name in OPERATOR_SYMBOLS

    def __str__(self) -> str:
        if self.is_operator and len(self.arguments) == 2:
            left, right = self.arguments
            return f"({left} {self.name} {right})"
        args_str = ", ".join(str(a) for a in self.arguments)
        return f"{self.name}({args_str})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

AstNode = Literal | Function

# Rebuild models for recursive forward references
Function.model_rebuild()
