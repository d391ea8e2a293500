"""Numeric evaluation of learner-typed algebra in the single variable ``x``.

Text is parsed with SymPy (implicit multiplication and ``^`` powers
allowed), compiled once with ``lambdify`` and then evaluated with plain
floats.  Equations ``LHS = RHS`` evaluate to ``(LHS) - (RHS)`` so that a
step such as ``1 = 2x + 2`` means ``1 - (2x + 2)``.

The public helpers never raise: a malformed expression, a division by
zero, a domain error or a complex / infinite result all come back as
``None``, the "unknown" signal the equivalence oracle treats as a miss.
"""

import logging
import math
import re
from functools import lru_cache
from typing import Callable, Optional

import sympy
from sympy import Abs, E, Symbol, cos, exp, lambdify, log, pi, sin, sqrt, tan
from sympy.parsing.sympy_parser import (
    parse_expr, standard_transformations, implicit_multiplication_application,
    convert_xor,
)

logger = logging.getLogger(__name__)

TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
)

X = Symbol("x")

# Every identifier a learner may type.  Anything else is rejected before
# the text reaches ``parse_expr``.
_LOCALS = {
    "x": X,
    "e": E,
    "pi": pi,
    "sqrt": sqrt,
    "sin": sin,
    "cos": cos,
    "tan": tan,
    "exp": exp,
    "log": log,
    "ln": log,
    "abs": Abs,
}

_ALLOWED_CHARS = re.compile(r"^[0-9A-Za-z\s.+\-*/()=]*$")
_IDENTIFIER = re.compile(r"[A-Za-z_]+")

_UNICODE_REPLACEMENTS = (
    ("−", "-"),     # U+2212 minus sign
    ("×", "*"),     # multiplication sign
    ("·", "*"),     # middle dot
    ("π", "(pi)"),
    ("√", "sqrt"),
    ("[", "("), ("]", ")"),
    ("{", "("), ("}", ")"),
)


class EvaluationError(ValueError):
    """Raised when text cannot be turned into a numeric function of x."""


def normalize(text: str) -> str:
    """Return *text* with decimal commas, powers and Unicode operators
    rewritten into the ASCII notation the parser understands."""
    s = text.strip().replace(",", ".")
    for old, new in _UNICODE_REPLACEMENTS:
        s = s.replace(old, new)
    return s.replace("^", "**")


def split_equation(text: str) -> Optional[tuple[str, str]]:
    """Split *text* at its first ``=``.

    Everything after the first ``=`` stays in the right-hand side, so a
    malformed ``a = b = c`` keeps an ``=`` on the right and fails to parse.
    Returns ``None`` when there is no ``=`` at all.
    """
    if "=" not in text:
        return None
    lhs, _, rhs = text.partition("=")
    return lhs, rhs


def _validate_characters(s: str) -> None:
    if not _ALLOWED_CHARS.match(s):
        bad = sorted({ch for ch in s if not _ALLOWED_CHARS.match(ch)})
        raise EvaluationError(f"Invalid character(s): {''.join(bad)}")
    for name in _IDENTIFIER.findall(s):
        if name not in _LOCALS:
            raise EvaluationError(f"Unknown name '{name}'. Only x may be used as the variable.")


@lru_cache(maxsize=512)
def compile_expression(text: str) -> sympy.Expr:
    """Parse already-normalised *text* into a SymPy expression in ``x``.

    Equations are compiled as ``(LHS) - (RHS)``, the right-hand side kept
    in parentheses as a unit.  The expression is left unevaluated so
    common factors are not cancelled: ``x/x`` stays undefined at 0.

    Raises EvaluationError for anything that is not a finite expression
    in ``x``.
    """
    if not text.strip():
        raise EvaluationError("Empty expression.")
    _validate_characters(text)

    sides = split_equation(text)
    source = text if sides is None else f"({sides[0]}) - ({sides[1]})"
    try:
        expr = parse_expr(source, local_dict=dict(_LOCALS),
                          transformations=TRANSFORMATIONS, evaluate=False)
    except Exception as e:
        raise EvaluationError(f"Could not parse expression: '{text}'. Error: {e}") from e

    if not isinstance(expr, sympy.Expr):
        raise EvaluationError(f"'{text}' is not an algebraic expression.")
    if expr.free_symbols - {X}:
        raise EvaluationError(f"'{text}' uses variables other than x.")
    if expr.doit().has(sympy.zoo, sympy.nan, sympy.oo, -sympy.oo):
        raise EvaluationError(f"'{text}' is undefined.")
    return expr


@lru_cache(maxsize=512)
def _compile_callable(text: str) -> Callable[[float], object]:
    expr = compile_expression(text)
    try:
        return lambdify(X, expr, modules="math")
    except Exception as e:
        raise EvaluationError(f"Could not compile '{text}': {e}") from e


def _to_real(result: object) -> Optional[float]:
    if isinstance(result, complex):
        return None
    try:
        value = float(result)
    except (TypeError, ValueError, OverflowError):
        return None
    return value if math.isfinite(value) else None


def evaluate(text: str, x_value: float) -> Optional[float]:
    """Evaluate *text* at ``x = x_value``.

    Returns the float value, or ``None`` when the text is malformed or
    undefined at that point.
    """
    try:
        func = _compile_callable(normalize(text))
    except EvaluationError as e:
        logger.debug("Cannot evaluate %r: %s", text, e)
        return None
    try:
        result = func(float(x_value))
    except (ArithmeticError, ValueError, TypeError) as e:
        logger.debug("%r undefined at x=%s: %s", text, x_value, e)
        return None
    return _to_real(result)


def evaluate_constant(text: str) -> Optional[float]:
    """Evaluate *text* that must not mention ``x`` (e.g. ``-0.5`` or ``7/2``)."""
    try:
        expr = compile_expression(normalize(text))
    except EvaluationError as e:
        logger.debug("Cannot evaluate constant %r: %s", text, e)
        return None
    if X in expr.free_symbols:
        return None
    return evaluate(text, 0.0)
