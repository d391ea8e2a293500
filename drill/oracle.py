"""Equivalence by sampling.

Two texts are treated as the same expression when they evaluate to the
same value (within ``TOLERANCE``) at every point of ``PROBE_POINTS``.
This is a deliberate approximation of symbolic equality: expressions that
agree on the whole probe set but differ elsewhere are accepted.  The set
is larger than the degree of any polynomial in the exercise catalogue.
"""

import enum
import logging
import math
import re
from typing import Optional

from drill.evaluator import evaluate, evaluate_constant

logger = logging.getLogger(__name__)

# Fixed for the lifetime of the process.  Mixes zero, ±1, integers, a
# positive and a negative non-integer and an irrational so that equal
# values at "nice" integers alone do not pass.
PROBE_POINTS: tuple[float, ...] = (0.0, 1.0, -1.0, 2.5, -3.0, 10.0, -1.7, math.pi)

TOLERANCE = 1e-4

# Second point used to tell a useful equation step from an identity.
TAUTOLOGY_OFFSET = 1.23


class EquationCheck(enum.Enum):
    VALID = "valid"
    BROKEN = "broken"        # not satisfied by the known solution
    TAUTOLOGY = "tautology"  # also satisfied away from the solution


def are_equivalent(text_a: str, text_b: str) -> bool:
    """Return True when *text_a* and *text_b* agree at every probe point.

    A failed evaluation of either text at any probe makes the pair
    non-equivalent.
    """
    for x in PROBE_POINTS:
        a = evaluate(text_a, x)
        b = evaluate(text_b, x)
        if a is None or b is None:
            return False
        if abs(a - b) > TOLERANCE:
            return False
    return True


def is_zero(text: str) -> bool:
    return are_equivalent(text, "0")


def get_equation_solution(target: str) -> Optional[float]:
    """Read the numeric solution out of a target such as ``x = -5``.

    Returns None when the target is not exactly one ``=`` followed by a
    constant.
    """
    parts = target.split("=")
    if len(parts) != 2:
        return None
    return evaluate_constant(parts[1])


def classify_equation_step(text: str, solution: float) -> EquationCheck:
    """Check an equation step against the known *solution*.

    The step must hold at the solution, and must not also hold at
    ``solution + TAUTOLOGY_OFFSET`` (that would make it an identity such
    as ``0 = 0``).
    """
    at_solution = evaluate(text, solution)
    if at_solution is None or abs(at_solution) > TOLERANCE:
        return EquationCheck.BROKEN

    elsewhere = evaluate(text, solution + TAUTOLOGY_OFFSET)
    if elsewhere is not None and abs(elsewhere) < TOLERANCE:
        return EquationCheck.TAUTOLOGY
    return EquationCheck.VALID


def check_equation_validity(text: str, solution: float) -> bool:
    verdict = classify_equation_step(text, solution)
    if verdict is not EquationCheck.VALID:
        logger.debug("Equation step %r rejected: %s", text, verdict.value)
    return verdict is EquationCheck.VALID


_INNER_GROUP = re.compile(r"\([^()]*\)")
_TOP_LEVEL_SUM = re.compile(r"[0-9a-zA-Z]\s*[+-]\s*[0-9a-zA-Z]")


def is_factored_form(text: str) -> bool:
    """Heuristic: True when no ``+``/``-`` joins two terms outside parentheses.

    ``(x-3)(x-4)`` and ``2(x+1)^2`` are factored; ``x^2 - 9`` and
    ``(x+1)(x-1) + 3`` are not.
    """
    structure = text
    while _INNER_GROUP.search(structure):
        structure = _INNER_GROUP.sub("BLOCK", structure)
    return not _TOP_LEVEL_SUM.search(structure)
