"""Step validation state machine.

An Attempt is ACTIVE until a valid step reaches the exercise target, at
which point it is SOLVED.  Failed steps are recorded like any other and
leave the Attempt ACTIVE.  ``submit_step`` and ``delete_step`` are pure:
they return a new Attempt and never touch the one passed in.
"""

import logging
from typing import Callable, NamedTuple

from drill.formatting import to_display_form
from drill.models import Attempt, Exercise, ExerciseType, Step
from drill.oracle import are_equivalent, check_equation_validity, get_equation_solution

logger = logging.getLogger(__name__)

MSG_NOT_EQUIVALENT = (
    "This step is not equivalent to the starting expression. Check your working."
)
MSG_EQUATION_BROKEN = (
    "This step is not correct. The equality no longer holds "
    "(or it is a tautology such as 0 = 0)."
)
MSG_SOLVED = "Well done! That is the final answer."
MSG_CONTINUE = "That's correct, keep going."


class StepVerdict(NamedTuple):
    valid: bool
    is_target: bool
    message: str


def _is_valid(exercise: Exercise, raw: str) -> bool:
    if exercise.type is not ExerciseType.EQUATION:
        return are_equivalent(exercise.expression, raw)

    solution = get_equation_solution(exercise.target)
    if solution is None:
        logger.warning(
            "Exercise %s: target %r has no numeric solution, "
            "comparing against the origin equation instead",
            exercise.id, exercise.target,
        )
        return are_equivalent(exercise.expression, raw)
    return check_equation_validity(raw, solution)


def validate_step(exercise: Exercise, raw: str) -> StepVerdict:
    """Classify *raw* against *exercise* without touching any Attempt."""
    valid = _is_valid(exercise, raw)
    is_target = are_equivalent(exercise.target, raw)

    if not valid:
        message = MSG_EQUATION_BROKEN if exercise.is_equation else MSG_NOT_EQUIVALENT
    elif is_target:
        message = MSG_SOLVED
    else:
        message = MSG_CONTINUE
    return StepVerdict(valid, is_target, message)


def _render(raw: str, formatter: Callable[[str], str]) -> str:
    try:
        return formatter(raw)
    except Exception as e:
        logger.debug("Display formatting failed for %r: %s", raw, e)
        return raw


def submit_step(attempt: Attempt, raw: str,
                formatter: Callable[[str], str] = to_display_form) -> Attempt:
    """Validate *raw* and return *attempt* with the new step appended.

    Blank input, and any input once the attempt is solved, returns the
    attempt unchanged.
    """
    if not raw or not raw.strip():
        return attempt
    if attempt.solved:
        logger.debug("Ignoring step %r: exercise %s already solved",
                      raw, attempt.exercise.id)
        return attempt

    verdict = validate_step(attempt.exercise, raw)
    step = Step(
        raw=raw,
        display=_render(raw, formatter),
        valid=verdict.valid,
        is_target=verdict.is_target,
        message=verdict.message,
    )
    solved = verdict.valid and verdict.is_target
    if solved:
        logger.info("Exercise %s solved in %d step(s)",
                    attempt.exercise.id, len(attempt.steps) + 1)

    return attempt.model_copy(update={
        "steps": attempt.steps + (step,),
        "solved": solved,
        # Keep the text for refinement unless the target was reached.
        "draft": "" if verdict.is_target else raw,
    })


def delete_step(attempt: Attempt, index: int) -> Attempt:
    """Remove the step at *index*.

    Remaining steps are not re-validated, and the solved flag is always
    cleared, whichever step was removed.
    """
    if not 0 <= index < len(attempt.steps):
        raise IndexError(f"No step at index {index}")
    steps = attempt.steps[:index] + attempt.steps[index + 1:]
    return attempt.model_copy(update={"steps": steps, "solved": False})
