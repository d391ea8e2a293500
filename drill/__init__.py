"""Step validation engine for factorization and rational-equation drills."""

from drill.evaluator import EvaluationError, evaluate
from drill.models import Attempt, AttemptStatus, Category, Difficulty, Exercise, ExerciseType, Step
from drill.oracle import are_equivalent, check_equation_validity, is_zero
from drill.validator import delete_step, submit_step, validate_step

__all__ = [
    "Attempt",
    "AttemptStatus",
    "Category",
    "Difficulty",
    "EvaluationError",
    "Exercise",
    "ExerciseType",
    "Step",
    "are_equivalent",
    "check_equation_validity",
    "delete_step",
    "evaluate",
    "is_zero",
    "submit_step",
    "validate_step",
]
