"""Exercise, Step and Attempt records.

All models are frozen: the validator never mutates an Attempt in place,
it returns an updated copy.
"""

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ExerciseType(str, enum.Enum):
    FACTORIZATION = "FACTORIZATION"
    DEVELOPMENT = "DEVELOPMENT"
    EQUATION = "EQUATION"


class Category(str, enum.Enum):
    COMMON_FACTOR = "Common Factor"
    IDENTITY = "Special Products"
    DIFF_SQUARES = "Difference of Squares"
    TRINOMIAL = "Trinomials"
    RATIONAL_EQ = "Rational Equations"
    MIX = "Mix"


class Difficulty(str, enum.Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class AttemptStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    SOLVED = "SOLVED"


class Exercise(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: ExerciseType
    category: Category
    title: str
    instruction: str
    # Starting point: an expression, or for EQUATION exercises an
    # equation with exactly one "=".
    expression: str
    # Canonical finished form; for equations always "x = <number>".
    target: str
    difficulty: Difficulty = Difficulty.MEDIUM
    hint: str = ""
    initial_value: Optional[str] = None

    @property
    def is_equation(self) -> bool:
        return self.type is ExerciseType.EQUATION


class Step(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: str
    display: str
    valid: bool
    is_target: bool = False
    message: Optional[str] = None


class Attempt(BaseModel):
    """One learner's pass at one exercise.

    ``draft`` is the editable input buffer: it keeps the last submitted
    text so the learner can refine it, and is cleared once the target is
    reached.
    """

    model_config = ConfigDict(frozen=True)

    exercise: Exercise
    steps: tuple[Step, ...] = ()
    solved: bool = False
    draft: str = ""

    @classmethod
    def start(cls, exercise: Exercise) -> "Attempt":
        return cls(exercise=exercise, draft=exercise.initial_value or "")

    @property
    def status(self) -> AttemptStatus:
        return AttemptStatus.SOLVED if self.solved else AttemptStatus.ACTIVE

    @property
    def last_valid_step(self) -> Optional[Step]:
        for step in reversed(self.steps):
            if step.valid:
                return step
        return None
