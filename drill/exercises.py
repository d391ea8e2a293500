"""Built-in exercise catalogue and random selection."""

import random
from typing import Optional

from drill.models import Category, Difficulty, Exercise, ExerciseType

EXERCISES: tuple[Exercise, ...] = (
    # ── Common factor ──────────────────────────────────────────────────
    Exercise(
        id="cf1",
        type=ExerciseType.FACTORIZATION,
        category=Category.COMMON_FACTOR,
        title="Simple common factor",
        instruction="Factor the expression by taking out the common factor:",
        expression="(x+3)(2x-5) - (x+3)(x+1)",
        target="(x+3)(x-6)",
        difficulty=Difficulty.MEDIUM,
        hint="The factor (x+3) appears twice. Take it out.",
    ),
    Exercise(
        id="cf2",
        type=ExerciseType.FACTORIZATION,
        category=Category.COMMON_FACTOR,
        title="Hidden factor",
        instruction="Factor, looking for a hidden common factor:",
        expression="(6x+3)(x-2) + (2x+1)(x+5)",
        target="(2x+1)(4x-1)",
        difficulty=Difficulty.HARD,
        hint="Look at (6x+3). Taking out 3 reveals (2x+1).",
    ),
    Exercise(
        id="cf3",
        type=ExerciseType.FACTORIZATION,
        category=Category.COMMON_FACTOR,
        title="Repeated common factor",
        instruction="Factor the following expression:",
        expression="x^2(x-1) + 4x(x-1)",
        target="x(x-1)(x+4)",
        difficulty=Difficulty.MEDIUM,
        hint="Take out (x-1) first, then check whether x is still common.",
    ),

    # ── Special products ───────────────────────────────────────────────
    Exercise(
        id="id1",
        type=ExerciseType.FACTORIZATION,
        category=Category.IDENTITY,
        title="Perfect square",
        instruction="Factor the following expression completely:",
        expression="16x^2 - 24x + 9",
        target="(4x-3)^2",
        difficulty=Difficulty.MEDIUM,
        hint="Look at the coefficients. Is this a² - 2ab + b²?",
    ),
    Exercise(
        id="id2",
        type=ExerciseType.FACTORIZATION,
        category=Category.IDENTITY,
        title="Square of a sum",
        instruction="Factor the expression:",
        expression="x^2 + 10x + 25",
        target="(x+5)^2",
        difficulty=Difficulty.EASY,
        hint="Look for the form a² + 2ab + b².",
    ),
    Exercise(
        id="id3",
        type=ExerciseType.FACTORIZATION,
        category=Category.IDENTITY,
        title="Sum of cubes",
        instruction="Factor (sum of cubes):",
        expression="64x^3 + 27",
        target="(4x+3)(16x^2-12x+9)",
        difficulty=Difficulty.HARD,
        hint="a³ + b³ = (a+b)(a²-ab+b²). Here a = 4x and b = 3.",
    ),
    Exercise(
        id="id4",
        type=ExerciseType.DEVELOPMENT,
        category=Category.IDENTITY,
        title="Expand a square",
        instruction="Expand and simplify:",
        expression="(2x+3)^2",
        target="4x^2 + 12x + 9",
        difficulty=Difficulty.EASY,
        hint="(a+b)² = a² + 2ab + b².",
    ),

    # ── Difference of squares ──────────────────────────────────────────
    Exercise(
        id="ds1",
        type=ExerciseType.FACTORIZATION,
        category=Category.DIFF_SQUARES,
        title="Difference of two binomial squares",
        instruction="Factor (difference of squares):",
        expression="(3x+4)^2 - (2x-1)^2",
        target="(5x+3)(x+5)",
        difficulty=Difficulty.HARD,
        hint="Use a² - b² = (a+b)(a-b) with a = (3x+4) and b = (2x-1).",
    ),
    Exercise(
        id="ds2",
        type=ExerciseType.FACTORIZATION,
        category=Category.DIFF_SQUARES,
        title="Simple difference of squares",
        instruction="Factor:",
        expression="25x^2 - 49",
        target="(5x-7)(5x+7)",
        difficulty=Difficulty.EASY,
        hint="a² - b² = (a-b)(a+b)",
    ),
    Exercise(
        id="ds3",
        type=ExerciseType.FACTORIZATION,
        category=Category.DIFF_SQUARES,
        title="Difference of squares with a factor",
        instruction="Factor completely:",
        expression="2x^2 - 18",
        target="2(x-3)(x+3)",
        difficulty=Difficulty.MEDIUM,
        hint="Start by taking out 2.",
    ),

    # ── Trinomials ─────────────────────────────────────────────────────
    Exercise(
        id="tr1",
        type=ExerciseType.FACTORIZATION,
        category=Category.TRINOMIAL,
        title="Monic trinomial",
        instruction="Factor this trinomial:",
        expression="x^2 - 7x + 12",
        target="(x-3)(x-4)",
        difficulty=Difficulty.MEDIUM,
        hint="Find two numbers whose product is 12 and whose sum is -7.",
    ),
    Exercise(
        id="tr2",
        type=ExerciseType.FACTORIZATION,
        category=Category.TRINOMIAL,
        title="Non-monic trinomial",
        instruction="Factor:",
        expression="2x^2 + 7x + 3",
        target="(2x+1)(x+3)",
        difficulty=Difficulty.HARD,
        hint="Find two numbers whose product is 6 (2·3) and whose sum is 7.",
    ),

    # ── Rational equations ─────────────────────────────────────────────
    Exercise(
        id="re1",
        type=ExerciseType.EQUATION,
        category=Category.RATIONAL_EQ,
        title="Rational equation",
        instruction="Solve the following equation.",
        expression="2/(x-3) - 4/(x^2-9) = 1/(x+3)",
        initial_value="2/(x-3) - 4/(x^2-9) = 1/(x+3)",
        target="x=-5",
        difficulty=Difficulty.HARD,
        hint="Factor x²-9 as (x-3)(x+3), then put everything over a common denominator.",
    ),
    Exercise(
        id="re2",
        type=ExerciseType.EQUATION,
        category=Category.RATIONAL_EQ,
        title="Simple rational equation",
        instruction="Solve the equation:",
        expression="1/(x+1) = 2",
        initial_value="1/(x+1) = 2",
        target="x=-0.5",
        difficulty=Difficulty.MEDIUM,
        hint="Multiply both sides by (x+1).",
    ),
)

_BY_ID = {exercise.id: exercise for exercise in EXERCISES}


def get_exercise(exercise_id: str) -> Exercise:
    """Return the exercise with *exercise_id*; raises KeyError if unknown."""
    return _BY_ID[exercise_id]


def exercises_in(category: Category) -> list[Exercise]:
    """All exercises in *category*; ``Category.MIX`` means the whole catalogue."""
    if category is Category.MIX:
        return list(EXERCISES)
    return [ex for ex in EXERCISES if ex.category is category]


def pick_random_exercise(category: Category, current: Optional[Exercise] = None,
                         rng: random.Random | None = None) -> Exercise:
    """Pick a random exercise from *category*, avoiding *current* when possible."""
    rng = rng or random
    pool = exercises_in(category) or list(EXERCISES)
    idx = rng.randrange(len(pool))
    if current is not None and len(pool) > 1 and pool[idx].id == current.id:
        return pool[(idx + 1) % len(pool)]
    return pool[idx]
