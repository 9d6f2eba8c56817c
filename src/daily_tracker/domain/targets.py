"""Domain model for daily nutrition targets."""

from dataclasses import dataclass

from daily_tracker.domain.numbers import to_non_negative


@dataclass(frozen=True)
class Targets:
    """Daily goals for calories and the tracked macros."""

    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def create(
        cls,
        calories: object = 0.0,
        protein: object = 0.0,
        carbs: object = 0.0,
        fat: object = 0.0,
    ) -> "Targets":
        """Build targets, coercing invalid values to zero."""
        return cls(
            calories=to_non_negative(calories),
            protein=to_non_negative(protein),
            carbs=to_non_negative(carbs),
            fat=to_non_negative(fat),
        )


DEFAULT_TARGETS = Targets(calories=2000, protein=160, carbs=165, fat=41)
