"""Domain models for library foods and the food lines of a day."""

from dataclasses import dataclass

from daily_tracker.domain.numbers import to_non_negative


@dataclass(frozen=True)
class FoodDefinition:
    """Reusable food with per-serving macros."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        name: object,
        calories: object = 0.0,
        protein: object = 0.0,
        carbs: object = 0.0,
        fat: object = 0.0,
    ) -> "FoodDefinition":
        """Build a definition from loosely typed input."""
        return cls(
            name=str(name or "").strip(),
            calories=to_non_negative(calories),
            protein=to_non_negative(protein),
            carbs=to_non_negative(carbs),
            fat=to_non_negative(fat),
        )

    def matches(self, name: str) -> bool:
        """Return True when the name is equal ignoring case."""
        return self.name.casefold() == name.strip().casefold()


@dataclass(frozen=True)
class FoodInstance:
    """A food line on a specific day with its own planned/consumed servings."""

    id: str
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    planned_servings: float = 1.0
    consumed_servings: float = 0.0

    @classmethod
    def from_definition(
        cls,
        item_id: str,
        entry: FoodDefinition,
        planned_servings: float = 1.0,
    ) -> "FoodInstance":
        """Copy a definition's macros into a new line."""
        return cls(
            id=item_id,
            name=entry.name,
            calories=entry.calories,
            protein=entry.protein,
            carbs=entry.carbs,
            fat=entry.fat,
            planned_servings=planned_servings,
            consumed_servings=0.0,
        )

    def definition(self) -> FoodDefinition:
        """Return the per-serving definition this line was built from."""
        return FoodDefinition(
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )
