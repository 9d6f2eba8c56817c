"""Domain model for reusable day templates."""

from dataclasses import dataclass

from daily_tracker.domain.foods import FoodDefinition


@dataclass(frozen=True)
class TemplateEntry:
    """Composition snapshot of one food line, without consumption."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    planned_servings: float

    def definition(self) -> FoodDefinition:
        return FoodDefinition(
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )
