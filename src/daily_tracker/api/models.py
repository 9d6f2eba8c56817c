"""Request models for the tracker HTTP API."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, StringConstraints

from daily_tracker.domain.foods import FoodDefinition
from daily_tracker.domain.targets import Targets


class FoodPayload(BaseModel):
    """Food definition as entered by the user."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    def to_definition(self) -> FoodDefinition:
        return FoodDefinition.create(
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )


class AddItemRequest(FoodPayload):
    planned_servings: float | None = 1.0


class ValueRequest(BaseModel):
    value: float


class StepRequest(BaseModel):
    direction: Literal["up", "down"]


class RatioRequest(BaseModel):
    ratio: float = Field(ge=0.0)


class EatenRequest(BaseModel):
    eaten: bool


class TargetsPayload(BaseModel):
    """Daily targets submitted from the targets form."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    def to_targets(self) -> Targets:
        return Targets.create(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )


class ThemeRequest(BaseModel):
    theme: str
