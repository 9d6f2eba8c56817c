"""Derived metrics for a day: consumed totals and progress against targets.

Everything here is a pure function of its inputs.
"""

from daily_tracker.domain.days import Day
from daily_tracker.domain.metrics import DailyReport, MetricProgress, Totals
from daily_tracker.domain.numbers import clamp, round_servings, round_whole
from daily_tracker.domain.targets import Targets

PROGRESS_CAP_PERCENT = 140.0

METRIC_UNITS = {
    "calories": "kcal",
    "protein": "g",
    "carbs": "g",
    "fat": "g",
}


def compute_totals(day: Day) -> Totals:
    """Sum macros weighted by consumed servings, and the planned servings."""
    calories = protein = carbs = fat = planned = 0.0
    for item in day.items:
        ratio = item.consumed_servings
        calories += item.calories * ratio
        protein += item.protein * ratio
        carbs += item.carbs * ratio
        fat += item.fat * ratio
        planned += item.planned_servings
    return Totals(
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        planned_servings_sum=planned,
    )


def progress_percent(value: float, target: float) -> float:
    """Return progress towards a target, capped at 140 percent."""
    if target <= 0:
        return 0.0
    return clamp(value / target * 100, 0.0, PROGRESS_CAP_PERCENT)


def compute_progress(totals: Totals, targets: Targets) -> dict[str, MetricProgress]:
    """Return progress for each tracked metric, keyed by metric name."""
    progress: dict[str, MetricProgress] = {}
    for metric, unit in METRIC_UNITS.items():
        value = getattr(totals, metric)
        target = getattr(targets, metric)
        progress[metric] = MetricProgress(
            value=value,
            target=target,
            percent=progress_percent(value, target),
            unit=unit,
        )
    return progress


def round_totals(totals: Totals) -> Totals:
    """Round totals for display: whole calories, one decimal elsewhere."""
    return Totals(
        calories=round_whole(totals.calories),
        protein=round_servings(totals.protein),
        carbs=round_servings(totals.carbs),
        fat=round_servings(totals.fat),
        planned_servings_sum=round_servings(totals.planned_servings_sum),
    )


def build_report(day: Day, targets: Targets) -> DailyReport:
    """Return display totals and progress for a day."""
    totals = compute_totals(day)
    return DailyReport(
        totals=round_totals(totals),
        progress=compute_progress(totals, targets),
    )
