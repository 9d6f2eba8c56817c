"""Domain models for derived day metrics."""

from dataclasses import dataclass

from daily_tracker.domain.numbers import round_servings


@dataclass(frozen=True)
class Totals:
    """Consumed macro sums for a day plus the planned serving count."""

    calories: float
    protein: float
    carbs: float
    fat: float
    planned_servings_sum: float


@dataclass(frozen=True)
class MetricProgress:
    """Progress of one metric against its target."""

    value: float
    target: float
    percent: float
    unit: str

    @property
    def label(self) -> str:
        """Render the progress as shown next to a progress bar."""
        value = _format(round_servings(self.value))
        return f"{value} / {_format(self.target)} {self.unit}"


@dataclass(frozen=True)
class DailyReport:
    """Display-ready totals and per-metric progress."""

    totals: Totals
    progress: dict[str, MetricProgress]


def _format(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
