"""Value/Feasibility aggregation.

Each axis score is the mean of its dimensions' level points (1-3). The mean is
monotonic in every dimension, so raising one level never lowers its axis.
All functions here are pure.
"""

from collections.abc import Mapping
from typing import Any

from idea_engine.core.errors import (
    IllegalDimensionError,
    IllegalScoreLevelError,
    IncompleteScorecardError,
)
from idea_engine.core.scoring.types import (
    AXIS_DIMENSIONS,
    DIMENSIONS,
    PRIORITY_THRESHOLD,
    Axis,
    AxisScores,
    PriorityQuadrant,
    ScoreDimension,
    ScoreLevel,
    ScorePreview,
)

# Accept both the persisted key ("businessGrowth") and the member name
# in either case ("BUSINESS_GROWTH", "business_growth")
_DIMENSION_LOOKUP: dict[str, ScoreDimension] = {
    **{d.value: d for d in ScoreDimension},
    **{d.name: d for d in ScoreDimension},
    **{d.name.lower(): d for d in ScoreDimension},
}


def coerce_dimension(value: Any) -> ScoreDimension:
    """
    Resolve a dimension key to a ScoreDimension.

    Raises:
        IllegalDimensionError: If the value is not one of the seven dimensions
    """
    if isinstance(value, ScoreDimension):
        return value
    if isinstance(value, str) and value in _DIMENSION_LOOKUP:
        return _DIMENSION_LOOKUP[value]
    raise IllegalDimensionError(f"Unknown assessment dimension: {value!r}")


def coerce_level(value: Any) -> ScoreLevel:
    """
    Resolve a level key to a ScoreLevel (case-insensitive).

    Raises:
        IllegalScoreLevelError: If the value is not a known level
    """
    if isinstance(value, ScoreLevel):
        return value
    if isinstance(value, str):
        try:
            return ScoreLevel(value.lower())
        except ValueError:
            pass
    raise IllegalScoreLevelError(f"Unknown score level: {value!r}")


def missing_dimensions(scores: Mapping[ScoreDimension, ScoreLevel]) -> list[ScoreDimension]:
    """Dimensions without a score, in canonical order."""
    return [d for d in DIMENSIONS if scores.get(d) is None]


def _axis_mean(scores: Mapping[ScoreDimension, ScoreLevel], axis: Axis) -> float | None:
    points = [scores[d].points for d in AXIS_DIMENSIONS[axis] if scores.get(d) is not None]
    if not points:
        return None
    return round(sum(points) / len(points), 2)


def compute_axis_scores(scores: Mapping[ScoreDimension, ScoreLevel]) -> AxisScores:
    """
    Aggregate a complete scorecard into Value and Feasibility scores.

    Args:
        scores: Mapping with a level for every one of the seven dimensions

    Returns:
        AxisScores on the 1.0-3.0 scale

    Raises:
        IncompleteScorecardError: If any dimension is unscored
    """
    missing = missing_dimensions(scores)
    if missing:
        raise IncompleteScorecardError(missing)

    return AxisScores(
        value=_axis_mean(scores, Axis.VALUE),
        feasibility=_axis_mean(scores, Axis.FEASIBILITY),
    )


def classify_priority(axis_scores: AxisScores) -> PriorityQuadrant:
    """Place an idea on the Value/Feasibility matrix (threshold inclusive)."""
    high_value = axis_scores.value >= PRIORITY_THRESHOLD
    high_feasibility = axis_scores.feasibility >= PRIORITY_THRESHOLD

    if high_value and high_feasibility:
        return PriorityQuadrant.QUICK_WIN
    if high_value:
        return PriorityQuadrant.STRATEGIC_BET
    if high_feasibility:
        return PriorityQuadrant.FILL_IN
    return PriorityQuadrant.DEPRIORITIZE


def preview_scores(scores: Mapping[ScoreDimension, ScoreLevel]) -> ScorePreview:
    """Partial axis means for a scorecard still being filled in."""
    scored = len(DIMENSIONS) - len(missing_dimensions(scores))
    return ScorePreview(
        value=_axis_mean(scores, Axis.VALUE),
        feasibility=_axis_mean(scores, Axis.FEASIBILITY),
        scored=scored,
        complete=scored == len(DIMENSIONS),
    )
