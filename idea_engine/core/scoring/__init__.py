"""Value/Feasibility scoring model.

Seven dimensions rated on a shared low/medium/high scale:
- Value (4): business growth, cost efficiency, business resilience, business agility
- Feasibility (3): technical feasibility, internal readiness, external readiness

Usage:
    from idea_engine.core.scoring import compute_axis_scores, classify_priority

    axes = compute_axis_scores(scores)
    print(f"{axes.value}/{axes.feasibility} -> {classify_priority(axes).value}")
"""

from idea_engine.core.scoring.score import (
    classify_priority,
    coerce_dimension,
    coerce_level,
    compute_axis_scores,
    missing_dimensions,
    preview_scores,
)
from idea_engine.core.scoring.types import (
    AXIS_DIMENSIONS,
    DIMENSION_AXIS,
    DIMENSION_LABELS,
    DIMENSIONS,
    PRIORITY_THRESHOLD,
    Axis,
    AxisScores,
    PriorityQuadrant,
    ScoreDimension,
    ScoreLevel,
    ScorePreview,
)

__all__ = [
    "classify_priority",
    "coerce_dimension",
    "coerce_level",
    "compute_axis_scores",
    "missing_dimensions",
    "preview_scores",
    "AXIS_DIMENSIONS",
    "DIMENSION_AXIS",
    "DIMENSION_LABELS",
    "DIMENSIONS",
    "PRIORITY_THRESHOLD",
    "Axis",
    "AxisScores",
    "PriorityQuadrant",
    "ScoreDimension",
    "ScoreLevel",
    "ScorePreview",
]
