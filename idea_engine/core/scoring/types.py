"""Types for the Value/Feasibility scoring model."""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# Axes and dimensions
# =============================================================================


class Axis(str, Enum):
    """The two aggregate axes an idea is scored on."""

    VALUE = "value"
    FEASIBILITY = "feasibility"


class ScoreDimension(str, Enum):
    """The seven required assessment dimensions.

    Values match the keys persisted in assessment records.
    """

    BUSINESS_GROWTH = "businessGrowth"
    COST_EFFICIENCY = "costEfficiency"
    BUSINESS_RESILIENCE = "businessResilience"
    BUSINESS_AGILITY = "businessAgility"
    TECHNICAL_FEASIBILITY = "technicalFeasibility"
    INTERNAL_READINESS = "internalReadiness"
    EXTERNAL_READINESS = "externalReadiness"

    @property
    def axis(self) -> Axis:
        return DIMENSION_AXIS[self]

    @property
    def label(self) -> str:
        return DIMENSION_LABELS[self]


class ScoreLevel(str, Enum):
    """Ordered discrete rating shared by every dimension."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def points(self) -> int:
        return LEVEL_POINTS[self]


class PriorityQuadrant(str, Enum):
    """Where an idea lands on the Value/Feasibility matrix."""

    QUICK_WIN = "quick_win"  # high value, high feasibility
    STRATEGIC_BET = "strategic_bet"  # high value, low feasibility
    FILL_IN = "fill_in"  # low value, high feasibility
    DEPRIORITIZE = "deprioritize"  # low value, low feasibility


# =============================================================================
# Canonical tables
# =============================================================================

# Canonical order; Value dimensions first
DIMENSIONS: tuple[ScoreDimension, ...] = tuple(ScoreDimension)

AXIS_DIMENSIONS: dict[Axis, tuple[ScoreDimension, ...]] = {
    Axis.VALUE: (
        ScoreDimension.BUSINESS_GROWTH,
        ScoreDimension.COST_EFFICIENCY,
        ScoreDimension.BUSINESS_RESILIENCE,
        ScoreDimension.BUSINESS_AGILITY,
    ),
    Axis.FEASIBILITY: (
        ScoreDimension.TECHNICAL_FEASIBILITY,
        ScoreDimension.INTERNAL_READINESS,
        ScoreDimension.EXTERNAL_READINESS,
    ),
}

DIMENSION_AXIS: dict[ScoreDimension, Axis] = {
    dim: axis for axis, dims in AXIS_DIMENSIONS.items() for dim in dims
}

DIMENSION_LABELS: dict[ScoreDimension, str] = {
    ScoreDimension.BUSINESS_GROWTH: "Business Growth",
    ScoreDimension.COST_EFFICIENCY: "Cost Efficiency",
    ScoreDimension.BUSINESS_RESILIENCE: "Business Resilience",
    ScoreDimension.BUSINESS_AGILITY: "Business Agility",
    ScoreDimension.TECHNICAL_FEASIBILITY: "Technical Feasibility",
    ScoreDimension.INTERNAL_READINESS: "Internal Readiness",
    ScoreDimension.EXTERNAL_READINESS: "External Readiness",
}

LEVEL_POINTS: dict[ScoreLevel, int] = {
    ScoreLevel.LOW: 1,
    ScoreLevel.MEDIUM: 2,
    ScoreLevel.HIGH: 3,
}

# Axis scores at or above this count as "high" when classifying priority
PRIORITY_THRESHOLD = float(LEVEL_POINTS[ScoreLevel.MEDIUM])


# =============================================================================
# Results
# =============================================================================


class AxisScores(BaseModel):
    """Aggregate Value and Feasibility scores for a complete scorecard."""

    value: float = Field(..., ge=1, le=3, description="Mean points of the Value dimensions")
    feasibility: float = Field(
        ..., ge=1, le=3, description="Mean points of the Feasibility dimensions"
    )


class ScorePreview(BaseModel):
    """Partial axis means while a draft is still being filled in."""

    value: float | None = Field(None, description="Mean over scored Value dimensions")
    feasibility: float | None = Field(
        None, description="Mean over scored Feasibility dimensions"
    )
    scored: int = Field(0, ge=0, le=7, description="Number of dimensions scored")
    complete: bool = Field(False, description="Whether all seven dimensions are scored")
