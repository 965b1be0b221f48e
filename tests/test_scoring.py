"""Tests for idea_engine.core.scoring: pure aggregation over the seven dimensions."""

from itertools import product

import pytest

from idea_engine.core.errors import (
    IllegalDimensionError,
    IllegalScoreLevelError,
    IncompleteScorecardError,
)
from idea_engine.core.scoring import (
    AXIS_DIMENSIONS,
    DIMENSIONS,
    Axis,
    AxisScores,
    PriorityQuadrant,
    ScoreDimension,
    ScoreLevel,
    classify_priority,
    coerce_dimension,
    coerce_level,
    compute_axis_scores,
    missing_dimensions,
    preview_scores,
)


def _scorecard(default: ScoreLevel = ScoreLevel.MEDIUM, **overrides: ScoreLevel) -> dict:
    scores = {d: default for d in DIMENSIONS}
    for key, level in overrides.items():
        scores[coerce_dimension(key)] = level
    return scores


# =============================================================================
# Dimension tables
# =============================================================================


class TestDimensionTables:
    def test_seven_dimensions(self):
        assert len(DIMENSIONS) == 7

    def test_axis_membership(self):
        assert len(AXIS_DIMENSIONS[Axis.VALUE]) == 4
        assert len(AXIS_DIMENSIONS[Axis.FEASIBILITY]) == 3
        assert set(AXIS_DIMENSIONS[Axis.VALUE]) | set(AXIS_DIMENSIONS[Axis.FEASIBILITY]) == set(
            DIMENSIONS
        )

    def test_dimension_properties(self):
        assert ScoreDimension.COST_EFFICIENCY.axis == Axis.VALUE
        assert ScoreDimension.EXTERNAL_READINESS.axis == Axis.FEASIBILITY
        assert ScoreDimension.TECHNICAL_FEASIBILITY.label == "Technical Feasibility"

    def test_levels_are_ordered(self):
        assert ScoreLevel.LOW.points < ScoreLevel.MEDIUM.points < ScoreLevel.HIGH.points


# =============================================================================
# Coercion
# =============================================================================


class TestCoercion:
    @pytest.mark.parametrize("key", ["businessGrowth", "BUSINESS_GROWTH", "business_growth"])
    def test_dimension_aliases(self, key):
        assert coerce_dimension(key) == ScoreDimension.BUSINESS_GROWTH

    @pytest.mark.parametrize("key", ["marketSize", "", None, 3])
    def test_unknown_dimension_rejected(self, key):
        with pytest.raises(IllegalDimensionError):
            coerce_dimension(key)

    def test_level_case_insensitive(self):
        assert coerce_level("High") == ScoreLevel.HIGH
        assert coerce_level(ScoreLevel.LOW) == ScoreLevel.LOW

    @pytest.mark.parametrize("level", ["very high", 2, None])
    def test_unknown_level_rejected(self, level):
        with pytest.raises(IllegalScoreLevelError):
            coerce_level(level)


# =============================================================================
# Aggregation
# =============================================================================


class TestComputeAxisScores:
    def test_mean_of_points(self):
        scores = _scorecard(
            businessGrowth=ScoreLevel.HIGH,
            costEfficiency=ScoreLevel.MEDIUM,
            businessResilience=ScoreLevel.HIGH,
            businessAgility=ScoreLevel.MEDIUM,
            technicalFeasibility=ScoreLevel.HIGH,
            internalReadiness=ScoreLevel.MEDIUM,
            externalReadiness=ScoreLevel.HIGH,
        )

        result = compute_axis_scores(scores)

        assert result.value == 2.5
        assert result.feasibility == 2.67

    def test_extremes(self):
        assert compute_axis_scores(_scorecard(ScoreLevel.LOW)) == AxisScores(value=1, feasibility=1)
        assert compute_axis_scores(_scorecard(ScoreLevel.HIGH)) == AxisScores(value=3, feasibility=3)

    def test_incomplete_scorecard_raises(self):
        scores = _scorecard()
        del scores[ScoreDimension.INTERNAL_READINESS]

        with pytest.raises(IncompleteScorecardError) as exc_info:
            compute_axis_scores(scores)

        assert exc_info.value.missing == [ScoreDimension.INTERNAL_READINESS]

    def test_deterministic(self):
        scores = _scorecard(businessAgility=ScoreLevel.LOW)
        assert compute_axis_scores(scores) == compute_axis_scores(dict(reversed(scores.items())))

    @pytest.mark.parametrize("dimension", list(ScoreDimension))
    def test_raising_one_level_never_lowers_its_axis(self, dimension):
        levels = list(ScoreLevel)
        for base in levels:
            for lower, higher in product(levels, levels):
                if higher.points < lower.points:
                    continue
                before = compute_axis_scores(_scorecard(base, **{dimension.value: lower}))
                after = compute_axis_scores(_scorecard(base, **{dimension.value: higher}))
                field = dimension.axis.value
                assert getattr(after, field) >= getattr(before, field)


class TestMissingAndPreview:
    def test_missing_in_canonical_order(self):
        scores = {ScoreDimension.COST_EFFICIENCY: ScoreLevel.LOW}
        missing = missing_dimensions(scores)
        assert missing[0] == ScoreDimension.BUSINESS_GROWTH
        assert ScoreDimension.COST_EFFICIENCY not in missing
        assert len(missing) == 6

    def test_preview_partial(self):
        preview = preview_scores(
            {
                ScoreDimension.BUSINESS_GROWTH: ScoreLevel.HIGH,
                ScoreDimension.COST_EFFICIENCY: ScoreLevel.LOW,
            }
        )
        assert preview.value == 2.0
        assert preview.feasibility is None
        assert preview.scored == 2
        assert preview.complete is False

    def test_preview_empty(self):
        preview = preview_scores({})
        assert preview.value is None
        assert preview.feasibility is None
        assert preview.scored == 0


class TestClassifyPriority:
    @pytest.mark.parametrize(
        "value,feasibility,expected",
        [
            (3.0, 3.0, PriorityQuadrant.QUICK_WIN),
            (2.0, 2.0, PriorityQuadrant.QUICK_WIN),
            (2.5, 1.67, PriorityQuadrant.STRATEGIC_BET),
            (1.75, 2.33, PriorityQuadrant.FILL_IN),
            (1.0, 1.0, PriorityQuadrant.DEPRIORITIZE),
        ],
    )
    def test_quadrants(self, value, feasibility, expected):
        assert classify_priority(AxisScores(value=value, feasibility=feasibility)) == expected
