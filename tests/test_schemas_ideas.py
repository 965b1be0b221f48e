"""Tests for idea and assessment record schemas."""

import pydantic
import pytest

from idea_engine.core.schemas_ideas import AssessmentRecord, IdeaStatus
from idea_engine.core.scoring import DIMENSIONS, PriorityQuadrant, ScoreLevel


def _record(assessed_by: str) -> AssessmentRecord:
    return AssessmentRecord(
        scores={d: ScoreLevel.HIGH for d in DIMENSIONS},
        assessed_by=assessed_by,
        value_score=3.0,
        feasibility_score=3.0,
        priority=PriorityQuadrant.QUICK_WIN,
    )


class TestAssessmentRecord:
    def test_assessed_by_is_stripped(self):
        assert _record("  Innovation Board ").assessed_by == "Innovation Board"

    @pytest.mark.parametrize("assessed_by", ["", "   ", "\t\n"])
    def test_blank_assessed_by_rejected(self, assessed_by):
        with pytest.raises(pydantic.ValidationError):
            _record(assessed_by)

    def test_rpc_params_use_persisted_keys(self):
        params = _record("Assessment Team").to_rpc_params("i-1")

        assert params["p_scores"]["technicalFeasibility"] == "high"
        assert params["p_assessed_by"] == "Assessment Team"


class TestIdeaStatus:
    def test_forward_edges_only(self):
        assert IdeaStatus.SUBMITTED.can_transition(IdeaStatus.UNDER_REVIEW)
        assert IdeaStatus.UNDER_REVIEW.can_transition(IdeaStatus.ASSESSED)
        assert not IdeaStatus.UNDER_REVIEW.can_transition(IdeaStatus.SUBMITTED)
        assert not IdeaStatus.UNDER_REVIEW.can_transition(IdeaStatus.UNDER_REVIEW)
        assert not IdeaStatus.ASSESSED.can_transition(IdeaStatus.UNDER_REVIEW)

    def test_pending_and_terminal(self):
        assert IdeaStatus.SUBMITTED.is_pending
        assert IdeaStatus.UNDER_REVIEW.is_pending
        assert IdeaStatus.ASSESSED.is_terminal
        assert IdeaStatus.REJECTED.is_terminal
        assert not IdeaStatus.REJECTED.is_pending
