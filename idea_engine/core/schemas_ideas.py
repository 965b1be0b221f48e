"""Pydantic schemas for ideas and assessment records."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from idea_engine.core.scoring.types import PriorityQuadrant, ScoreDimension, ScoreLevel


class IdeaStatus(str, Enum):
    """Idea lifecycle status."""

    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    ASSESSED = "assessed"
    REJECTED = "rejected"

    @property
    def is_pending(self) -> bool:
        return self in PENDING_STATUSES

    @property
    def is_terminal(self) -> bool:
        return self in (IdeaStatus.ASSESSED, IdeaStatus.REJECTED)

    def can_transition(self, to: "IdeaStatus") -> bool:
        """Whether moving from this status to ``to`` is a forward edge."""
        return to in _TRANSITIONS[self]


# Queried in this order when building the pending list
PENDING_STATUSES: tuple[IdeaStatus, ...] = (IdeaStatus.SUBMITTED, IdeaStatus.UNDER_REVIEW)

_TRANSITIONS: dict[IdeaStatus, frozenset[IdeaStatus]] = {
    IdeaStatus.SUBMITTED: frozenset({IdeaStatus.UNDER_REVIEW, IdeaStatus.REJECTED}),
    IdeaStatus.UNDER_REVIEW: frozenset({IdeaStatus.ASSESSED, IdeaStatus.REJECTED}),
    IdeaStatus.ASSESSED: frozenset(),
    IdeaStatus.REJECTED: frozenset(),
}


class Idea(BaseModel):
    """An idea record as held by the idea store."""

    id: str = Field(..., description="Idea identifier")
    status: IdeaStatus = Field(..., description="Current lifecycle status")
    title: str = Field(..., description="Short idea title")
    description: str = Field(default="", description="What the idea proposes")
    expected_benefits: str | None = Field(default=None, description="Expected benefits")
    ai_capability_area: str | None = Field(default=None, description="AI capability area")
    business_function: str | None = Field(default=None, description="Business function")
    submitter_name: str | None = Field(default=None, description="Who submitted the idea")
    created_at: datetime | None = Field(default=None, description="When the idea was submitted")


class AssessmentRecord(BaseModel):
    """A finalized assessment, submitted once per idea.

    ``assessed_at`` is assigned by the store.
    """

    scores: dict[ScoreDimension, ScoreLevel] = Field(
        ..., description="Level for each of the seven dimensions"
    )
    rationales: dict[ScoreDimension, str] = Field(
        default_factory=dict, description="Optional free-text rationale per dimension"
    )
    assessed_by: str = Field(..., min_length=1, description="Attribution of the assessment")
    value_score: float = Field(..., description="Aggregate Value axis score")
    feasibility_score: float = Field(..., description="Aggregate Feasibility axis score")
    priority: PriorityQuadrant = Field(..., description="Value/Feasibility quadrant")

    @field_validator("assessed_by")
    @classmethod
    def assessed_by_not_blank(cls, v: str) -> str:
        """Ensure attribution is not just whitespace."""
        if not v or not v.strip():
            raise ValueError("assessed_by cannot be empty")
        return v.strip()

    def to_rpc_params(self, idea_id: str) -> dict[str, Any]:
        """Parameters for the store's atomic submit function."""
        return {
            "p_idea_id": idea_id,
            "p_scores": {dim.value: level.value for dim, level in self.scores.items()},
            "p_rationales": {dim.value: text for dim, text in self.rationales.items()},
            "p_assessed_by": self.assessed_by,
            "p_value_score": self.value_score,
            "p_feasibility_score": self.feasibility_score,
            "p_priority": self.priority.value,
        }
