"""Pydantic schemas for the assessment queue API."""

from uuid import UUID

from pydantic import BaseModel, Field

from idea_engine.core.assessment.sessions import ReviewSession
from idea_engine.core.schemas_ideas import AssessmentRecord, Idea
from idea_engine.core.scoring import PriorityQuadrant, ScorePreview


class PendingIdeasResponse(BaseModel):
    """Ideas awaiting assessment."""

    ideas: list[Idea] = Field(default_factory=list, description="Submitted, then under-review ideas")
    total: int = Field(..., description="Number of pending ideas")


class SelectIdeaRequest(BaseModel):
    """Request to start assessing an idea."""

    idea_id: str = Field(..., description="Identifier of a pending idea")


class ScoreUpdate(BaseModel):
    """Request to set one dimension's level."""

    level: str = Field(..., description="Score level: low, medium or high")


class RationaleUpdate(BaseModel):
    """Request to set one dimension's rationale."""

    text: str = Field(default="", description="Free-text rationale (may be empty)")


class SubmitAssessmentRequest(BaseModel):
    """Request to submit the current draft."""

    assessed_by: str | None = Field(
        default=None, description="Attribution; defaults to the configured team name"
    )


class SessionOut(BaseModel):
    """Snapshot of a reviewer session."""

    id: UUID
    selected_idea: Idea | None = None
    scores: dict[str, str] = Field(default_factory=dict)
    rationales: dict[str, str] = Field(default_factory=dict)
    complete: bool = False
    missing: list[str] = Field(default_factory=list)
    preview: ScorePreview = Field(default_factory=ScorePreview)
    in_flight: bool = False

    @classmethod
    def from_session(cls, session: ReviewSession) -> "SessionOut":
        draft = session.draft
        return cls(
            id=session.id,
            selected_idea=draft.idea,
            scores={d.value: level.value for d, level in draft.scores.items()},
            rationales={d.value: text for d, text in draft.rationales.items()},
            complete=draft.is_complete(),
            missing=[d.value for d in draft.missing_dimensions()],
            preview=draft.preview(),
            in_flight=session.in_flight,
        )


class ActionResponse(BaseModel):
    """Outcome of a reviewer action, for display as a notification."""

    ok: bool
    message: str
    session: SessionOut
    record: AssessmentRecord | None = None


class ScorecardEvaluateRequest(BaseModel):
    """A complete scorecard to aggregate."""

    scores: dict[str, str] = Field(..., description="Dimension key -> level")


class ScorecardEvaluation(BaseModel):
    """Aggregate scores for a scorecard."""

    value: float
    feasibility: float
    priority: PriorityQuadrant
