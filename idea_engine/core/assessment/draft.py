"""In-progress assessment draft for one reviewer session."""

from dataclasses import dataclass, field
from typing import Any

from idea_engine.core.schemas_ideas import Idea
from idea_engine.core.scoring import (
    DIMENSIONS,
    ScoreDimension,
    ScoreLevel,
    ScorePreview,
    coerce_dimension,
    coerce_level,
    missing_dimensions,
    preview_scores,
)


@dataclass
class AssessmentDraft:
    """Scores and rationales for the currently selected idea.

    Local mutations always succeed for valid dimensions; unknown dimensions or
    levels raise (they indicate a caller bug, not reviewer input).
    """

    idea: Idea | None = None
    scores: dict[ScoreDimension, ScoreLevel] = field(default_factory=dict)
    rationales: dict[ScoreDimension, str] = field(default_factory=dict)

    def set_score(self, dimension: ScoreDimension | str, level: ScoreLevel | str) -> None:
        self.scores[coerce_dimension(dimension)] = coerce_level(level)

    def set_rationale(self, dimension: ScoreDimension | str, text: str) -> None:
        self.rationales[coerce_dimension(dimension)] = text or ""

    def is_complete(self) -> bool:
        return all(self.scores.get(d) is not None for d in DIMENSIONS)

    def missing_dimensions(self) -> list[ScoreDimension]:
        return missing_dimensions(self.scores)

    def preview(self) -> ScorePreview:
        return preview_scores(self.scores)

    def reset(self) -> None:
        """Clear scores and rationales, keeping the selected idea."""
        self.scores.clear()
        self.rationales.clear()

    def select(self, idea: Idea) -> None:
        """Target a new idea, discarding any unsaved input."""
        self.idea = idea
        self.reset()

    def clear(self) -> None:
        """Drop the selection and all input."""
        self.idea = None
        self.reset()

    def snapshot(self) -> dict[str, Any]:
        return {
            "idea": self.idea,
            "scores": dict(self.scores),
            "rationales": dict(self.rationales),
        }

    def restore(self, snapshot: dict[str, Any]) -> None:
        self.idea = snapshot["idea"]
        self.scores = dict(snapshot["scores"])
        self.rationales = dict(snapshot["rationales"])
