"""Assessment workflow: reviewer sessions, drafts and the queue controller."""

from idea_engine.core.assessment.draft import AssessmentDraft
from idea_engine.core.assessment.results import ActionResult
from idea_engine.core.assessment.sessions import ReviewSession, SessionRegistry
from idea_engine.core.assessment.workflow import AssessmentWorkflow, IdeaStore

__all__ = [
    "ActionResult",
    "AssessmentDraft",
    "AssessmentWorkflow",
    "IdeaStore",
    "ReviewSession",
    "SessionRegistry",
]
