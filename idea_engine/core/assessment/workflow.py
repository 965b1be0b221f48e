"""Assessment workflow controller.

Drives an idea through the review queue:

    submitted --[select_idea]--> under_review --[submit_assessment]--> assessed

Local draft edits are synchronous. Each store call is a single suspend point
whose outcome is reported as an ActionResult; only a successful store call
clears the draft or refreshes the pending list.
"""

import logging
from typing import Any, Protocol

from idea_engine.core.assessment.results import ActionResult
from idea_engine.core.assessment.sessions import ReviewSession
from idea_engine.core.errors import (
    StatusConflictError,
    StoreError,
    SubmissionError,
    ValidationError,
)
from idea_engine.core.logging import get_logger, log_with_context
from idea_engine.core.schemas_ideas import PENDING_STATUSES, AssessmentRecord, Idea, IdeaStatus
from idea_engine.core.scoring import (
    ScoreDimension,
    ScoreLevel,
    classify_priority,
    compute_axis_scores,
)

logger = get_logger(__name__)


class IdeaStore(Protocol):
    """Operations the workflow consumes from the idea store."""

    def query_by_status(self, status: IdeaStatus) -> list[Idea]: ...

    def update_status(self, idea_id: str, new_status: IdeaStatus) -> Idea: ...

    def submit_assessment(self, idea_id: str, record: AssessmentRecord) -> dict[str, Any]: ...


class AssessmentWorkflow:
    """Orchestrates selection, drafting and submission for reviewer sessions."""

    def __init__(self, store: IdeaStore, default_assessed_by: str | None = None):
        self.store = store
        self._default_assessed_by = default_assessed_by

    @property
    def default_assessed_by(self) -> str:
        if self._default_assessed_by is None:
            from idea_engine.core.config import get_settings

            self._default_assessed_by = get_settings().DEFAULT_ASSESSED_BY
        return self._default_assessed_by

    # ==========================================================================
    # Queue
    # ==========================================================================

    def list_pending(self, session: ReviewSession | None = None) -> ActionResult:
        """
        Query ideas awaiting assessment (submitted, then under review).

        Args:
            session: Optional session whose cached pending list is replaced on success

        Returns:
            ActionResult with the list of pending ideas as ``data``
        """
        try:
            pending: list[Idea] = []
            for status in PENDING_STATUSES:
                pending.extend(self.store.query_by_status(status))
        except Exception as e:
            logger.error(f"Failed to load pending ideas: {e}")
            return ActionResult.failure(StoreError(f"Failed to load pending ideas: {e}"))

        if session is not None:
            session.pending = pending

        logger.debug(f"Loaded {len(pending)} pending ideas")
        return ActionResult.success(f"{len(pending)} pending", data=pending)

    # ==========================================================================
    # Selection
    # ==========================================================================

    def select_idea(self, session: ReviewSession, idea: Idea) -> ActionResult:
        """
        Start assessing an idea, moving it to under_review if it is new.

        Re-selecting an idea already under review performs no store write.
        On store failure the session's previous draft is restored.
        """
        if session.in_flight:
            return self._refuse(session, "Another action is still in progress")
        if idea.status.is_terminal:
            return self._refuse(
                session, f"Idea '{idea.title}' is already {idea.status.value}", idea_id=idea.id
            )

        previous = session.draft.snapshot()
        session.draft.select(idea)

        if idea.status != IdeaStatus.SUBMITTED:
            log_with_context(
                logger, logging.INFO, "Selected idea already under review",
                session_id=session.id, idea_id=idea.id,
            )
            return ActionResult.success(f"Assessing '{idea.title}'", data=idea)

        session.in_flight = True
        try:
            updated = self.store.update_status(idea.id, IdeaStatus.UNDER_REVIEW)
        except StatusConflictError as e:
            if e.actual != IdeaStatus.UNDER_REVIEW.value:
                # Moved past review elsewhere (assessed or rejected)
                session.draft.restore(previous)
                log_with_context(
                    logger, logging.WARNING, f"Idea can no longer be reviewed: {e}",
                    session_id=session.id, idea_id=idea.id,
                )
                return ActionResult.failure(
                    ValidationError(f"Idea '{idea.title}' is already {e.actual or 'closed'}")
                )
            # Another reviewer started the review first; not an error for this session
            log_with_context(
                logger, logging.INFO, f"Status update was a no-op: {e}",
                session_id=session.id, idea_id=idea.id,
            )
            updated = idea.model_copy(update={"status": IdeaStatus.UNDER_REVIEW})
        except Exception as e:
            session.draft.restore(previous)
            logger.error(
                f"Failed to mark idea {idea.id} under review: {e}",
                extra={"session_id": str(session.id), "idea_id": idea.id},
            )
            return ActionResult.failure(
                SubmissionError(f"Failed to start review of '{idea.title}': {e}")
            )
        finally:
            session.in_flight = False

        session.draft.idea = updated
        log_with_context(
            logger, logging.INFO, "Idea moved to under_review",
            session_id=session.id, idea_id=idea.id,
        )

        self.list_pending(session)
        return ActionResult.success(f"Assessing '{idea.title}'", data=updated)

    def cancel_selection(self, session: ReviewSession) -> ActionResult:
        """Drop the selection and draft. The idea stays under_review."""
        if session.in_flight:
            return self._refuse(session, "Another action is still in progress")

        idea = session.draft.idea
        session.draft.clear()
        if idea is not None:
            log_with_context(
                logger, logging.INFO, "Selection cancelled",
                session_id=session.id, idea_id=idea.id,
            )
        return ActionResult.success("Selection cleared")

    # ==========================================================================
    # Draft edits
    # ==========================================================================

    def set_score(
        self,
        session: ReviewSession,
        dimension: ScoreDimension | str,
        level: ScoreLevel | str,
    ) -> ActionResult:
        """Record a level for one dimension. Unknown dimensions or levels raise."""
        refused = self._check_editable(session)
        if refused:
            return refused
        session.draft.set_score(dimension, level)
        return ActionResult.success("Score updated", data=session.draft.preview())

    def set_rationale(
        self,
        session: ReviewSession,
        dimension: ScoreDimension | str,
        text: str,
    ) -> ActionResult:
        """Record free-text rationale for one dimension. Unknown dimensions raise."""
        refused = self._check_editable(session)
        if refused:
            return refused
        session.draft.set_rationale(dimension, text)
        return ActionResult.success("Rationale updated")

    # ==========================================================================
    # Submission
    # ==========================================================================

    def submit_assessment(
        self,
        session: ReviewSession,
        attribution: str | None = None,
    ) -> ActionResult:
        """
        Submit the draft as the selected idea's assessment.

        Args:
            session: Reviewer session holding the draft
            attribution: assessed_by value (defaults to the configured team name)

        Returns:
            ActionResult with the submitted AssessmentRecord as ``data`` on success.
            ValidationError results never reach the store. SubmissionError
            results leave the draft untouched so the reviewer can retry.
        """
        if session.in_flight:
            return self._refuse(session, "A submission is already in progress")

        draft = session.draft
        idea = draft.idea
        if idea is None:
            return self._refuse(session, "No idea selected")
        if not draft.is_complete():
            missing = ", ".join(d.label for d in draft.missing_dimensions())
            return self._refuse(
                session,
                f"Please score all dimensions before submitting (missing: {missing})",
                idea_id=idea.id,
            )

        record = self.build_record(session, attribution)

        session.in_flight = True
        try:
            self.store.submit_assessment(idea.id, record)
        except Exception as e:
            logger.error(
                f"Failed to submit assessment for idea {idea.id}: {e}",
                extra={"session_id": str(session.id), "idea_id": idea.id},
            )
            return ActionResult.failure(SubmissionError(f"Failed to submit assessment: {e}"))
        finally:
            session.in_flight = False

        log_with_context(
            logger, logging.INFO, "Assessment submitted",
            session_id=session.id, idea_id=idea.id,
            value=record.value_score, feasibility=record.feasibility_score,
            priority=record.priority.value,
        )

        draft.clear()
        self.list_pending(session)
        return ActionResult.success(f'"{idea.title}" has been assessed!', data=record)

    def build_record(self, session: ReviewSession, attribution: str | None = None) -> AssessmentRecord:
        """Build the assessment record for a complete draft."""
        draft = session.draft
        axis_scores = compute_axis_scores(draft.scores)
        return AssessmentRecord(
            scores=dict(draft.scores),
            rationales=dict(draft.rationales),
            assessed_by=(attribution or "").strip() or self.default_assessed_by,
            value_score=axis_scores.value,
            feasibility_score=axis_scores.feasibility,
            priority=classify_priority(axis_scores),
        )

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _check_editable(self, session: ReviewSession) -> ActionResult | None:
        if session.in_flight:
            return self._refuse(session, "Another action is still in progress")
        if session.draft.idea is None:
            return self._refuse(session, "No idea selected")
        return None

    def _refuse(self, session: ReviewSession, message: str, **context: Any) -> ActionResult:
        log_with_context(logger, logging.WARNING, message, session_id=session.id, **context)
        return ActionResult.failure(ValidationError(message))
