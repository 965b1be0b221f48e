"""Reviewer sessions: one draft per in-progress review."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from idea_engine.core.assessment.draft import AssessmentDraft
from idea_engine.core.schemas_ideas import Idea

# Sessions untouched for this long are dropped, unsaved drafts included
DEFAULT_SESSION_IDLE_SECONDS = 8 * 60 * 60


@dataclass
class ReviewSession:
    """State owned by a single reviewer.

    ``in_flight`` is set while a store call made on behalf of this session is
    outstanding; select and submit are refused until it clears.
    """

    id: UUID = field(default_factory=uuid4)
    draft: AssessmentDraft = field(default_factory=AssessmentDraft)
    pending: list[Idea] = field(default_factory=list)
    in_flight: bool = False
    last_touched: float = 0.0

    @property
    def selected_idea(self) -> Idea | None:
        return self.draft.idea


class SessionRegistry:
    """Process-local registry of reviewer sessions with idle eviction."""

    def __init__(
        self,
        max_idle_seconds: float = DEFAULT_SESSION_IDLE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._sessions: dict[UUID, ReviewSession] = {}
        self.max_idle_seconds = max_idle_seconds
        self._clock = clock

    def create(self) -> ReviewSession:
        self.prune()
        session = ReviewSession(last_touched=self._clock())
        self._sessions[session.id] = session
        return session

    def get(self, session_id: UUID) -> ReviewSession | None:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        now = self._clock()
        if self._is_expired(session, now):
            del self._sessions[session_id]
            return None
        session.last_touched = now
        return session

    def discard(self, session_id: UUID) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def prune(self) -> int:
        """Drop idle sessions; returns how many were removed."""
        now = self._clock()
        expired = [sid for sid, s in self._sessions.items() if self._is_expired(s, now)]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)

    def _is_expired(self, session: ReviewSession, now: float) -> bool:
        # A session with a store call outstanding is never evicted
        return not session.in_flight and now - session.last_touched > self.max_idle_seconds

    def __len__(self) -> int:
        return len(self._sessions)
