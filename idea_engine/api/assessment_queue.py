"""API endpoints for the assessment queue and reviewer sessions."""

from functools import lru_cache
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path

from idea_engine.core.assessment import (
    ActionResult,
    AssessmentWorkflow,
    ReviewSession,
    SessionRegistry,
)
from idea_engine.core.config import get_settings
from idea_engine.core.errors import (
    IllegalDimensionError,
    IllegalScoreLevelError,
    ValidationError,
)
from idea_engine.core.logging import get_logger
from idea_engine.core.schemas_assessment import (
    ActionResponse,
    PendingIdeasResponse,
    RationaleUpdate,
    ScoreUpdate,
    SelectIdeaRequest,
    SessionOut,
    SubmitAssessmentRequest,
)
from idea_engine.db.ideas import SupabaseIdeaStore

logger = get_logger(__name__)

router = APIRouter()


@lru_cache(maxsize=1)
def get_workflow() -> AssessmentWorkflow:
    """Workflow controller bound to the Supabase idea store."""
    return AssessmentWorkflow(
        SupabaseIdeaStore(),
        default_assessed_by=get_settings().DEFAULT_ASSESSED_BY,
    )


@lru_cache(maxsize=1)
def get_session_registry() -> SessionRegistry:
    """Process-wide reviewer session registry."""
    return SessionRegistry(max_idle_seconds=get_settings().SESSION_IDLE_SECONDS)


def _get_session(registry: SessionRegistry, session_id: UUID) -> ReviewSession:
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session


def _respond(result: ActionResult, session: ReviewSession) -> ActionResponse:
    """Turn an action result into a response, or an HTTP error for failures."""
    if not result.ok:
        status_code = 422 if isinstance(result.error, ValidationError) else 502
        raise HTTPException(
            status_code=status_code,
            detail={"message": result.message, "error": result.error_kind},
        )

    return ActionResponse(
        ok=True,
        message=result.message,
        session=SessionOut.from_session(session),
    )


@router.get("/assessment-queue/pending", response_model=PendingIdeasResponse)
async def list_pending_ideas(
    workflow: AssessmentWorkflow = Depends(get_workflow),
) -> PendingIdeasResponse:
    """
    List ideas awaiting assessment.

    Returns:
        PendingIdeasResponse with submitted ideas followed by under-review ideas

    Raises:
        HTTPException 502: If the idea store query fails
    """
    result = workflow.list_pending()
    if not result.ok:
        raise HTTPException(
            status_code=502,
            detail={"message": result.message, "error": result.error_kind},
        )
    return PendingIdeasResponse(ideas=result.data, total=len(result.data))


@router.post("/assessment-sessions", response_model=SessionOut, status_code=201)
async def create_session(
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionOut:
    """Open a new reviewer session with an empty draft."""
    session = registry.create()
    logger.info(f"Opened review session {session.id}", extra={"session_id": str(session.id)})
    return SessionOut.from_session(session)


@router.get("/assessment-sessions/{session_id}", response_model=SessionOut)
async def get_session(
    session_id: UUID = Path(..., description="Session UUID"),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionOut:
    """Current selection, draft scores and live preview for a session."""
    return SessionOut.from_session(_get_session(registry, session_id))


@router.delete("/assessment-sessions/{session_id}", status_code=204)
async def close_session(
    session_id: UUID = Path(..., description="Session UUID"),
    registry: SessionRegistry = Depends(get_session_registry),
) -> None:
    """Close a session, discarding any unsaved draft."""
    if not registry.discard(session_id):
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")


@router.post("/assessment-sessions/{session_id}/select", response_model=ActionResponse)
async def select_idea(
    request: SelectIdeaRequest,
    session_id: UUID = Path(..., description="Session UUID"),
    registry: SessionRegistry = Depends(get_session_registry),
    workflow: AssessmentWorkflow = Depends(get_workflow),
) -> ActionResponse:
    """
    Start assessing a pending idea.

    Raises:
        HTTPException 404: If the session or a pending idea with that id is not found
        HTTPException 422: If the selection is refused
        HTTPException 502: If the store status update fails
    """
    session = _get_session(registry, session_id)

    idea = next((i for i in session.pending if i.id == request.idea_id), None)
    if idea is None:
        refreshed = workflow.list_pending(session)
        if not refreshed.ok:
            return _respond(refreshed, session)
        idea = next((i for i in session.pending if i.id == request.idea_id), None)
    if idea is None:
        raise HTTPException(status_code=404, detail=f"Pending idea {request.idea_id} not found")

    return _respond(workflow.select_idea(session, idea), session)


@router.put(
    "/assessment-sessions/{session_id}/scores/{dimension}", response_model=ActionResponse
)
async def set_score(
    request: ScoreUpdate,
    session_id: UUID = Path(..., description="Session UUID"),
    dimension: str = Path(..., description="Dimension key, e.g. businessGrowth"),
    registry: SessionRegistry = Depends(get_session_registry),
    workflow: AssessmentWorkflow = Depends(get_workflow),
) -> ActionResponse:
    """Set one dimension's score level in the session draft."""
    session = _get_session(registry, session_id)
    try:
        result = workflow.set_score(session, dimension, request.level)
    except (IllegalDimensionError, IllegalScoreLevelError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return _respond(result, session)


@router.put(
    "/assessment-sessions/{session_id}/rationales/{dimension}", response_model=ActionResponse
)
async def set_rationale(
    request: RationaleUpdate,
    session_id: UUID = Path(..., description="Session UUID"),
    dimension: str = Path(..., description="Dimension key, e.g. businessGrowth"),
    registry: SessionRegistry = Depends(get_session_registry),
    workflow: AssessmentWorkflow = Depends(get_workflow),
) -> ActionResponse:
    """Set one dimension's rationale in the session draft."""
    session = _get_session(registry, session_id)
    try:
        result = workflow.set_rationale(session, dimension, request.text)
    except IllegalDimensionError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return _respond(result, session)


@router.post("/assessment-sessions/{session_id}/cancel", response_model=ActionResponse)
async def cancel_selection(
    session_id: UUID = Path(..., description="Session UUID"),
    registry: SessionRegistry = Depends(get_session_registry),
    workflow: AssessmentWorkflow = Depends(get_workflow),
) -> ActionResponse:
    """Drop the current selection. The idea stays under review."""
    session = _get_session(registry, session_id)
    return _respond(workflow.cancel_selection(session), session)


@router.post("/assessment-sessions/{session_id}/submit", response_model=ActionResponse)
async def submit_assessment(
    request: SubmitAssessmentRequest | None = None,
    session_id: UUID = Path(..., description="Session UUID"),
    registry: SessionRegistry = Depends(get_session_registry),
    workflow: AssessmentWorkflow = Depends(get_workflow),
) -> ActionResponse:
    """
    Submit the session draft as the selected idea's assessment.

    Raises:
        HTTPException 422: If no idea is selected or the draft is incomplete
        HTTPException 502: If the store submission fails (draft is kept)
    """
    session = _get_session(registry, session_id)
    attribution = request.assessed_by if request else None

    result = workflow.submit_assessment(session, attribution)
    response = _respond(result, session)
    response.record = result.data
    return response
