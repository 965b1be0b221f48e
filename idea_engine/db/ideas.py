"""Idea and assessment database operations."""

from typing import Any

from idea_engine.core.config import get_settings
from idea_engine.core.errors import StatusConflictError
from idea_engine.core.logging import get_logger
from idea_engine.core.schemas_ideas import AssessmentRecord, Idea, IdeaStatus
from idea_engine.db.supabase_client import get_supabase

logger = get_logger(__name__)


def list_ideas_by_status(status: IdeaStatus | str) -> list[dict[str, Any]]:
    """
    List ideas with the given status, oldest first.

    Args:
        status: Idea status to filter by

    Returns:
        List of idea dicts ordered by created_at ascending

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()
    status_value = IdeaStatus(status).value

    try:
        response = (
            supabase.table(get_settings().IDEAS_TABLE)
            .select("*")
            .eq("status", status_value)
            .order("created_at", desc=False)
            .execute()
        )

        return response.data or []

    except Exception as e:
        logger.error(f"Failed to list ideas with status={status_value}: {e}")
        raise


def get_idea(idea_id: str) -> dict[str, Any] | None:
    """
    Get a single idea by ID.

    Args:
        idea_id: Idea identifier

    Returns:
        Idea dict or None if not found

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table(get_settings().IDEAS_TABLE)
            .select("*")
            .eq("id", str(idea_id))
            .execute()
        )

        if not response.data:
            return None

        return response.data[0]

    except Exception as e:
        logger.error(f"Failed to get idea {idea_id}: {e}")
        raise


def update_idea_status(idea_id: str, new_status: IdeaStatus | str) -> dict[str, Any]:
    """
    Move an idea forward to a new status.

    The update only matches rows whose current status may transition to
    ``new_status``, so a concurrent update cannot move an idea backward.

    Args:
        idea_id: Idea identifier
        new_status: Target status

    Returns:
        Updated idea dict

    Raises:
        StatusConflictError: If the idea exists but is not in a status that
            can move to ``new_status``
        ValueError: If the idea does not exist
        Exception: If database operation fails
    """
    supabase = get_supabase()
    target = IdeaStatus(new_status)
    allowed_from = [s.value for s in IdeaStatus if s.can_transition(target)]

    try:
        response = (
            supabase.table(get_settings().IDEAS_TABLE)
            .update({"status": target.value})
            .eq("id", str(idea_id))
            .in_("status", allowed_from)
            .execute()
        )

        if not response.data:
            current = get_idea(idea_id)
            if current is None:
                raise ValueError(f"No idea found with id={idea_id}")
            raise StatusConflictError(str(idea_id), "|".join(allowed_from), current.get("status"))

        logger.info(
            f"Updated idea {idea_id} to status={target.value}",
            extra={"idea_id": str(idea_id), "status": target.value},
        )
        return response.data[0]

    except StatusConflictError:
        raise
    except Exception as e:
        logger.error(
            f"Failed to update idea status: {e}",
            extra={"idea_id": str(idea_id)},
        )
        raise


def submit_idea_assessment(idea_id: str, record: AssessmentRecord) -> dict[str, Any]:
    """
    Persist an assessment record and mark the idea assessed.

    Both writes happen inside the ``submit_idea_assessment`` Postgres function,
    so either both land or neither does.

    Args:
        idea_id: Idea identifier
        record: Complete assessment record

    Returns:
        Stored assessment row (including the store-assigned assessed_at)

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()
    settings = get_settings()

    try:
        response = supabase.rpc(
            settings.SUBMIT_ASSESSMENT_RPC,
            record.to_rpc_params(str(idea_id)),
        ).execute()

        if not response.data:
            raise ValueError(f"No data returned from {settings.SUBMIT_ASSESSMENT_RPC}")

        row = response.data[0] if isinstance(response.data, list) else response.data
        logger.info(
            f"Submitted assessment for idea {idea_id}",
            extra={"idea_id": str(idea_id), "assessed_by": record.assessed_by},
        )
        return row

    except Exception as e:
        logger.error(
            f"Failed to submit assessment: {e}",
            extra={"idea_id": str(idea_id)},
        )
        raise


class SupabaseIdeaStore:
    """Idea store backed by Supabase tables."""

    def query_by_status(self, status: IdeaStatus) -> list[Idea]:
        return [Idea(**row) for row in list_ideas_by_status(status)]

    def update_status(self, idea_id: str, new_status: IdeaStatus) -> Idea:
        return Idea(**update_idea_status(idea_id, new_status))

    def submit_assessment(self, idea_id: str, record: AssessmentRecord) -> dict[str, Any]:
        return submit_idea_assessment(idea_id, record)
