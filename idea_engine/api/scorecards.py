"""API endpoint for stateless scorecard aggregation."""

from fastapi import APIRouter, HTTPException

from idea_engine.core.errors import (
    IllegalDimensionError,
    IllegalScoreLevelError,
    IncompleteScorecardError,
)
from idea_engine.core.schemas_assessment import ScorecardEvaluateRequest, ScorecardEvaluation
from idea_engine.core.scoring import (
    classify_priority,
    coerce_dimension,
    coerce_level,
    compute_axis_scores,
)

router = APIRouter()


@router.post("/scorecards/evaluate", response_model=ScorecardEvaluation)
async def evaluate_scorecard(request: ScorecardEvaluateRequest) -> ScorecardEvaluation:
    """
    Aggregate a complete scorecard into Value/Feasibility scores and a priority.

    Raises:
        HTTPException 400: If a dimension or level is unknown
        HTTPException 422: If any dimension is missing
    """
    try:
        scores = {coerce_dimension(k): coerce_level(v) for k, v in request.scores.items()}
    except (IllegalDimensionError, IllegalScoreLevelError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        axis_scores = compute_axis_scores(scores)
    except IncompleteScorecardError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "missing": [d.value for d in e.missing]},
        ) from e

    return ScorecardEvaluation(
        value=axis_scores.value,
        feasibility=axis_scores.feasibility,
        priority=classify_priority(axis_scores),
    )
