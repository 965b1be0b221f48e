"""API router for v1 endpoints."""

from fastapi import APIRouter

from idea_engine.api import assessment_queue, scorecards

router = APIRouter()

# Reviewer sessions and the pending queue
router.include_router(assessment_queue.router, tags=["assessment_queue"])

# Stateless scorecard aggregation
router.include_router(scorecards.router, tags=["scorecards"])
