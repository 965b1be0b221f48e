"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from idea_engine import __version__
from idea_engine.api import router as api_router

app = FastAPI(
    title="Idea Assessment Engine",
    description="Review queue and Value/Feasibility scoring for proposed AI use cases",
    version=__version__,
)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"status": "ok"}, status_code=200)


app.include_router(api_router, prefix="/v1", tags=["v1"])
