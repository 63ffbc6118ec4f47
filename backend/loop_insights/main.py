"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from loop_insights import __version__
from loop_insights.core.exceptions import InvalidRecordError
from loop_insights.core.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(
    title="Loop Insights API",
    description="Relationship-memory analytics: health scores, cadence, trends and reconnection suggestions",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # TODO: restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidRecordError)
async def invalid_record_handler(request: Request, exc: InvalidRecordError):
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "field": exc.field},
    )


# --- Routes ---
from loop_insights.api.routes import insights  # noqa: E402

app.include_router(insights.router, prefix="/api/insights", tags=["insights"])


@app.get("/health")
async def health_check():
    return {"status": "ok"}
