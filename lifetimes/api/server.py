"""
Lifetimes Timeline: Read-Only Layout API
========================================

Serves the loaded people dataset and its timeline layout.
Strictly read-only; every request is a full, independent recomputation.

Endpoints:
- GET /health              -> dataset status
- GET /api/v1/people       -> people in selection-list order
- GET /api/v1/layout       -> window, ticks and bar rows for ?selected=<id>...
- GET /api/v1/issues       -> records skipped while loading

Usage:
    uvicorn lifetimes.api.server:app --reload
"""

from __future__ import annotations
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import List, Optional
import logging
import os

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from ingestion.contracts import LoaderConfig, LoadResult
from ingestion.loader import load_people

from ..contracts.base import (
    DegenerateIntervalError, EmptyWindowError, UnknownEntityError,
)
from ..engine import LayoutConfig, TimelineLayoutEngine
from ..observability import setup_logging
from .mapper import map_issues, map_layout, map_person
from .models import HealthModel, IssueModel, LayoutModel, PersonModel

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = os.path.join("data", "people.json")


@dataclass(frozen=True)
class ServerConfig:
    """Server settings, read from the environment at startup."""
    data_path: str = DEFAULT_DATA_PATH
    sort_language: str = "en"
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> ServerConfig:
        return ServerConfig(
            data_path=os.environ.get("LIFETIMES_DATA_PATH", DEFAULT_DATA_PATH),
            sort_language=os.environ.get("LIFETIMES_SORT_LANGUAGE", "en"),
            log_level=os.environ.get("LIFETIMES_LOG_LEVEL", "INFO").upper(),
        )


# =============================================================================
# INFRASTRUCTURE SETUP
# =============================================================================

# Loaded once per process; request handlers only read it
dataset: Optional[LoadResult] = None
engine = TimelineLayoutEngine(LayoutConfig())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the dataset on startup."""
    global dataset, engine

    config = ServerConfig.from_env()
    setup_logging(getattr(logging, config.log_level, logging.INFO))
    logger.info("Loading people dataset from %s", config.data_path)

    dataset = load_people(config.data_path, LoaderConfig(sort_language=config.sort_language))
    engine = TimelineLayoutEngine(LayoutConfig(sort_language=config.sort_language))
    logger.info(
        "Dataset ready: %d people, %d issues",
        len(dataset.people), len(dataset.issues),
    )

    yield

    logger.info("Shutting down layout API")
    dataset = None


app = FastAPI(
    title="Lifetimes Timeline API",
    version="0.1.0",
    description="Read-only timeline layout for historical lifetimes",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],  # STRICT READ-ONLY
    allow_headers=["*"],
)


def _require_dataset() -> LoadResult:
    if dataset is None:
        raise HTTPException(status_code=503, detail="Dataset not loaded")
    return dataset


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/health", response_model=HealthModel)
async def health_check():
    """System status."""
    current = _require_dataset()
    return HealthModel(status="online", people=len(current.people), issues=len(current.issues))


@app.get("/api/v1/people", response_model=List[PersonModel])
async def get_people():
    """People in selection-list order (sort key, then earliest birth)."""
    current = _require_dataset()
    return [map_person(p) for p in engine.selection_list(current.people)]


@app.get("/api/v1/layout", response_model=LayoutModel)
async def get_layout(selected: List[str] = Query(default=[])):
    """
    Layout for the given selection.
    Empty selection: axis over everyone, no rows.
    """
    current = _require_dataset()
    try:
        layout = engine.layout(current.people, selected)
    except UnknownEntityError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except (EmptyWindowError, DegenerateIntervalError) as e:
        raise HTTPException(status_code=422, detail={"code": e.code.value, "message": e.message})
    return map_layout(layout, current.people)


@app.get("/api/v1/issues", response_model=List[IssueModel])
async def get_issues():
    """Records skipped while loading the dataset."""
    return map_issues(_require_dataset().issues)
