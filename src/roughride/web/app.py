"""FastAPI Web application — route segmentation, simulation and stored records."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from roughride import __version__
from roughride.config import load_settings
from roughride.errors import SimulationError, TrackFileError
from roughride.reporting.colors import roughness_color, roughness_range
from roughride.storage.segments import SegmentStorage
from roughride.web.schemas import (
    HealthResponse,
    RecordsResponse,
    SegmentRecordOut,
    SegmentRouteRequest,
    SegmentsResponse,
    SimulateRequest,
    SimulateResponse,
)
from roughride.web.service import RouteService

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

settings = load_settings()  # loads .env from project root

app = FastAPI(title="Roughride", version=__version__)


def _storage(db_path: str | None = None) -> SegmentStorage:
    return SegmentStorage(db_path or settings.db_path)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.post("/api/routes/segment", response_model=SegmentsResponse)
def segment_route(req: SegmentRouteRequest) -> SegmentsResponse:
    """Split an uploaded GPX track into fixed-length segments."""
    try:
        return RouteService(settings).segment_route(req)
    except (TrackFileError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.post("/api/routes/simulate", response_model=SimulateResponse)
def simulate_route(req: SimulateRequest) -> SimulateResponse:
    """Segment a GPX track and play a synthetic ride along it."""
    try:
        return RouteService(settings).simulate(req)
    except (TrackFileError, SimulationError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/api/segments", response_model=RecordsResponse)
def list_segments(test_mode: bool | None = None, db: str | None = None) -> RecordsResponse:
    """Return previously recorded segments, coloured relative to each other."""
    storage = _storage(db)
    try:
        records = storage.list_records(test_mode=test_mode)
    finally:
        storage.close()

    lo, hi = roughness_range(r.roughness for r in records)
    _logger.debug("Serving %d stored segments", len(records))
    return RecordsResponse(
        records=[
            SegmentRecordOut(
                doc_id=r.doc_id,
                color=roughness_color(r.roughness, lo, hi),
                **r.to_dict(),
            )
            for r in records
        ]
    )
