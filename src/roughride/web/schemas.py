"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SegmentRouteRequest(BaseModel):
    gpx: str
    segment_length_m: float | None = Field(default=None, gt=0)
    split_edges: bool = True


class SimulateRequest(BaseModel):
    gpx: str
    segment_length_m: float | None = Field(default=None, gt=0)
    speed_mps: float | None = Field(default=None, gt=0)
    seed: int | None = None


class HealthResponse(BaseModel):
    status: str
    version: str


class CoordinateOut(BaseModel):
    lat: float
    lng: float


class SegmentOut(BaseModel):
    index: int
    distance: float
    roughness: float
    sample_count: int
    color: str
    coords: list[CoordinateOut]


class SegmentsResponse(BaseModel):
    segment_length_m: float
    total_distance: float
    segments: list[SegmentOut]


class SimulateResponse(SegmentsResponse):
    ticks: int
    final_position: CoordinateOut


class SegmentRecordOut(BaseModel):
    doc_id: str
    start_lat: float
    start_lng: float
    end_lat: float
    end_lng: float
    distance: float
    roughness: float
    sample_count: int
    recorded_at_ms: int
    test_mode: bool
    batch_index: int
    color: str


class RecordsResponse(BaseModel):
    records: list[SegmentRecordOut]
