"""
CamPlan Main Application
========================

FastAPI entry point exposing the planning engines over HTTP.

Every endpoint is a thin wrapper: it validates the request body, fills
unset options from config, calls one engine and returns its result.
Handlers are plain functions so the CPU-bound sampling runs in the
server's threadpool.

Endpoints:
    GET  /                      - Service information
    GET  /health                - Liveness check
    POST /dori                  - DORI distances and zones
    POST /coverage/stats        - Grid-sampled coverage statistics
    POST /coverage/blind-spots  - Uncovered grid cells
    GET  /layout/coverage       - Coverage of the configured site layout
    POST /sizing/network        - Bandwidth and switch class
    POST /sizing/storage        - Storage and RAID tier
    POST /sizing/poe            - PoE budget and UPS
    POST /sizing/cabling        - Cable quantities
    POST /sizing/nvr            - NVR hardware
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from camplan import __version__
from camplan.config import settings
from camplan.coverage import compute_coverage_stats, detect_blind_spots, grid_shape
from camplan.dori import calculate_dori_distances, get_dori_zones
from camplan.geometry import LayoutManager
from camplan.models.api import (
    CablingRequest,
    CoverageRequest,
    DORIRequest,
    DORIResponse,
    NetworkRequest,
    NVRRequest,
    PoERequest,
    StorageRequest,
)
from camplan.sizing import (
    analyze_network,
    analyze_poe,
    analyze_storage,
    calculate_cable_requirements,
    recommend_nvr,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Global State
# =============================================================================

_layout_manager: Optional[LayoutManager] = None
_startup_time: float = 0.0


def get_layout_manager() -> Optional[LayoutManager]:
    return _layout_manager


# =============================================================================
# Lifespan
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the configured site layout, if present."""
    global _layout_manager, _startup_time

    _startup_time = time.time()
    logger.info(f"Starting {settings.service.name} {settings.service.version}")

    layout_path = settings.layout.definition_path
    if Path(layout_path).exists():
        manager = LayoutManager()
        manager.load_from_file(layout_path)
        _layout_manager = manager
    else:
        logger.info(f"No site layout at {layout_path}, /layout endpoints disabled")

    yield

    _layout_manager = None
    logger.info("Shutdown complete")


app = FastAPI(
    title="CamPlan",
    description="Camera coverage geometry and sizing engines",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Engine parameter errors are client errors."""
    logger.warning(f"Rejected {request.url.path}: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=400)


def _check_sample_budget(width: float, height: float, step: float) -> Optional[JSONResponse]:
    """Reject grids larger than the configured sample budget."""
    rows, cols = grid_shape(width, height, step)
    samples = rows * cols
    if samples > settings.coverage.max_samples:
        return JSONResponse(
            {
                "error": (
                    f"Sample grid too large: {samples} samples "
                    f"(max {settings.coverage.max_samples}); increase sample_step_px"
                )
            },
            status_code=422,
        )
    return None


# =============================================================================
# Service Endpoints
# =============================================================================

@app.get("/")
async def root() -> JSONResponse:
    """Service information."""
    return JSONResponse({
        "service": settings.service.name,
        "version": settings.service.version,
        "layout_loaded": _layout_manager is not None,
    })


@app.get("/health")
async def health() -> JSONResponse:
    """Liveness check."""
    return JSONResponse({
        "status": "ok",
        "uptime_seconds": round(time.time() - _startup_time, 1) if _startup_time else 0.0,
    })


# =============================================================================
# DORI
# =============================================================================

@app.post("/dori")
def dori(body: DORIRequest) -> JSONResponse:
    """DORI distances and zones for a camera's optics."""
    response = DORIResponse(
        distances=calculate_dori_distances(body.resolution_height, body.lens_mm, body.sensor_size),
        zones=get_dori_zones(body.resolution_height, body.lens_mm, body.sensor_size),
    )
    return JSONResponse(response.model_dump(mode="json"))


# =============================================================================
# Coverage
# =============================================================================

@app.post("/coverage/stats")
def coverage_stats(body: CoverageRequest) -> JSONResponse:
    """Coverage statistics for cameras over a canvas."""
    step = body.sample_step_px or settings.coverage.sample_step_px
    ppm = body.pixels_per_meter or settings.coverage.pixels_per_meter

    rejection = _check_sample_budget(body.canvas_width, body.canvas_height, step)
    if rejection is not None:
        return rejection

    stats = compute_coverage_stats(
        body.cameras,
        body.canvas_width,
        body.canvas_height,
        step,
        pixels_per_meter=ppm,
        walls=body.walls,
    )
    return JSONResponse(stats.model_dump(mode="json"))


@app.post("/coverage/blind-spots")
def coverage_blind_spots(body: CoverageRequest) -> JSONResponse:
    """Uncovered grid cells for cameras over a canvas."""
    grid = body.sample_step_px or settings.coverage.blind_spot_grid_px
    ppm = body.pixels_per_meter or settings.coverage.pixels_per_meter

    rejection = _check_sample_budget(body.canvas_width, body.canvas_height, grid)
    if rejection is not None:
        return rejection

    spots = detect_blind_spots(
        body.cameras,
        body.canvas_width,
        body.canvas_height,
        grid,
        pixels_per_meter=ppm,
        walls=body.walls,
    )
    return JSONResponse([spot.model_dump(mode="json") for spot in spots])


@app.get("/layout/coverage")
def layout_coverage() -> JSONResponse:
    """Coverage statistics of the configured site layout."""
    manager = get_layout_manager()

    if manager is None:
        return JSONResponse(
            {"error": "No site layout loaded"},
            status_code=503,
        )

    stats = manager.coverage_stats(step=settings.coverage.sample_step_px)
    return JSONResponse({
        "site_id": manager.layout.site_id,
        "stats": stats.model_dump(mode="json"),
        "wall_length_m": round(manager.total_wall_length_m(), 2),
        "camera_area_m2": {
            camera_id: round(area, 1)
            for camera_id, area in manager.camera_footprints_m2().items()
        },
    })


# =============================================================================
# Sizing
# =============================================================================

@app.post("/sizing/network")
def sizing_network(body: NetworkRequest) -> JSONResponse:
    """Bandwidth and switch requirements."""
    return JSONResponse(analyze_network(body.cameras).model_dump(mode="json"))


@app.post("/sizing/storage")
def sizing_storage(body: StorageRequest) -> JSONResponse:
    """Storage requirements and RAID tier."""
    retention_days = body.retention_days or settings.sizing.retention_days
    analysis = analyze_storage(body.cameras, retention_days)
    return JSONResponse(analysis.model_dump(mode="json"))


@app.post("/sizing/poe")
def sizing_poe(body: PoERequest) -> JSONResponse:
    """PoE budget, switch and UPS."""
    return JSONResponse(analyze_poe(body.cameras).model_dump(mode="json"))


@app.post("/sizing/cabling")
def sizing_cabling(body: CablingRequest) -> JSONResponse:
    """Cable quantities and type."""
    requirements = calculate_cable_requirements(body.runs, body.max_distance_m)
    return JSONResponse(requirements.model_dump(mode="json"))


@app.post("/sizing/nvr")
def sizing_nvr(body: NVRRequest) -> JSONResponse:
    """NVR hardware and cost estimate."""
    recommendation = recommend_nvr(body.camera_count, body.total_storage_tb)
    return JSONResponse(recommendation.model_dump(mode="json"))


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    # Cloud Run uses PORT env var
    port = int(os.environ.get("PORT", settings.server.port))

    uvicorn.run(
        "camplan.main:app",
        host=settings.server.host,
        port=port,
        reload=False,
    )
