"""
CamPlan
=======

Camera coverage geometry and sizing engines for security layout planning.

This package provides the numeric core of a security-camera layout planner.
A UI or report layer collects camera placements and stream parameters and
feeds them into the engines below; every engine is a pure, deterministic
function of its arguments.

Components:
    - dori: DORI (Detection/Observation/Recognition/Identification) distances
    - coverage: Sector geometry, grid-sampled coverage statistics, walls
    - sizing: Bitrate, bandwidth, storage, PoE, cabling and NVR sizing
    - geometry: Site layout loading and polygon helpers
    - models: Pydantic input/output models

Example:
    from camplan.dori import calculate_dori_distances
    from camplan.coverage import compute_coverage_stats
    from camplan.models import CameraSpec

    result = calculate_dori_distances(1080, 4.0, '1/3"')
    print(result.identification)  # 4.8

    cameras = [CameraSpec(x=100, y=100, rotation=45, field_of_view=90, range=20)]
    stats = compute_coverage_stats(cameras, 800, 600)

The HTTP service lives in ``camplan.main`` and is started with uvicorn.
"""

__version__ = "0.1.0"
__author__ = "CamPlan Project"

__all__ = [
    "__version__",
]
