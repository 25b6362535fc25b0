"""
API routers module.
"""
from emissions_tracker.api.emissions import router as emissions_router
from emissions_tracker.api.reference_lines import router as reference_lines_router
from emissions_tracker.api.system import router as system_router

__all__ = [
    "emissions_router",
    "reference_lines_router",
    "system_router",
]
