from skillsync.api import analysis_routes

__all__ = [
    "analysis_routes",
]
