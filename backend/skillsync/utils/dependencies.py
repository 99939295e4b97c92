"""
Request-scoped helpers — the seed used by profile synthesis.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Header

from skillsync.config import settings


async def get_analysis_seed(
    x_analysis_seed: Optional[int] = Header(None, alias="X-Analysis-Seed"),
) -> Optional[int]:
    """
    FastAPI dependency: the effective seed for one request.

    The X-Analysis-Seed header wins over settings.analysis_seed. None means
    the request's generator is seeded from the OS.
    """
    return x_analysis_seed if x_analysis_seed is not None else settings.analysis_seed
