"""
Profile Store — in-memory cache of analysis results.

Results live for the lifetime of the process. A result is keyed by the text
and the seed it was synthesized with: the same text under the same seed is
analyzed once, while a different seed gets its own draws.
"""

from __future__ import annotations

import hashlib
import logging
import uuid
from typing import Optional

from skillsync.models.api_models import AnalysisResponse
from skillsync.services.resume_analyzer import CareerProfileResult

logger = logging.getLogger(__name__)

_results: dict[str, AnalysisResponse] = {}
_ids_by_fingerprint: dict[str, str] = {}


def text_fingerprint(text: str, seed: Optional[int] = None) -> str:
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return f"{digest}:{seed}"


def find_by_text(text: str, seed: Optional[int] = None) -> AnalysisResponse | None:
    profile_id = _ids_by_fingerprint.get(text_fingerprint(text, seed))
    if profile_id is None:
        return None
    logger.info(f"Cache hit for analysis {profile_id} (seed={seed})")
    return _results.get(profile_id)


def save_result(
    text: str, result: CareerProfileResult, seed: Optional[int] = None
) -> AnalysisResponse:
    """Store a pipeline result and return it in response form."""
    response = AnalysisResponse(
        profile_id=str(uuid.uuid4()),
        name=result.analysis.name,
        email=result.analysis.email,
        phone=result.analysis.phone,
        profile=result.profile,
        completeness=result.completeness,
    )
    _results[response.profile_id] = response
    _ids_by_fingerprint[text_fingerprint(text, seed)] = response.profile_id
    logger.info(f"Stored analysis {response.profile_id} (completeness={response.completeness})")
    return response


def get_result(profile_id: str) -> AnalysisResponse | None:
    return _results.get(profile_id)


def clear_results() -> int:
    """Drop every cached result. Returns how many were removed."""
    count = len(_results)
    _results.clear()
    _ids_by_fingerprint.clear()
    return count
