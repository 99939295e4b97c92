from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from skillsync.models.profile_models import CareerMatch, Profile, RoadmapPhase, SkillGap


class _ApiModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ── Request Models ──────────────────────────────────────────────────────────


class AnalyzeTextInput(_ApiModel):
    """Input for analyzing text that has already been decoded."""

    text: str


# ── Response Models ─────────────────────────────────────────────────────────


class AnalysisResponse(_ApiModel):
    """Result of one analysis request."""

    message: str = "Resume analyzed successfully"
    profile_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    profile: Profile
    completeness: int = Field(ge=0, le=100)


class AnalysisHistory(_ApiModel):
    """Career guidance part of a stored analysis."""

    career_matches: tuple[CareerMatch, ...] = ()
    skill_gaps: tuple[SkillGap, ...] = ()
    learning_roadmap: tuple[RoadmapPhase, ...] = ()
