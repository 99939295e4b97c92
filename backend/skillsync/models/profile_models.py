from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from skillsync.models.analysis_models import ExperienceEntry


class SkillCategory(str, Enum):
    """Closed vocabulary for skill categories."""

    MANAGEMENT = "Management"
    TECHNICAL = "Technical"
    ANALYTICS = "Analytics"
    COMMUNICATION = "Communication"
    FINANCE = "Finance"
    HEALTHCARE = "Healthcare"
    ENGINEERING = "Engineering"
    PROFESSIONAL = "Professional"
    PROCESS = "Process"
    COMPLIANCE = "Compliance"
    DOCUMENTATION = "Documentation"
    QUALITY = "Quality"
    SAFETY = "Safety"
    LEADERSHIP = "Leadership"
    STRATEGY = "Strategy"
    ANALYTICAL = "Analytical"
    CLIENT_RELATIONS = "Client Relations"


class Importance(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RoadmapStage(str, Enum):
    """Roadmap phase label, assigned by position."""

    FOUNDATION = "Foundation"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class RoadmapStatus(str, Enum):
    CURRENT = "current"
    UPCOMING = "upcoming"


class _ProfileModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ── Sub-Models ──────────────────────────────────────────────────────────────


class Skill(_ProfileModel):
    name: str
    level: int = Field(ge=0, le=100)
    category: SkillCategory


class SkillGap(_ProfileModel):
    """A skill the candidate should pick up next, with urgency."""

    skill: str
    importance: Importance
    time_to_learn: str
    resources: tuple[str, ...] = ()


class CareerMatch(_ProfileModel):
    """A candidate target role with an estimated fit."""

    role: str
    match_percentage: int = Field(ge=75, le=95)
    requirements: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()


class RoadmapPhase(_ProfileModel):
    """One stage of the learning plan, tied to one detected industry."""

    phase: RoadmapStage
    title: str
    skills: tuple[str, ...] = Field(default=(), max_length=3)
    resources: tuple[str, ...] = ()
    timeframe: str
    status: RoadmapStatus


# ── Main Profile Model ─────────────────────────────────────────────────────


class Profile(_ProfileModel):
    """Synthesized career profile, ready to persist or return."""

    current_role: str
    skills: tuple[Skill, ...] = Field(default=(), max_length=12)
    experience: tuple[ExperienceEntry, ...] = ()
    target_roles: tuple[str, ...] = Field(default=(), max_length=5)
    skill_gaps: tuple[SkillGap, ...] = Field(default=(), max_length=6)
    career_matches: tuple[CareerMatch, ...] = Field(default=(), max_length=3)
    learning_roadmap: tuple[RoadmapPhase, ...] = Field(default=(), max_length=4)
