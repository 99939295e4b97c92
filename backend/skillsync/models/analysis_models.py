from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Industry(str, Enum):
    """Industries the classifier can detect, in detection order."""

    TECHNOLOGY = "Technology"
    HEALTHCARE = "Healthcare"
    FINANCE = "Finance"
    INFRASTRUCTURE = "Infrastructure"
    ENERGY = "Energy"
    MANUFACTURING = "Manufacturing"
    EDUCATION = "Education"
    CONSULTING = "Consulting"


class RoleArchetype(str, Enum):
    """Job-title keywords the classifier can detect, in scan order."""

    MANAGER = "manager"
    DIRECTOR = "director"
    ANALYST = "analyst"
    ENGINEER = "engineer"
    DEVELOPER = "developer"
    CONSULTANT = "consultant"
    SPECIALIST = "specialist"
    COORDINATOR = "coordinator"
    SUPERVISOR = "supervisor"
    LEAD = "lead"
    SENIOR = "senior"
    JUNIOR = "junior"
    ASSOCIATE = "associate"
    EXECUTIVE = "executive"
    OFFICER = "officer"
    ADMINISTRATOR = "administrator"


class _AnalysisModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ── Extraction Output ───────────────────────────────────────────────────────


class ExperienceEntry(_AnalysisModel):
    """A single work experience entry."""

    company: str
    position: str
    duration: str
    description: str = Field(max_length=200)


class ResumeAnalysis(_AnalysisModel):
    """Facts recovered from raw résumé text by the extraction phase."""

    name: str = "Professional"
    email: Optional[str] = None
    phone: Optional[str] = None
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    industries: tuple[Industry, ...] = ()
    roles: tuple[RoleArchetype, ...] = ()
