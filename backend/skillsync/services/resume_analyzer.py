"""
Resume Analyzer — run the extraction and synthesis phases over raw text.

  text ──► contact / sections / classifiers ──► ResumeAnalysis
       ──► profile synthesizer ──► Profile (+ completeness score)

Pure and synchronous: no I/O, no shared state between calls.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from skillsync.models.analysis_models import ResumeAnalysis
from skillsync.models.profile_models import Profile
from skillsync.services.classifiers import classify_industries, classify_roles
from skillsync.services.contact_extractor import (
    DEFAULT_NAME,
    extract_email,
    extract_name,
    extract_phone,
)
from skillsync.services.profile_synthesizer import DEFAULT_ROLE, synthesize_profile
from skillsync.services.section_extractors import (
    extract_education,
    extract_experience,
    extract_skills,
)
from skillsync.services.section_segmenter import Section, segment, split_lines

logger = logging.getLogger(__name__)


class CareerProfileResult(BaseModel):
    """Both phases of one pipeline run."""

    model_config = ConfigDict(frozen=True)

    analysis: ResumeAnalysis
    profile: Profile
    completeness: int = Field(ge=0, le=100)


# ── Public API ───────────────────────────────────────────────────────────────


def analyze_resume(text: str) -> ResumeAnalysis:
    """Extract contact facts, sections, industries and roles from raw text."""
    text = text or ""
    lines = split_lines(text)
    sections = segment(lines)

    analysis = ResumeAnalysis(
        name=extract_name(lines),
        email=extract_email(text),
        phone=extract_phone(text),
        experience=tuple(extract_experience(lines, sections[Section.EXPERIENCE])),
        education=tuple(extract_education(lines, sections[Section.EDUCATION])),
        skills=tuple(extract_skills(lines, sections[Section.SKILLS])),
        industries=tuple(classify_industries(text)),
        roles=tuple(classify_roles(text)),
    )

    logger.info(
        f"Resume analyzed: name='{analysis.name}' experience={len(analysis.experience)} "
        f"education={len(analysis.education)} skills={len(analysis.skills)} "
        f"industries={[i.value for i in analysis.industries]} "
        f"roles={[r.value for r in analysis.roles]}"
    )
    return analysis


def build_career_profile(
    text: str, rng: Optional[random.Random] = None
) -> CareerProfileResult:
    """Full pipeline: raw text in, analysis + profile + completeness out."""
    analysis = analyze_resume(text)
    profile = synthesize_profile(analysis, rng)
    return CareerProfileResult(
        analysis=analysis,
        profile=profile,
        completeness=calculate_completeness(analysis, profile),
    )


def calculate_completeness(analysis: ResumeAnalysis, profile: Profile) -> int:
    """10 points for each populated profile field, 0-100."""
    fields = [
        analysis.name != DEFAULT_NAME,
        analysis.email,
        analysis.phone,
        profile.current_role != DEFAULT_ROLE,
        profile.skills,
        profile.experience,
        analysis.education,
        profile.target_roles,
        profile.skill_gaps,
        profile.learning_roadmap,
    ]
    return sum(10 for populated in fields if populated)
