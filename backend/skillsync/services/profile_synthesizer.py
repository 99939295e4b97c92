"""
Profile Synthesizer — turn a ResumeAnalysis into a complete career Profile.

Combines extracted facts with the static knowledge tables:
  • currentRole   — first experience position, else an industry title
  • skills        — extracted tokens + industry skills + role skills (max 12)
  • experience    — extracted entries, else one generic entry per industry
  • targetRoles   — per-industry suggestions (max 5)
  • skillGaps     — per-industry gap table (max 6)
  • careerMatches — one per suggested role (max 3)
  • learningRoadmap — one phase per industry (max 4)

Nothing here raises for missing data. The only randomness (skill levels and
match percentages) comes from the `rng` argument.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Iterator, Optional, Sequence

from skillsync.knowledge import industries as tables
from skillsync.knowledge.roles import ROLE_SKILLS
from skillsync.knowledge.skill_categories import (
    DEFAULT_CATEGORY,
    INDUSTRY_FALLBACK,
    KEYWORD_RULES,
)
from skillsync.models.analysis_models import (
    ExperienceEntry,
    Industry,
    ResumeAnalysis,
    RoleArchetype,
)
from skillsync.models.profile_models import (
    CareerMatch,
    Importance,
    Profile,
    RoadmapPhase,
    RoadmapStage,
    RoadmapStatus,
    Skill,
    SkillCategory,
    SkillGap,
)

logger = logging.getLogger(__name__)

# ── Limits ───────────────────────────────────────────────────────────────────

MAX_SKILLS = 12
MAX_TARGET_ROLES = 5
MAX_SKILL_GAPS = 6
MAX_CAREER_MATCHES = 3
MAX_ROADMAP_PHASES = 4
MAX_PHASE_SKILLS = 3

SKILL_LEVEL_RANGE = (60, 90)
MATCH_PERCENTAGE_RANGE = (75, 95)

DEFAULT_ROLE = "Professional"


# ── Public API ───────────────────────────────────────────────────────────────


def synthesize_profile(
    analysis: ResumeAnalysis, rng: Optional[random.Random] = None
) -> Profile:
    """Build the Profile for one analysis. Pass a seeded `rng` for repeatable output."""
    if rng is None:
        rng = random.Random()

    profile = Profile(
        current_role=determine_current_role(analysis),
        skills=tuple(build_skills(analysis, rng)),
        experience=tuple(build_experience(analysis)),
        target_roles=tuple(build_target_roles(analysis.industries)),
        skill_gaps=tuple(build_skill_gaps(analysis.industries)),
        career_matches=tuple(build_career_matches(analysis.industries, rng)),
        learning_roadmap=tuple(build_learning_roadmap(analysis.industries)),
    )

    logger.info(
        f"Profile synthesized: role='{profile.current_role}' "
        f"skills={len(profile.skills)} experience={len(profile.experience)} "
        f"targets={len(profile.target_roles)} gaps={len(profile.skill_gaps)} "
        f"matches={len(profile.career_matches)} roadmap={len(profile.learning_roadmap)}"
    )
    return profile


def determine_current_role(analysis: ResumeAnalysis) -> str:
    if analysis.experience:
        return analysis.experience[0].position or DEFAULT_ROLE

    if Industry.TECHNOLOGY in analysis.industries:
        if RoleArchetype.DEVELOPER in analysis.roles:
            return "Software Developer"
        return "Technology Professional"
    for industry, title in tables.CURRENT_ROLE_TITLES.items():
        if Industry(industry) in analysis.industries:
            return title

    return analysis.name or DEFAULT_ROLE


def categorize_skill(skill: str, industries: Sequence[Industry]) -> SkillCategory:
    """Keyword rules first, then the first detected industry with a fallback."""
    lowered = skill.lower()
    for keywords, category in KEYWORD_RULES:
        if any(keyword in lowered for keyword in keywords):
            return SkillCategory(category)
    for industry, category in INDUSTRY_FALLBACK:
        if Industry(industry) in industries:
            return SkillCategory(category)
    return SkillCategory(DEFAULT_CATEGORY)


def build_skills(analysis: ResumeAnalysis, rng: random.Random) -> list[Skill]:
    """
    Extracted tokens get a random level and a derived category; the static
    industry and role skills follow. Names are unique case-insensitively and
    the first occurrence wins.
    """
    skills: list[Skill] = []
    seen: set[str] = set()

    def add(skill: Skill) -> None:
        key = skill.name.lower()
        if key not in seen:
            seen.add(key)
            skills.append(skill)

    low, high = SKILL_LEVEL_RANGE
    for name in analysis.skills:
        if name.lower() in seen:
            continue
        add(Skill(
            name=name,
            level=rng.randrange(low, high),
            category=categorize_skill(name, analysis.industries),
        ))

    for industry in analysis.industries:
        for skill in _table_skills(tables.INDUSTRY_SKILLS.get(industry.value, ())):
            add(skill)

    for role in analysis.roles:
        for skill in _table_skills(ROLE_SKILLS.get(role.value, ())):
            add(skill)

    return skills[:MAX_SKILLS]


def build_experience(analysis: ResumeAnalysis) -> list[ExperienceEntry]:
    if analysis.experience:
        return list(analysis.experience)

    return [
        ExperienceEntry(
            company=f"{industry.value} Organization",
            position=f"{industry.value} Professional",
            duration="Recent Experience",
            description=f"Professional experience in {industry.value.lower()} sector",
        )
        for industry in analysis.industries
    ]


def build_target_roles(industries: Iterable[Industry]) -> list[str]:
    roles: list[str] = []
    for industry in industries:
        for role in suggested_roles(industry):
            if role not in roles:
                roles.append(role)
    return roles[:MAX_TARGET_ROLES]


def suggested_roles(industry: Industry) -> tuple[str, ...]:
    return tables.TARGET_ROLES.get(industry.value, tables.GENERIC_TARGET_ROLES)


def build_skill_gaps(industries: Iterable[Industry]) -> list[SkillGap]:
    gaps: list[SkillGap] = []
    for industry in industries:
        for skill, importance, time_to_learn, resources in tables.SKILL_GAPS.get(
            industry.value, ()
        ):
            gaps.append(SkillGap(
                skill=skill,
                importance=Importance(importance),
                time_to_learn=time_to_learn,
                resources=resources,
            ))
    return gaps[:MAX_SKILL_GAPS]


def build_career_matches(
    industries: Iterable[Industry], rng: random.Random
) -> list[CareerMatch]:
    """One match per (industry, suggested role); stops once the cap is reached."""
    matches: list[CareerMatch] = []
    low, high = MATCH_PERCENTAGE_RANGE
    for industry in industries:
        for role in suggested_roles(industry):
            if len(matches) == MAX_CAREER_MATCHES:
                return matches
            matches.append(CareerMatch(
                role=role,
                match_percentage=rng.randrange(low, high),
                requirements=requirements_for(industry),
                missing_skills=tables.MISSING_SKILLS.get(
                    industry.value, tables.GENERIC_MISSING_SKILLS
                ),
            ))
    return matches


def requirements_for(industry: Industry) -> tuple[str, ...]:
    return tables.BASE_REQUIREMENTS + tables.INDUSTRY_REQUIREMENTS.get(industry.value, ())


def build_learning_roadmap(industries: Sequence[Industry]) -> list[RoadmapPhase]:
    roadmap: list[RoadmapPhase] = []
    for index, industry in enumerate(industries[:MAX_ROADMAP_PHASES]):
        stage = tables.ROADMAP_STAGES[min(index, len(tables.ROADMAP_STAGES) - 1)]
        skill_names = [s.name for s in _table_skills(tables.INDUSTRY_SKILLS.get(industry.value, ()))]
        roadmap.append(RoadmapPhase(
            phase=RoadmapStage(stage),
            title=f"{industry.value} Skills Development",
            skills=tuple(skill_names[:MAX_PHASE_SKILLS]),
            resources=(f"{industry.value} Training Programs",) + tables.ROADMAP_SHARED_RESOURCES,
            timeframe=f"{3 + index} months",
            status=RoadmapStatus.CURRENT if index == 0 else RoadmapStatus.UPCOMING,
        ))
    return roadmap


# ── Helpers ──────────────────────────────────────────────────────────────────


def _table_skills(rows: Iterable[tuple[str, int, str]]) -> Iterator[Skill]:
    for name, level, category in rows:
        yield Skill(name=name, level=level, category=SkillCategory(category))
