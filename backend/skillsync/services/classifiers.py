"""
Classifiers — industries and role archetypes from whole-document keywords.

Both are plain substring lookups against the lowercased text and are fully
deterministic. Result order follows the table declaration order.
"""

from __future__ import annotations

from skillsync.knowledge.industries import INDUSTRY_KEYWORDS
from skillsync.knowledge.roles import ROLE_KEYWORDS
from skillsync.models.analysis_models import Industry, RoleArchetype


def classify_industries(text: str) -> list[Industry]:
    """Every industry with at least one keyword present in the text."""
    lowered = text.lower()
    return [
        Industry(industry)
        for industry, keywords in INDUSTRY_KEYWORDS.items()
        if any(keyword in lowered for keyword in keywords)
    ]


def classify_roles(text: str) -> list[RoleArchetype]:
    """Every role keyword present in the text, without duplicates."""
    lowered = text.lower()
    roles: list[RoleArchetype] = []
    for keyword in ROLE_KEYWORDS:
        role = RoleArchetype(keyword)
        if keyword in lowered and role not in roles:
            roles.append(role)
    return roles
