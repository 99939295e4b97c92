"""
Section Extractors — experience entries, education lines and skill tokens.

Each extractor takes the full document lines plus the segmenter output for
its section, so heading lines are treated the same way everywhere. The
section is computed on the fly when a caller passes only the lines.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from skillsync.knowledge.sections import DEGREE_KEYWORDS
from skillsync.models.analysis_models import ExperienceEntry
from skillsync.services.section_segmenter import (
    Section,
    SectionLine,
    is_trigger,
    iter_section,
)

logger = logging.getLogger(__name__)

DATE_SIGNAL_RE = re.compile(r"\d{4}|\d{1,2}/\d{4}|present|current", re.I)
DURATION_RE = re.compile(
    r"\d{4}[\s\-–to]*\d{4}|\d{4}[\s\-–to]*present|\d{4}[\s\-–to]*current", re.I
)
YEAR_RE = re.compile(r"\d{4}")
COMPANY_SPLIT_RE = re.compile(r"[,\-–]")
SKILL_SPLIT_RE = re.compile(r"[,•·\-|]")

DEFAULT_POSITION = "Professional"
DEFAULT_DURATION = "Recent"
DEFAULT_DESCRIPTION = "Professional experience in the field"
MAX_DESCRIPTION = 200
DESCRIPTION_LOOKAHEAD = 4


# ── Experience ───────────────────────────────────────────────────────────────


def extract_experience(
    lines: Sequence[str], section: Optional[Sequence[SectionLine]] = None
) -> list[ExperienceEntry]:
    """
    Build experience entries from date-bearing lines inside Experience.

    A date signal (a year, mm/yyyy, "present" or "current") starts a new
    entry. Position and description come from the surrounding lines of the
    full document, not just the section. `section` is the segmenter output
    for Experience; it is computed when not given.
    """
    if section is None:
        section = list(iter_section(lines, Section.EXPERIENCE))
    entries: list[ExperienceEntry] = []
    current: Optional[ExperienceEntry] = None

    for item in section:
        line = item.text
        if len(line) <= 10 or not DATE_SIGNAL_RE.search(line):
            continue
        if current is not None:
            entries.append(current)
        current = ExperienceEntry(
            company=_company_from_line(line),
            position=_position_near(lines, item.index),
            duration=_duration_from_line(line),
            description=_description_after(lines, item.index),
        )

    if current is not None:
        entries.append(current)

    logger.debug(f"Extracted {len(entries)} experience entries")
    return entries


def _company_from_line(line: str) -> str:
    return COMPANY_SPLIT_RE.split(line, maxsplit=1)[0].strip()


def _position_near(lines: Sequence[str], index: int) -> str:
    """Previous, current, then next line: the first that reads like a title."""
    for i in range(max(0, index - 1), min(len(lines) - 1, index + 1) + 1):
        line = lines[i].strip()
        if 5 < len(line) < 100 and not YEAR_RE.search(line) and "@" not in line:
            return line
    return DEFAULT_POSITION


def _duration_from_line(line: str) -> str:
    match = DURATION_RE.search(line)
    return match.group() if match else DEFAULT_DURATION


def _description_after(lines: Sequence[str], index: int) -> str:
    parts: list[str] = []
    for raw in lines[index + 1 : index + 1 + DESCRIPTION_LOOKAHEAD]:
        line = raw.strip()
        if len(line) > 20 and not YEAR_RE.search(line) and "@" not in line:
            parts.append(line)
    description = " ".join(parts)[:MAX_DESCRIPTION].strip()
    return description or DEFAULT_DESCRIPTION


# ── Education ────────────────────────────────────────────────────────────────


def extract_education(
    lines: Sequence[str], section: Optional[Sequence[SectionLine]] = None
) -> list[str]:
    """
    Collect raw education lines.

    A line counts when it is inside an Education section or, anywhere in the
    document, mentions a degree keyword. Lines are kept verbatim (trimmed).
    Heading lines only contribute their inline content.
    """
    if section is None:
        section = list(iter_section(lines, Section.EDUCATION))
    inside = {item.index: item.text for item in section}

    education: list[str] = []
    for index, raw in enumerate(lines):
        if index in inside:
            line = inside[index]
        else:
            line = raw.strip()
            lowered = line.lower()
            if is_trigger(lowered, Section.EDUCATION) or not any(
                k in lowered for k in DEGREE_KEYWORDS
            ):
                continue
        if len(line) > 5:
            education.append(line)

    logger.debug(f"Extracted {len(education)} education lines")
    return education


# ── Skills ───────────────────────────────────────────────────────────────────


def extract_skills(
    lines: Sequence[str], section: Optional[Sequence[SectionLine]] = None
) -> list[str]:
    """Split lines inside Skills on delimiters; duplicates are kept."""
    if section is None:
        section = list(iter_section(lines, Section.SKILLS))

    skills: list[str] = []
    for item in section:
        if len(item.text) <= 2:
            continue
        for token in SKILL_SPLIT_RE.split(item.text):
            token = token.strip()
            if 2 < len(token) < 30:
                skills.append(token)

    logger.debug(f"Extracted {len(skills)} skill tokens")
    return skills
