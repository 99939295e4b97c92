"""
Section Segmenter — attribute résumé lines to Experience / Education / Skills.

Plain text has no markup, so sections are recovered from keyword headings:
  • A line containing a trigger keyword opens its section (the heading itself
    is not content)
  • While inside, a heading that belongs to another section closes it
  • Each target section is tracked independently, so one line may sit in
    more than one section

Inline headings ("Skills: Python, SQL") open the section and yield the text
after the colon as content for that line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from skillsync.knowledge.sections import (
    EDUCATION_TERMINATORS,
    EDUCATION_TRIGGERS,
    EXPERIENCE_TERMINATORS,
    EXPERIENCE_TRIGGERS,
    SKILLS_TERMINATORS,
    SKILLS_TRIGGERS,
)


class Section(str, Enum):
    """Tracker states."""

    NONE = "none"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"


TRIGGERS: dict[Section, tuple[str, ...]] = {
    Section.EXPERIENCE: EXPERIENCE_TRIGGERS,
    Section.EDUCATION: EDUCATION_TRIGGERS,
    Section.SKILLS: SKILLS_TRIGGERS,
}

TERMINATORS: dict[Section, tuple[str, ...]] = {
    Section.EXPERIENCE: EXPERIENCE_TERMINATORS,
    Section.EDUCATION: EDUCATION_TERMINATORS,
    Section.SKILLS: SKILLS_TERMINATORS,
}


MAX_HEADING_WORDS = 3


@dataclass(frozen=True)
class SectionLine:
    """A line attributed to a section, with its index in the full document."""

    index: int
    text: str


# ── Public API ───────────────────────────────────────────────────────────────


def split_lines(text: str) -> list[str]:
    """Split raw text into lines, keeping blank lines so indices stay stable."""
    return text.split("\n")


def is_trigger(lowered: str, target: Section) -> bool:
    return any(keyword in lowered for keyword in TRIGGERS.get(target, ()))


def advance(state: Section, lowered: str, target: Section) -> tuple[Section, bool]:
    """
    Pure transition for the tracker of `target`.

    Returns the next state and whether `lowered` was a trigger line.
    """
    if target is Section.NONE:
        return Section.NONE, False
    if is_trigger(lowered, target):
        return target, True
    if state is target and any(word in lowered for word in TERMINATORS[target]):
        return Section.NONE, False
    return state, False


def iter_section(lines: Sequence[str], target: Section) -> Iterator[SectionLine]:
    """Yield trimmed lines that fall inside `target`, in document order."""
    state = Section.NONE
    for index, raw in enumerate(lines):
        line = raw.strip()
        state, triggered = advance(state, line.lower(), target)
        if triggered:
            inline = inline_content(line, target)
            if inline:
                yield SectionLine(index, inline)
            continue
        if state is target:
            yield SectionLine(index, line)


def segment(lines: Sequence[str]) -> dict[Section, list[SectionLine]]:
    """Attribute lines to every target section in one call."""
    return {
        target: list(iter_section(lines, target))
        for target in (Section.EXPERIENCE, Section.EDUCATION, Section.SKILLS)
    }


# ── Helpers ──────────────────────────────────────────────────────────────────


def inline_content(line: str, target: Section) -> str:
    """Text after 'Heading:' when the part before the colon is a heading."""
    head, sep, rest = line.partition(":")
    if not sep or not is_heading(head, target):
        return ""
    return rest.strip()


def is_heading(head: str, target: Section) -> bool:
    """
    A short label that ends in a section word: "Skills", "Technical Skills",
    "Employment History". "Technical Lead" mentions a trigger but is a title.
    """
    words = head.lower().split()
    if not words or len(words) > MAX_HEADING_WORDS or not is_trigger(head.lower(), target):
        return False
    return any(words[-1].startswith(keyword.split()[-1]) for keyword in TRIGGERS[target])
