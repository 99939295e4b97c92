"""
Contact Extractor — name, email and phone from the top of a résumé.

These are positional/regex heuristics. The phone pattern is deliberately
loose and can pick up other long numeric runs.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

DEFAULT_NAME = "Professional"
NAME_SCAN_LINES = 5

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"[+]?[1-9]?[\d\s\-()]{10,}")


def extract_name(lines: Sequence[str]) -> str:
    """First of the leading lines that looks like a person's name."""
    for raw in lines[:NAME_SCAN_LINES]:
        line = raw.strip()
        if (
            2 < len(line) < 50
            and "@" not in line
            and "+" not in line
            and "resume" not in line.lower()
        ):
            return line
    return DEFAULT_NAME


def extract_email(text: str) -> Optional[str]:
    match = EMAIL_RE.search(text)
    return match.group() if match else None


def extract_phone(text: str) -> Optional[str]:
    # A run of blank space satisfies the pattern too
    for match in PHONE_RE.finditer(text):
        candidate = match.group().strip()
        if candidate:
            return candidate
    return None
