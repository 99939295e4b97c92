"""
Text cleanup for decoded résumé documents.

Runs at the decode boundary only. The analysis pipeline itself takes text
exactly as it is given.
"""

from __future__ import annotations

import re
import unicodedata

# Typographic characters that PDF/DOCX decoders commonly emit
_REPLACEMENTS = {
    "\u2018": "'",   # left single quote
    "\u2019": "'",   # right single quote
    "\u201c": '"',   # left double quote
    "\u201d": '"',   # right double quote
    "\u2014": "-",   # em-dash (en-dash is kept, date ranges use it)
    "\u2026": "...", # ellipsis
    "\u00a0": " ",   # non-breaking space
    "\u200b": "",    # zero-width space
    "\ufeff": "",    # BOM
    "\r": "",
}

# (cid:12) glyph placeholders left by pdfminer for unmapped fonts
_CID_RE = re.compile(r"\(cid:\d+\)")


def clean_document_text(text: str) -> str:
    """Normalise unicode and whitespace while keeping one line per text line."""
    text = unicodedata.normalize("NFKC", text)
    text = _CID_RE.sub("", text)
    for old, new in _REPLACEMENTS.items():
        text = text.replace(old, new)

    text = re.sub(r"[ \t]+", " ", text)
    text = "\n".join(line.strip() for line in text.splitlines())

    # Page breaks and layout gaps: keep at most one blank line
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()
