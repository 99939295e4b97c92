"""
Text Extraction — decode uploaded PDF/DOCX files into plain text.

This is the boundary in front of the analysis pipeline:
  • PDF via pdfplumber, page by page
  • DOCX via python-docx, paragraphs then table cells
  • Cleaned with clean_document_text
"""

from __future__ import annotations

import logging
from io import BytesIO

import docx
import pdfplumber

from skillsync.config import settings
from skillsync.utils.text_cleanup import clean_document_text

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("pdf", "docx")


def file_extension(file_name: str) -> str:
    return file_name.rsplit(".", 1)[-1].lower() if "." in file_name else ""


def extract_document_text(file_bytes: bytes, file_name: str) -> str:
    """Decode an uploaded document. Raises ValueError when nothing usable comes out."""
    ext = file_extension(file_name)
    if ext == "pdf":
        raw_text = _extract_pdf_text(file_bytes)
    elif ext == "docx":
        raw_text = _extract_docx_text(file_bytes)
    else:
        raise ValueError(f"Unsupported file type: .{ext}. Please upload PDF or DOCX.")

    text = clean_document_text(raw_text)
    if len(text) < settings.min_text_chars:
        raise ValueError(
            f"Could not extract meaningful text from {file_name}. "
            "The file may be image-based or corrupted."
        )

    logger.info(f"Decoded '{file_name}' ({len(text)} chars)")
    return text


def _extract_pdf_text(file_bytes: bytes) -> str:
    pages: list[str] = []
    with pdfplumber.open(BytesIO(file_bytes)) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                pages.append(page_text)
    return "\n\n".join(pages)


def _extract_docx_text(file_bytes: bytes) -> str:
    document = docx.Document(BytesIO(file_bytes))
    parts = [p.text for p in document.paragraphs if p.text.strip()]

    # Layout tables (two-column templates) hold real content
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                if cell.text.strip():
                    parts.append(cell.text)
    return "\n".join(parts)
