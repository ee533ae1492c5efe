"""PDF text extraction."""
from __future__ import annotations

import io
from typing import List

import PyPDF2

from fee_chat.errors import ExtractionError


def extract_pdf_text(stream) -> str:
    reader = PyPDF2.PdfReader(stream)
    parts: List[str] = []
    for page in reader.pages:
        parts.append(page.extract_text() or "")
    return "\n".join(parts).strip()


class PyPDF2Extractor:
    """Reads the text layer of a PDF. Scanned pages come back as empty text."""

    def extract_text(self, data: bytes) -> str:
        if not data:
            raise ExtractionError("Empty document")
        try:
            return extract_pdf_text(io.BytesIO(data))
        except Exception as e:
            # PyPDF2 raises a mix of PdfReadError, ValueError and KeyError on damaged files
            raise ExtractionError(f"Could not read PDF: {type(e).__name__}: {e}") from e
