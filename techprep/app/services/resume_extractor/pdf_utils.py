"""
PDF text for uploaded resumes, page by page with pdfplumber.
"""
from pathlib import Path

import pdfplumber

from techprep.app.core.logging_config import get_logger

logger = get_logger("services.resume_extractor.pdf")


def extract_text_from_pdf(file_path: str | Path) -> str:
    """Text of every page that has any, joined with newlines. Image-only pages are skipped."""
    pages: list[str] = []
    with pdfplumber.open(file_path) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                pages.append(page_text)
        logger.debug("PDF pages=%d with_text=%d path=%s", len(pdf.pages), len(pages), file_path)
    return "\n".join(pages)
