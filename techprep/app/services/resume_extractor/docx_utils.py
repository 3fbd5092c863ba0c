"""
DOCX utilities for resume extraction - paragraph and table text.
"""
from pathlib import Path

from docx import Document


def extract_text_from_docx(file_path: str | Path) -> str:
    """Extract raw text from DOCX using python-docx. Tables follow the body paragraphs."""
    document = Document(str(file_path))
    lines = [p.text for p in document.paragraphs if p.text.strip()]
    for table in document.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                lines.append(" | ".join(cells))
    return "\n".join(lines)
