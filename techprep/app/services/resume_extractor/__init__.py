"""
Resume extraction module - pdfplumber for PDF, python-docx for DOCX.
"""
from .docx_utils import extract_text_from_docx
from .extractor import ExtractionError, UnsupportedFileTypeError, detect_file_type, extract_text
from .pdf_utils import extract_text_from_pdf

__all__ = [
    "ExtractionError",
    "UnsupportedFileTypeError",
    "detect_file_type",
    "extract_text",
    "extract_text_from_docx",
    "extract_text_from_pdf",
]
