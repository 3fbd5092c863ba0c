"""
File type validation and text extraction dispatch for uploaded resumes.
"""
from pathlib import Path

from techprep.app.core.config import ALLOWED_EXTENSIONS, ALLOWED_MIME_TYPES
from techprep.app.core.logging_config import get_logger

from .docx_utils import extract_text_from_docx
from .pdf_utils import extract_text_from_pdf

logger = get_logger("services.resume_extractor")


class UnsupportedFileTypeError(ValueError):
    """Upload is neither a PDF nor a DOCX."""


class ExtractionError(RuntimeError):
    """Parsing library failed on an accepted file."""


def detect_file_type(filename: str | None, content_type: str | None) -> str:
    """
    Return ".pdf" or ".docx" for an accepted upload.

    Both the declared MIME type and the filename extension must be allowed,
    and they must agree with each other.
    """
    suffix = Path(filename or "").suffix.lower()
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime not in ALLOWED_MIME_TYPES or suffix not in ALLOWED_EXTENSIONS:
        raise UnsupportedFileTypeError("Unsupported file type. Please upload PDF or DOCX files.")
    if ALLOWED_MIME_TYPES[mime] != suffix:
        raise UnsupportedFileTypeError(
            f"File extension {suffix} does not match content type {mime}."
        )
    return suffix


def extract_text(file_path: str | Path, file_type: str) -> str:
    """Extract raw text from a stored upload. Raises ExtractionError on parser failure."""
    if file_type == ".pdf":
        try:
            return extract_text_from_pdf(file_path)
        except Exception as exc:
            logger.warning("PDF extraction failed path=%s: %s", file_path, exc)
            raise ExtractionError(f"Failed to extract PDF text: {exc}") from exc
    if file_type == ".docx":
        try:
            return extract_text_from_docx(file_path)
        except Exception as exc:
            logger.warning("DOCX extraction failed path=%s: %s", file_path, exc)
            raise ExtractionError("Failed to extract DOCX text") from exc
    raise UnsupportedFileTypeError(f"Unsupported file type: {file_type}")
