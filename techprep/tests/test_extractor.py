"""Tests for upload type detection and text extraction"""
from unittest.mock import MagicMock, patch

import pytest
from docx import Document

from techprep.app.core.config import DOCX_MIME_TYPE, PDF_MIME_TYPE
from techprep.app.services.resume_extractor import (
    ExtractionError,
    UnsupportedFileTypeError,
    detect_file_type,
    extract_text,
    extract_text_from_pdf,
)


def test_detect_pdf_and_docx():
    assert detect_file_type("cv.pdf", PDF_MIME_TYPE) == ".pdf"
    assert detect_file_type("CV.DOCX", DOCX_MIME_TYPE) == ".docx"


def test_detect_ignores_content_type_parameters():
    assert detect_file_type("cv.pdf", "application/pdf; charset=binary") == ".pdf"


@pytest.mark.parametrize(
    "filename,content_type",
    [
        ("cv.txt", "text/plain"),
        ("cv.doc", "application/msword"),
        ("cv.pdf", "text/plain"),
        ("cv", PDF_MIME_TYPE),
        ("cv.pdf", None),
    ],
)
def test_detect_rejects_unsupported(filename, content_type):
    with pytest.raises(UnsupportedFileTypeError, match="Please upload PDF or DOCX files"):
        detect_file_type(filename, content_type)


def test_detect_rejects_mismatched_extension():
    with pytest.raises(UnsupportedFileTypeError):
        detect_file_type("cv.docx", PDF_MIME_TYPE)


def test_extract_docx_paragraphs_and_tables(tmp_path):
    path = tmp_path / "cv.docx"
    doc = Document()
    doc.add_paragraph("Jane Doe")
    doc.add_paragraph("")
    doc.add_paragraph("Python developer")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Skills"
    table.rows[0].cells[1].text = "Docker"
    doc.save(str(path))

    text = extract_text(path, ".docx")
    assert text == "Jane Doe\nPython developer\nSkills | Docker"


def test_extract_docx_failure_raises_extraction_error(tmp_path):
    path = tmp_path / "broken.docx"
    path.write_bytes(b"not a zip archive")
    with pytest.raises(ExtractionError, match="Failed to extract DOCX text"):
        extract_text(path, ".docx")


def test_extract_pdf_failure_raises_extraction_error(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"not a pdf")
    with patch(
        "techprep.app.services.resume_extractor.extractor.extract_text_from_pdf",
        side_effect=ValueError("bad xref"),
    ):
        with pytest.raises(ExtractionError, match="Failed to extract PDF text: bad xref"):
            extract_text(path, ".pdf")


def test_extract_pdf_returns_parser_text(tmp_path):
    path = tmp_path / "cv.pdf"
    path.write_bytes(b"%PDF-1.4")
    with patch(
        "techprep.app.services.resume_extractor.extractor.extract_text_from_pdf",
        return_value="page one\npage two",
    ) as mock_pdf:
        assert extract_text(path, ".pdf") == "page one\npage two"
    mock_pdf.assert_called_once_with(path)


def test_extract_unknown_type():
    with pytest.raises(UnsupportedFileTypeError):
        extract_text("cv.txt", ".txt")


def _fake_page(text):
    page = MagicMock()
    page.extract_text.return_value = text
    return page


def test_extract_text_from_pdf_joins_pages_and_skips_empty(tmp_path):
    path = tmp_path / "cv.pdf"
    fake_pdf = MagicMock()
    fake_pdf.pages = [_fake_page("Jane Doe"), _fake_page(None), _fake_page(""), _fake_page("Python, SQL")]
    with patch("techprep.app.services.resume_extractor.pdf_utils.pdfplumber.open") as mock_open:
        mock_open.return_value.__enter__.return_value = fake_pdf
        text = extract_text_from_pdf(path)
    assert text == "Jane Doe\nPython, SQL"
    mock_open.assert_called_once_with(path)


def test_extract_text_from_pdf_without_text_layer(tmp_path):
    fake_pdf = MagicMock()
    fake_pdf.pages = [_fake_page(None)]
    with patch("techprep.app.services.resume_extractor.pdf_utils.pdfplumber.open") as mock_open:
        mock_open.return_value.__enter__.return_value = fake_pdf
        assert extract_text_from_pdf(tmp_path / "scan.pdf") == ""
