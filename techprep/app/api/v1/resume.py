"""
Resume upload endpoints - saves the file temporarily, extracts text with pdfplumber/python-docx,
generates interview questions and writes the record through every resume store
"""
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from techprep.app.core.config import UPLOAD_CHUNK_SIZE, settings
from techprep.app.core.dependencies import get_db, get_optional_user_id
from techprep.app.core.logging_config import get_logger
from techprep.app.schemas.resume import (
    GeneratedQuestionsResponse,
    GenerateQuestionsIn,
    ParsedResume,
    ResumeListResponse,
    StoredResumeOut,
    UploadResumeData,
    UploadResumeResponse,
    resume_model_to_out,
)
from techprep.app.services.question_generator import generate_questions_from_resume
from techprep.app.services.resume_extractor import (
    ExtractionError,
    UnsupportedFileTypeError,
    detect_file_type,
    extract_text,
)
from techprep.app.services.resume_store import (
    DatabaseResumeStore,
    JsonFileResumeStore,
    LocalResumeStore,
    StorageError,
    default_stores,
    find_resume,
    list_merged,
    save_with_fallback,
)

logger = get_logger("api.resume")
router = APIRouter()


class FileTooLargeError(ValueError):
    pass


async def _save_upload(file: UploadFile, dest: Path) -> int:
    """Stream the upload to dest in chunks. Raises FileTooLargeError past max_upload_bytes."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    size = 0
    with dest.open("wb") as out:
        while True:
            chunk = await file.read(UPLOAD_CHUNK_SIZE)
            if not chunk:
                break
            size += len(chunk)
            if size > settings.max_upload_bytes:
                raise FileTooLargeError(
                    f"File too large. Maximum size is {settings.max_upload_bytes // (1024 * 1024)} MB."
                )
            out.write(chunk)
    return size


@router.post("/upload-resume", response_model=UploadResumeResponse)
async def upload_resume(
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
):
    """
    Upload a resume (PDF or DOCX, up to 10 MB) and extract its text.

    Returns:
        - **data.id**: record id
        - **data.fileName**: original filename
        - **data.extractedText** / **data.textLength**: extracted text and its length
        - **data.parsedAt**: ISO 8601 timestamp
        - **storedIn**: stores that accepted the record
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    try:
        file_type = detect_file_type(file.filename, file.content_type)
    except UnsupportedFileTypeError as e:
        logger.info("Rejected upload filename=%s content_type=%s", file.filename, file.content_type)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    tmp_path = Path(settings.upload_dir) / f"{uuid.uuid4().hex}{file_type}"
    try:
        try:
            size = await _save_upload(file, tmp_path)
        except FileTooLargeError as e:
            raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
        except OSError as e:
            logger.exception("Failed to save upload filename=%s", file.filename)
            raise HTTPException(status_code=500, detail=f"Failed to save file: {str(e)}")

        try:
            extracted_text = extract_text(tmp_path, file_type)
        except ExtractionError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    finally:
        tmp_path.unlink(missing_ok=True)

    record = ParsedResume(
        id=str(uuid.uuid4()),
        fileName=file.filename,
        extractedText=extracted_text,
        parsedAt=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        fileType=file_type,
        userId=user_id,
    )
    questions = generate_questions_from_resume(extracted_text)

    try:
        stored_in = save_with_fallback(record, questions, default_stores(db))
    except StorageError as e:
        logger.error("Resume could not be stored in any store filename=%s", file.filename)
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(
        "Resume parsed resume_id=%s file_type=%s size_bytes=%d text_length=%d questions=%d",
        record.id,
        file_type,
        size,
        len(extracted_text),
        len(questions),
    )
    return UploadResumeResponse(
        message="Resume parsed and saved successfully",
        data=UploadResumeData(
            id=record.id,
            fileName=record.fileName,
            textLength=len(extracted_text),
            parsedAt=record.parsedAt,
            extractedText=extracted_text,
        ),
        storedIn=stored_in,
    )


@router.get("/get-resumes", response_model=ResumeListResponse)
def get_resumes():
    """All parsed resumes: JSON file store records, then any the local key-value store holds beyond them."""
    try:
        resumes = list_merged([JsonFileResumeStore(), LocalResumeStore()])
    except Exception:
        logger.exception("Error fetching resumes")
        raise HTTPException(status_code=500, detail="Failed to fetch resumes")
    return ResumeListResponse(resumes=resumes)


@router.get("/resumes", response_model=List[StoredResumeOut])
def list_stored_resumes(db: Session = Depends(get_db)):
    """Database rows newest first, each with the questions generated at upload time."""
    return [resume_model_to_out(r) for r in DatabaseResumeStore(db).list_rows()]


@router.get("/resumes/{resume_id}/questions", response_model=GeneratedQuestionsResponse)
def get_resume_questions(resume_id: str, db: Session = Depends(get_db)):
    """Interview questions for a stored resume, generated from its extracted text."""
    stores = [DatabaseResumeStore(db), JsonFileResumeStore(), LocalResumeStore()]
    resume = find_resume(resume_id, stores)
    if not resume:
        raise HTTPException(status_code=404, detail="Resume not found")
    return GeneratedQuestionsResponse(
        resumeId=resume.id,
        questions=generate_questions_from_resume(resume.extractedText),
    )


@router.post("/generate-questions", response_model=GeneratedQuestionsResponse)
def generate_questions(payload: GenerateQuestionsIn):
    """Interview questions for arbitrary resume text."""
    return GeneratedQuestionsResponse(questions=generate_questions_from_resume(payload.text))
