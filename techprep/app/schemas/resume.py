"""
Resume Pydantic schemas - record shape shared by the JSON file, key-value and database stores
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class GeneratedQuestion(BaseModel):
    """Canned interview question picked by keyword match"""
    category: str
    question: str
    difficulty: str


class ParsedResume(BaseModel):
    """Stored resume record (camelCase keys, as persisted in resumes.json)"""
    id: str
    fileName: str
    extractedText: str = ""
    parsedAt: str
    fileType: str
    userId: Optional[str] = None


class UploadResumeData(BaseModel):
    id: str
    fileName: str
    textLength: int
    parsedAt: str
    extractedText: str


class UploadResumeResponse(BaseModel):
    success: bool = True
    message: str
    data: UploadResumeData
    storedIn: List[str] = Field(default_factory=list)


class ResumeListResponse(BaseModel):
    resumes: List[ParsedResume] = Field(default_factory=list)


class ResumeQuestionOut(BaseModel):
    id: int
    category: str
    question: str
    difficulty: str

    class Config:
        from_attributes = True


class StoredResumeOut(BaseModel):
    """Database row with its generated questions"""
    id: str
    file_name: str
    file_type: str
    extracted_text: str
    parsed_at: str
    user_id: Optional[str] = None
    resume_questions: List[ResumeQuestionOut] = Field(default_factory=list)


class GenerateQuestionsIn(BaseModel):
    text: str = ""


class GeneratedQuestionsResponse(BaseModel):
    resumeId: Optional[str] = None
    questions: List[GeneratedQuestion] = Field(default_factory=list)


def resume_model_to_out(resume) -> StoredResumeOut:
    """Convert Resume DB model to the listing schema."""
    return StoredResumeOut(
        id=resume.id,
        file_name=resume.file_name,
        file_type=resume.file_type,
        extracted_text=resume.extracted_text or "",
        parsed_at=resume.parsed_at,
        user_id=resume.user_id,
        resume_questions=[ResumeQuestionOut.model_validate(q) for q in resume.questions],
    )
