"""
Resume - one row per parsed upload, plus the interview questions generated from its text
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from techprep.app.db.base import Base


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=True, index=True)  # Supabase auth user id, when known

    file_name = Column(String(255), nullable=False)
    file_type = Column(String(10), nullable=False)  # ".pdf" or ".docx"
    extracted_text = Column(Text, nullable=False, default="")
    parsed_at = Column(String(64), nullable=False)  # ISO 8601 string, as returned to clients

    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    questions = relationship(
        "ResumeQuestion",
        back_populates="resume",
        cascade="all, delete-orphan",
        order_by="ResumeQuestion.position",
    )


class ResumeQuestion(Base):
    __tablename__ = "resume_questions"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(String(36), ForeignKey("resumes.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    category = Column(String(100), nullable=False)
    question = Column(Text, nullable=False)
    difficulty = Column(String(20), nullable=False)

    resume = relationship("Resume", back_populates="questions")
