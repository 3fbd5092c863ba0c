"""
Technical question bank - questions, MCQ options and expected answers
"""
import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from techprep.app.db.base import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class TechnicalQuestion(Base):
    __tablename__ = "technical_questions"

    id = Column(String(36), primary_key=True, default=_uuid)

    question_text = Column(Text, nullable=False)
    question_type = Column(String(20), nullable=False)  # mcq | short_answer | long_answer
    tech_stack = Column(String(100), nullable=False, index=True)
    difficulty_level = Column(String(10), nullable=False, index=True)  # easy | medium | hard
    topic = Column(String(255), default="")
    is_premium = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    mcq_options = relationship(
        "MCQOption",
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="MCQOption.option_label",
    )
    expected_answer = relationship(
        "ExpectedAnswer",
        back_populates="question",
        cascade="all, delete-orphan",
        uselist=False,
    )


class MCQOption(Base):
    __tablename__ = "mcq_options"

    id = Column(String(36), primary_key=True, default=_uuid)
    question_id = Column(String(36), ForeignKey("technical_questions.id", ondelete="CASCADE"), nullable=False, index=True)

    option_text = Column(Text, nullable=False)
    is_correct = Column(Boolean, default=False)
    option_label = Column(String(1), nullable=False)  # A-D

    question = relationship("TechnicalQuestion", back_populates="mcq_options")


class ExpectedAnswer(Base):
    __tablename__ = "expected_answers"

    id = Column(String(36), primary_key=True, default=_uuid)
    question_id = Column(String(36), ForeignKey("technical_questions.id", ondelete="CASCADE"), nullable=False, index=True)

    sample_answer = Column(Text, nullable=False)
    key_points = Column(JSON, default=list)
    scoring_criteria = Column(Text, nullable=True)

    question = relationship("TechnicalQuestion", back_populates="expected_answer")
