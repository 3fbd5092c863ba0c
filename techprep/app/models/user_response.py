"""
UserResponse - one row per submitted answer; ai_score/ai_feedback are filled by the mock feedback step
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text

from techprep.app.db.base import Base


class UserResponse(Base):
    __tablename__ = "user_responses"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=False, index=True)
    question_id = Column(String(36), ForeignKey("technical_questions.id", ondelete="CASCADE"), nullable=False, index=True)

    user_answer = Column(Text, nullable=False)
    time_taken = Column(Integer, nullable=True)  # seconds
    ai_score = Column(Float, nullable=True)
    ai_feedback = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
