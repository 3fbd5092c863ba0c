"""
Technical question bank Pydantic schemas
"""
from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field


QuestionType = Literal["mcq", "short_answer", "long_answer"]
DifficultyLevel = Literal["easy", "medium", "hard"]


class TechnicalQuestionOut(BaseModel):
    id: str
    question_text: str
    question_type: QuestionType
    tech_stack: str
    difficulty_level: DifficultyLevel
    topic: str = ""
    is_premium: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MCQOptionOut(BaseModel):
    id: str
    question_id: str
    option_text: str
    is_correct: bool
    option_label: Literal["A", "B", "C", "D"]

    class Config:
        from_attributes = True


class ExpectedAnswerOut(BaseModel):
    id: str
    question_id: str
    sample_answer: str
    key_points: Optional[Any] = None
    scoring_criteria: Optional[str] = None

    class Config:
        from_attributes = True


class QuestionListResponse(BaseModel):
    questions: List[TechnicalQuestionOut] = Field(default_factory=list)
    techStacks: List[str] = Field(default_factory=list)


class QuestionDetailResponse(BaseModel):
    question: TechnicalQuestionOut
    mcqOptions: Optional[List[MCQOptionOut]] = None
    expectedAnswer: Optional[ExpectedAnswerOut] = None


class UserResponseIn(BaseModel):
    """Answer submission. For MCQ questions user_answer is the chosen option id."""
    user_id: Optional[str] = None
    question_id: str
    user_answer: str = Field(..., min_length=1)
    time_taken: Optional[int] = Field(default=None, ge=0)


class UserResponseOut(BaseModel):
    id: str
    user_id: str
    question_id: str
    user_answer: str
    ai_score: Optional[float] = None
    ai_feedback: Optional[str] = None
    time_taken: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SubmitResponseResult(BaseModel):
    success: bool = True
    response: UserResponseOut
    isCorrect: Optional[bool] = None
    correctOption: Optional[MCQOptionOut] = None


class UserResponseListResponse(BaseModel):
    responses: List[UserResponseOut] = Field(default_factory=list)


class FeedbackOut(BaseModel):
    accuracy: int
    completeness: int
    clarity: int
    relevance: int
    overall: int
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    summary: str = ""


class FeedbackResponse(BaseModel):
    success: bool = True
    response: UserResponseOut
    feedback: FeedbackOut
