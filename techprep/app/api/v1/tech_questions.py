"""
Technical question bank API - listing/filtering, question detail, answer submission,
response history and mock feedback
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from techprep.app.core.dependencies import get_db, get_optional_user_id
from techprep.app.core.logging_config import get_logger
from techprep.app.schemas.tech_question import (
    DifficultyLevel,
    ExpectedAnswerOut,
    FeedbackOut,
    FeedbackResponse,
    MCQOptionOut,
    QuestionDetailResponse,
    QuestionListResponse,
    SubmitResponseResult,
    TechnicalQuestionOut,
    UserResponseIn,
    UserResponseListResponse,
    UserResponseOut,
)
from techprep.app.services.feedback_service import generate_mock_feedback
from techprep.app.services.tech_question_service import (
    InvalidAnswerError,
    QuestionNotFoundError,
    TechQuestionService,
)
from techprep.app.utils import cache

logger = get_logger("api.tech_questions")
router = APIRouter(prefix="/tech-questions", tags=["tech-questions"])


def _build_question_list(db: Session, tech_stack: Optional[str], difficulty: Optional[str]) -> dict:
    questions = TechQuestionService.filter_questions(db, tech_stack=tech_stack, difficulty=difficulty)
    return QuestionListResponse(
        questions=[TechnicalQuestionOut.model_validate(q) for q in questions],
        techStacks=TechQuestionService.get_tech_stacks(db),
    ).model_dump(mode="json")


@router.get("", response_model=QuestionListResponse)
async def list_questions(
    tech_stack: Optional[str] = Query(None),
    difficulty: Optional[DifficultyLevel] = Query(None),
    db: Session = Depends(get_db),
):
    """List questions, optionally filtered by tech stack and/or difficulty. Cached in Redis when configured."""
    key = cache.question_list_key(tech_stack, difficulty)
    cached = await cache.get(key)
    if cached is not None:
        return cached
    data = _build_question_list(db, tech_stack, difficulty)
    await cache.set(key, data)
    return data


@router.get("/responses/{user_id}", response_model=UserResponseListResponse)
def list_user_responses(user_id: str, db: Session = Depends(get_db)):
    """All responses submitted by a user, newest first."""
    responses = TechQuestionService.get_user_responses(db, user_id)
    return UserResponseListResponse(responses=[UserResponseOut.model_validate(r) for r in responses])


@router.post("/submit-response", response_model=SubmitResponseResult)
def submit_response(
    payload: UserResponseIn,
    db: Session = Depends(get_db),
    token_user_id: Optional[str] = Depends(get_optional_user_id),
):
    """
    Record an answer.

    - **user_answer**: option id for MCQ questions, free text otherwise
    - MCQ results include **isCorrect** and **correctOption**
    """
    try:
        result = TechQuestionService.submit_user_response(
            db,
            question_id=payload.question_id,
            user_answer=payload.user_answer,
            user_id=payload.user_id or token_user_id,
            time_taken=payload.time_taken,
        )
    except QuestionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidAnswerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    correct = result.get("correctOption")
    return SubmitResponseResult(
        response=UserResponseOut.model_validate(result["response"]),
        isCorrect=result.get("isCorrect"),
        correctOption=MCQOptionOut.model_validate(correct) if correct is not None else None,
    )


@router.post("/responses/{response_id}/feedback", response_model=FeedbackResponse)
def request_feedback(response_id: str, db: Session = Depends(get_db)):
    """Mock AI feedback for a short or long answer (400 for MCQ); score and text are written back to the response."""
    try:
        response, question = TechQuestionService.get_feedback_target(db, response_id)
    except QuestionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidAnswerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    feedback = generate_mock_feedback(question.tech_stack, response.user_answer)
    response = TechQuestionService.write_feedback(db, response, feedback)
    logger.info("Mock feedback stored response_id=%s overall=%s", response.id, feedback["overall"])
    return FeedbackResponse(
        response=UserResponseOut.model_validate(response),
        feedback=FeedbackOut(**feedback),
    )


@router.get("/{question_id}", response_model=QuestionDetailResponse, response_model_exclude_none=True)
def get_question_detail(question_id: str, db: Session = Depends(get_db)):
    """Question with its MCQ options (mcq) or expected answer (short/long answer)."""
    try:
        details = TechQuestionService.get_question_with_details(db, question_id)
    except QuestionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    question = TechnicalQuestionOut.model_validate(details["question"])
    if "mcqOptions" in details:
        return QuestionDetailResponse(
            question=question,
            mcqOptions=[MCQOptionOut.model_validate(o) for o in details["mcqOptions"]],
        )
    expected = details.get("expectedAnswer")
    return QuestionDetailResponse(
        question=question,
        expectedAnswer=ExpectedAnswerOut.model_validate(expected) if expected is not None else None,
    )
