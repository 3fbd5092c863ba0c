"""
Technical question bank service - listing, filtering, detail lookup and user responses
"""
from typing import Any, Iterable, Optional

from sqlalchemy.orm import Session, selectinload

from techprep.app.core.config import DEFAULT_USER_ID
from techprep.app.core.logging_config import get_logger
from techprep.app.models.technical_question import MCQOption, TechnicalQuestion
from techprep.app.models.user_response import UserResponse
from techprep.app.services.feedback_service import format_feedback_text

logger = get_logger("services.tech_questions")


class QuestionNotFoundError(LookupError):
    pass


class InvalidAnswerError(ValueError):
    pass


def is_correct_option(options: Iterable[MCQOption], option_id: str) -> bool:
    """True when option_id is the id of the option flagged correct."""
    correct = next((o for o in options if o.is_correct), None)
    return correct is not None and correct.id == option_id


class TechQuestionService:
    @staticmethod
    def get_all_questions(db: Session) -> list[TechnicalQuestion]:
        return db.query(TechnicalQuestion).order_by(TechnicalQuestion.created_at).all()

    @staticmethod
    def get_questions_by_tech_stack(db: Session, tech_stack: str) -> list[TechnicalQuestion]:
        return TechQuestionService.filter_questions(db, tech_stack=tech_stack)

    @staticmethod
    def get_questions_by_difficulty(db: Session, level: str) -> list[TechnicalQuestion]:
        return TechQuestionService.filter_questions(db, difficulty=level)

    @staticmethod
    def filter_questions(
        db: Session,
        tech_stack: Optional[str] = None,
        difficulty: Optional[str] = None,
    ) -> list[TechnicalQuestion]:
        """Exact-match filters; empty values are ignored."""
        query = db.query(TechnicalQuestion)
        if tech_stack:
            query = query.filter(TechnicalQuestion.tech_stack == tech_stack)
        if difficulty:
            query = query.filter(TechnicalQuestion.difficulty_level == difficulty)
        return query.order_by(TechnicalQuestion.created_at).all()

    @staticmethod
    def get_tech_stacks(db: Session) -> list[str]:
        """Distinct tech stack labels, sorted."""
        rows = db.query(TechnicalQuestion.tech_stack).distinct().all()
        return sorted(r[0] for r in rows)

    @staticmethod
    def get_question(db: Session, question_id: str) -> TechnicalQuestion:
        question = (
            db.query(TechnicalQuestion)
            .options(selectinload(TechnicalQuestion.mcq_options), selectinload(TechnicalQuestion.expected_answer))
            .filter(TechnicalQuestion.id == question_id)
            .first()
        )
        if not question:
            raise QuestionNotFoundError(f"Question {question_id} not found")
        return question

    @staticmethod
    def get_question_with_details(db: Session, question_id: str) -> dict[str, Any]:
        """
        Question plus either its MCQ options (mcq) or its expected answer (other types).
        Expected answer may be None when none was seeded.
        """
        question = TechQuestionService.get_question(db, question_id)
        if question.question_type == "mcq":
            return {"question": question, "mcqOptions": list(question.mcq_options)}
        return {"question": question, "expectedAnswer": question.expected_answer}

    @staticmethod
    def submit_user_response(
        db: Session,
        question_id: str,
        user_answer: str,
        user_id: Optional[str] = None,
        time_taken: Optional[int] = None,
    ) -> dict[str, Any]:
        """
        Record an answer. For MCQ the answer must be an option id of this question;
        the result then carries isCorrect and the correct option.
        """
        question = TechQuestionService.get_question(db, question_id)
        result: dict[str, Any] = {}
        if question.question_type == "mcq":
            options = list(question.mcq_options)
            if user_answer not in {o.id for o in options}:
                raise InvalidAnswerError("Selected option does not belong to this question")
            result["isCorrect"] = is_correct_option(options, user_answer)
            result["correctOption"] = next((o for o in options if o.is_correct), None)

        response = UserResponse(
            user_id=user_id or DEFAULT_USER_ID,
            question_id=question.id,
            user_answer=user_answer,
            time_taken=time_taken,
        )
        db.add(response)
        db.commit()
        db.refresh(response)
        logger.info(
            "Response submitted response_id=%s user_id=%s question_id=%s type=%s",
            response.id,
            response.user_id,
            question.id,
            question.question_type,
        )
        result["response"] = response
        return result

    @staticmethod
    def get_user_responses(db: Session, user_id: str) -> list[UserResponse]:
        return (
            db.query(UserResponse)
            .filter(UserResponse.user_id == user_id)
            .order_by(UserResponse.created_at.desc())
            .all()
        )

    @staticmethod
    def get_response(db: Session, response_id: str) -> UserResponse:
        response = db.query(UserResponse).filter(UserResponse.id == response_id).first()
        if not response:
            raise QuestionNotFoundError(f"Response {response_id} not found")
        return response

    @staticmethod
    def get_feedback_target(db: Session, response_id: str) -> tuple[UserResponse, TechnicalQuestion]:
        """
        Response and its question for mock feedback. MCQ answers are graded by
        option equality only, so they are rejected with InvalidAnswerError.
        """
        response = TechQuestionService.get_response(db, response_id)
        question = TechQuestionService.get_question(db, response.question_id)
        if question.question_type == "mcq":
            raise InvalidAnswerError("Feedback is only available for short and long answer questions")
        return response, question

    @staticmethod
    def write_feedback(db: Session, response: UserResponse, feedback: dict[str, Any]) -> UserResponse:
        """Store mock feedback on the response row."""
        response.ai_score = float(feedback["overall"])
        response.ai_feedback = format_feedback_text(feedback)
        db.commit()
        db.refresh(response)
        return response
