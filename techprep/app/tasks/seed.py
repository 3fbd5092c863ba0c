"""
Seed the technical question bank with sample questions, MCQ options and expected answers.
Run via: python -m techprep.app.tasks.seed
"""
import asyncio

from sqlalchemy.orm import Session

from techprep.app.core.logging_config import get_logger, setup_logging
from techprep.app.db.base import Base
from techprep.app.db.session import SessionLocal, engine
from techprep.app.models.technical_question import ExpectedAnswer, MCQOption, TechnicalQuestion
from techprep.app.utils import cache

# Import models so they register with Base.metadata
import techprep.app.models  # noqa: F401

logger = get_logger("tasks.seed")

SAMPLE_QUESTIONS = [
    {
        "question_text": "What is the difference between let, const, and var in JavaScript?",
        "question_type": "long_answer",
        "tech_stack": "JavaScript",
        "difficulty_level": "medium",
        "topic": "Variables and Scoping",
        "is_premium": False,
        "expected_answer": {
            "sample_answer": (
                "let allows block-scoped variables that can be reassigned. const declares block-scoped "
                "constants that cannot be reassigned. var declares function-scoped variables that can be "
                "reassigned and are hoisted."
            ),
            "key_points": [
                "Block scope vs function scope",
                "Reassignment capabilities",
                "Hoisting behavior",
                "Temporal dead zone",
            ],
            "scoring_criteria": "Accuracy, completeness, and examples provided",
        },
    },
    {
        "question_text": "Explain the concept of React hooks and give examples of commonly used hooks.",
        "question_type": "long_answer",
        "tech_stack": "React",
        "difficulty_level": "medium",
        "topic": "React Hooks",
        "is_premium": False,
        "expected_answer": {
            "sample_answer": (
                "React hooks are functions that let you use state and other React features in functional "
                "components. Common hooks include useState for state management, useEffect for side effects, "
                "useContext for context API, useRef for references, and useReducer for complex state logic."
            ),
            "key_points": ["useState", "useEffect", "useContext", "useRef", "useReducer", "Custom hooks"],
            "scoring_criteria": "Understanding of hooks concept, examples, and use cases",
        },
    },
    {
        "question_text": "What is the time complexity of quicksort in the worst case?",
        "question_type": "mcq",
        "tech_stack": "Algorithms",
        "difficulty_level": "hard",
        "topic": "Sorting Algorithms",
        "is_premium": False,
        "options": [
            ("A", "O(n)", False),
            ("B", "O(n log n)", False),
            ("C", "O(n²)", True),
            ("D", "O(2ⁿ)", False),
        ],
    },
]


def seed_sample_questions(db: Session) -> dict:
    """
    Insert the sample question bank. Skips when any question already exists.
    """
    if db.query(TechnicalQuestion.id).first() is not None:
        logger.info("Sample data already exists. Skipping creation.")
        return {"created": 0, "skipped": True}

    created = 0
    for item in SAMPLE_QUESTIONS:
        question = TechnicalQuestion(
            question_text=item["question_text"],
            question_type=item["question_type"],
            tech_stack=item["tech_stack"],
            difficulty_level=item["difficulty_level"],
            topic=item["topic"],
            is_premium=item["is_premium"],
        )
        for label, text, is_correct in item.get("options", []):
            question.mcq_options.append(MCQOption(option_label=label, option_text=text, is_correct=is_correct))
        if "expected_answer" in item:
            question.expected_answer = ExpectedAnswer(**item["expected_answer"])
        db.add(question)
        created += 1
    db.commit()
    logger.info("Created %d sample technical questions", created)
    return {"created": created, "skipped": False}


def run_seed() -> dict:
    """Run seeding using a new DB session."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        return seed_sample_questions(db)
    except Exception as e:
        db.rollback()
        logger.exception("Error creating sample data")
        return {"error": str(e), "created": 0}
    finally:
        db.close()


async def _clear_question_cache() -> None:
    await cache.connect()
    await cache.delete_prefix(cache.QUESTION_LIST_PREFIX)
    await cache.close()


if __name__ == "__main__":
    setup_logging()
    print(run_seed())
    asyncio.run(_clear_question_cache())
