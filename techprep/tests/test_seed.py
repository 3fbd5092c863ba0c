"""Tests for the sample question bank seed"""
from techprep.app.models.technical_question import ExpectedAnswer, MCQOption, TechnicalQuestion
from techprep.app.tasks.seed import seed_sample_questions


def test_seed_creates_sample_bank(db_session):
    result = seed_sample_questions(db_session)
    assert result == {"created": 3, "skipped": False}
    assert db_session.query(TechnicalQuestion).count() == 3
    assert db_session.query(MCQOption).count() == 4
    assert db_session.query(ExpectedAnswer).count() == 2

    mcq = db_session.query(TechnicalQuestion).filter_by(question_type="mcq").one()
    assert [o.option_label for o in mcq.mcq_options if o.is_correct] == ["C"]
    assert mcq.expected_answer is None


def test_seed_is_idempotent(db_session):
    seed_sample_questions(db_session)
    assert seed_sample_questions(db_session) == {"created": 0, "skipped": True}
    assert db_session.query(TechnicalQuestion).count() == 3
