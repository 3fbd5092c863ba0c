"""Initial schema - resumes, question bank and user responses

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "resumes",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=True),
        sa.Column("file_name", sa.String(length=255), nullable=False),
        sa.Column("file_type", sa.String(length=10), nullable=False),
        sa.Column("extracted_text", sa.Text(), nullable=False),
        sa.Column("parsed_at", sa.String(length=64), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_resumes_user_id"), "resumes", ["user_id"], unique=False)
    op.create_index(op.f("ix_resumes_created_at"), "resumes", ["created_at"], unique=False)

    op.create_table(
        "resume_questions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("resume_id", sa.String(length=36), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("difficulty", sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(["resume_id"], ["resumes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_resume_questions_id"), "resume_questions", ["id"], unique=False)
    op.create_index(op.f("ix_resume_questions_resume_id"), "resume_questions", ["resume_id"], unique=False)

    op.create_table(
        "technical_questions",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("question_type", sa.String(length=20), nullable=False),
        sa.Column("tech_stack", sa.String(length=100), nullable=False),
        sa.Column("difficulty_level", sa.String(length=10), nullable=False),
        sa.Column("topic", sa.String(length=255), nullable=True),
        sa.Column("is_premium", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_technical_questions_tech_stack"), "technical_questions", ["tech_stack"], unique=False)
    op.create_index(
        op.f("ix_technical_questions_difficulty_level"), "technical_questions", ["difficulty_level"], unique=False
    )

    op.create_table(
        "mcq_options",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("question_id", sa.String(length=36), nullable=False),
        sa.Column("option_text", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=True),
        sa.Column("option_label", sa.String(length=1), nullable=False),
        sa.ForeignKeyConstraint(["question_id"], ["technical_questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_mcq_options_question_id"), "mcq_options", ["question_id"], unique=False)

    op.create_table(
        "expected_answers",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("question_id", sa.String(length=36), nullable=False),
        sa.Column("sample_answer", sa.Text(), nullable=False),
        sa.Column("key_points", sa.JSON(), nullable=True),
        sa.Column("scoring_criteria", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["question_id"], ["technical_questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_expected_answers_question_id"), "expected_answers", ["question_id"], unique=False)

    op.create_table(
        "user_responses",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("question_id", sa.String(length=36), nullable=False),
        sa.Column("user_answer", sa.Text(), nullable=False),
        sa.Column("time_taken", sa.Integer(), nullable=True),
        sa.Column("ai_score", sa.Float(), nullable=True),
        sa.Column("ai_feedback", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["question_id"], ["technical_questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_responses_user_id"), "user_responses", ["user_id"], unique=False)
    op.create_index(op.f("ix_user_responses_question_id"), "user_responses", ["question_id"], unique=False)
    op.create_index(op.f("ix_user_responses_created_at"), "user_responses", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_table("user_responses")
    op.drop_table("expected_answers")
    op.drop_table("mcq_options")
    op.drop_table("technical_questions")
    op.drop_table("resume_questions")
    op.drop_table("resumes")
