"""Tests for resume stores and write-through saving"""
import pytest
from sqlalchemy.exc import IntegrityError

from techprep.app.models.resume import Resume
from techprep.app.schemas.resume import GeneratedQuestion, ParsedResume
from techprep.app.services import local_resume_store
from techprep.app.services.resume_store import (
    DatabaseResumeStore,
    JsonFileResumeStore,
    LocalResumeStore,
    StorageError,
    find_resume,
    list_merged,
    save_with_fallback,
)


class FailingStore:
    name = "failing"

    def save(self, record, questions):
        raise OSError("disk full")

    def list(self):
        raise OSError("disk full")


def _record(resume_id="r-1", user_id=None):
    return ParsedResume(
        id=resume_id,
        fileName="cv.pdf",
        extractedText="Python",
        parsedAt="2024-05-01T10:00:00Z",
        fileType=".pdf",
        userId=user_id,
    )


QUESTIONS = [
    GeneratedQuestion(category="Python", question="Q1", difficulty="Easy"),
    GeneratedQuestion(category="General", question="Q2", difficulty="Medium"),
]


def test_json_file_store_round_trip(tmp_path):
    store = JsonFileResumeStore(tmp_path / "nested" / "resumes.json")
    store.save(_record("a"), QUESTIONS)
    store.save(_record("b"), QUESTIONS)
    assert [r.id for r in store.list()] == ["a", "b"]


def test_json_file_store_missing_or_corrupt_file(tmp_path):
    path = tmp_path / "resumes.json"
    store = JsonFileResumeStore(path)
    assert store.list() == []
    path.write_text("{not json", encoding="utf-8")
    assert store.list() == []


def test_database_store_saves_questions_in_order(db_session):
    store = DatabaseResumeStore(db_session)
    store.save(_record(user_id="user-1"), QUESTIONS)
    row = store.get("r-1")
    assert row.user_id == "user-1"
    assert [q.question for q in row.questions] == ["Q1", "Q2"]
    assert [r.id for r in store.list()] == ["r-1"]


def test_database_store_rolls_back_on_duplicate_id(db_session):
    store = DatabaseResumeStore(db_session)
    store.save(_record(), QUESTIONS)
    db_session.expunge_all()
    with pytest.raises(IntegrityError):
        store.save(_record(), QUESTIONS)
    assert db_session.query(Resume).count() == 1


def test_save_with_fallback_skips_failing_stores(tmp_path):
    json_store = JsonFileResumeStore(tmp_path / "resumes.json")
    saved = save_with_fallback(_record(), QUESTIONS, [FailingStore(), json_store, LocalResumeStore()])
    assert saved == ["json_file", "local"]
    assert [r.id for r in json_store.list()] == ["r-1"]
    assert local_resume_store.get_all_resumes()[0]["id"] == "r-1"


def test_save_with_fallback_raises_when_all_fail():
    with pytest.raises(StorageError, match="Failed to save resume data"):
        save_with_fallback(_record(), QUESTIONS, [FailingStore(), FailingStore()])


def test_find_resume_searches_stores_in_order(tmp_path):
    json_store = JsonFileResumeStore(tmp_path / "resumes.json")
    json_store.save(_record("from-file"), QUESTIONS)
    local = LocalResumeStore()
    local.save(_record("from-local"), QUESTIONS)

    stores = [FailingStore(), json_store, local]
    assert find_resume("from-local", stores).id == "from-local"
    assert find_resume("from-file", stores).id == "from-file"
    assert find_resume("missing", stores) is None


def test_list_merged_dedups_by_id_keeping_first(tmp_path):
    json_store = JsonFileResumeStore(tmp_path / "resumes.json")
    json_store.save(_record("a"), QUESTIONS)
    local = LocalResumeStore()
    local.save(_record("a"), QUESTIONS)
    local.save(_record("b"), QUESTIONS)
    assert [r.id for r in list_merged([json_store, local])] == ["a", "b"]
