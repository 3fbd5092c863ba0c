"""Tests for the process-local key-value resume store"""
from techprep.app.services.local_resume_store import clear_all_resumes, get_all_resumes, save_resume_data


def test_empty_store():
    assert get_all_resumes() == []


def test_records_keep_shape_and_order():
    first = {"id": "1", "fileName": "a.pdf", "extractedText": "x", "parsedAt": "t1", "fileType": ".pdf"}
    second = {"id": "2", "fileName": "b.docx", "extractedText": "y", "parsedAt": "t2", "fileType": ".docx"}
    save_resume_data(first)
    save_resume_data(second)
    assert get_all_resumes() == [first, second]


def test_clear_all_resumes():
    save_resume_data({"id": "1"})
    clear_all_resumes()
    assert get_all_resumes() == []


def test_corrupt_value_is_logged_and_read_as_empty(caplog, monkeypatch):
    from techprep.app.core.config import LOCAL_STORAGE_KEY
    from techprep.app.services import local_resume_store

    monkeypatch.setitem(local_resume_store._store, LOCAL_STORAGE_KEY, "{not json")
    with caplog.at_level("ERROR", logger="techprep.services.local_resume_store"):
        assert get_all_resumes() == []
    assert any(r.name == "techprep.services.local_resume_store" for r in caplog.records)
