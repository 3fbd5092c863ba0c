"""
Resume storage - flat JSON file, process-local key-value store and database.
Uploads are written through every store in a fixed order; individual failures are logged and swallowed.
"""
from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Iterable, Protocol

from sqlalchemy.orm import Session, selectinload

from techprep.app.core.config import RESUMES_FILENAME, settings
from techprep.app.core.logging_config import get_logger
from techprep.app.models.resume import Resume, ResumeQuestion
from techprep.app.schemas.resume import GeneratedQuestion, ParsedResume
from techprep.app.services import local_resume_store

logger = get_logger("services.resume_store")


class StorageError(RuntimeError):
    """No store accepted the record."""


class ResumeStore(Protocol):
    name: str

    def save(self, record: ParsedResume, questions: list[GeneratedQuestion]) -> None: ...

    def list(self) -> list[ParsedResume]: ...


class JsonFileResumeStore:
    """Append-only JSON array on disk (data/resumes.json)."""

    name = "json_file"
    _lock = threading.Lock()

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path else Path(settings.data_dir) / RESUMES_FILENAME

    def _read(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("Error reading resume data from %s: %s", self.path, e)
            return []
        return data if isinstance(data, list) else []

    def save(self, record: ParsedResume, questions: list[GeneratedQuestion]) -> None:
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            existing = self._read()
            existing.append(record.model_dump(exclude_none=True))
            self.path.write_text(json.dumps(existing, indent=2), encoding="utf-8")

    def list(self) -> list[ParsedResume]:
        with self._lock:
            rows = self._read()
        return [ParsedResume.model_validate(r) for r in rows]


class LocalResumeStore:
    """Adapter over the process-local key-value store."""

    name = "local"

    def save(self, record: ParsedResume, questions: list[GeneratedQuestion]) -> None:
        local_resume_store.save_resume_data(record.model_dump(exclude_none=True))

    def list(self) -> list[ParsedResume]:
        return [ParsedResume.model_validate(r) for r in local_resume_store.get_all_resumes()]


class DatabaseResumeStore:
    """resumes + resume_questions tables (Supabase Postgres in production)."""

    name = "database"

    def __init__(self, db: Session):
        self.db = db

    def save(self, record: ParsedResume, questions: list[GeneratedQuestion]) -> None:
        resume = Resume(
            id=record.id,
            user_id=record.userId,
            file_name=record.fileName,
            file_type=record.fileType,
            extracted_text=record.extractedText,
            parsed_at=record.parsedAt,
        )
        resume.questions = [
            ResumeQuestion(position=i, category=q.category, question=q.question, difficulty=q.difficulty)
            for i, q in enumerate(questions)
        ]
        try:
            self.db.add(resume)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def list(self) -> list[ParsedResume]:
        return [
            ParsedResume(
                id=r.id,
                fileName=r.file_name,
                extractedText=r.extracted_text or "",
                parsedAt=r.parsed_at,
                fileType=r.file_type,
                userId=r.user_id,
            )
            for r in self.list_rows()
        ]

    def list_rows(self) -> list[Resume]:
        """Resume rows newest first, questions eagerly loaded."""
        return (
            self.db.query(Resume)
            .options(selectinload(Resume.questions))
            .order_by(Resume.created_at.desc())
            .all()
        )

    def get(self, resume_id: str) -> Resume | None:
        return self.db.query(Resume).filter(Resume.id == resume_id).first()


def default_stores(db: Session) -> list[ResumeStore]:
    """Write-through order: JSON file, local key-value, database."""
    return [JsonFileResumeStore(), LocalResumeStore(), DatabaseResumeStore(db)]


def save_with_fallback(
    record: ParsedResume,
    questions: list[GeneratedQuestion],
    stores: Iterable[ResumeStore],
) -> list[str]:
    """
    Save the record to every store in order. Returns names of the stores that accepted it.
    Raises StorageError only when all of them failed.
    """
    saved: list[str] = []
    for store in stores:
        try:
            store.save(record, questions)
            saved.append(store.name)
        except Exception as e:
            logger.warning("Resume save failed store=%s resume_id=%s: %s", store.name, record.id, e)
    if not saved:
        raise StorageError("Failed to save resume data")
    logger.info("Resume saved resume_id=%s stores=%s", record.id, ",".join(saved))
    return saved


def find_resume(resume_id: str, stores: Iterable[ResumeStore]) -> ParsedResume | None:
    """First record with the given id, searching stores in order."""
    for store in stores:
        try:
            for r in store.list():
                if r.id == resume_id:
                    return r
        except Exception as e:
            logger.warning("Resume lookup failed store=%s resume_id=%s: %s", store.name, resume_id, e)
    return None


def list_merged(stores: Iterable[ResumeStore]) -> list[ParsedResume]:
    """Records from every store in order, first occurrence of each id kept."""
    seen: set[str] = set()
    merged: list[ParsedResume] = []
    for store in stores:
        for r in store.list():
            if r.id not in seen:
                seen.add(r.id)
                merged.append(r)
    return merged
