"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: techprep/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# Load .env into environment BEFORE pydantic reads. override=True ensures .env
# values override any shell env. When .env doesn't exist (prod), this is a no-op.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "TechPrep"
    app_version: str = "1.0.0"
    port: int = 3001
    cors_origins: str = "*"

    # Database (Supabase Postgres URL in production)
    database_url: str = "sqlite:///./techprep.db"

    # Supabase auth - access tokens are HS256 JWTs signed with the project JWT secret
    supabase_jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_audience: str = "authenticated"

    # Upload & storage
    upload_dir: str = "uploads/tmp"
    data_dir: str = "data"
    max_upload_bytes: int = 10 * 1024 * 1024

    # Redis
    redis_url: str = ""
    question_cache_ttl: int = 300

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, business config) ---

# Upload validation
PDF_MIME_TYPE: str = "application/pdf"
DOCX_MIME_TYPE: str = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ALLOWED_MIME_TYPES: dict[str, str] = {
    PDF_MIME_TYPE: ".pdf",
    DOCX_MIME_TYPE: ".docx",
}
ALLOWED_EXTENSIONS: frozenset[str] = frozenset({".pdf", ".docx"})
UPLOAD_CHUNK_SIZE: int = 1024 * 1024

# Resume stores
RESUMES_FILENAME: str = "resumes.json"
LOCAL_STORAGE_KEY: str = "parsed_resumes"

# Question bank enums
QUESTION_TYPES: tuple[str, ...] = ("mcq", "short_answer", "long_answer")
DIFFICULTY_LEVELS: tuple[str, ...] = ("easy", "medium", "hard")
OPTION_LABELS: tuple[str, ...] = ("A", "B", "C", "D")

# Responses submitted without identity
DEFAULT_USER_ID: str = "demo-user"
