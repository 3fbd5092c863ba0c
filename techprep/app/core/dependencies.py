"""
Dependency injection utilities
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from techprep.app.core.config import settings
from techprep.app.core.logging_config import get_logger
from techprep.app.db.session import SessionLocal

logger = get_logger("core.dependencies")

security = HTTPBearer(auto_error=False)


def get_db() -> Session:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_optional_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Optional[str]:
    """
    Supabase user id from an optional Bearer access token.

    Returns None when no token is sent, no JWT secret is configured, or the
    token does not verify. Nothing in the API is access-controlled; the id is
    only attached to stored records.
    """
    if not credentials or not settings.supabase_jwt_secret:
        return None
    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.supabase_jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
    except JWTError as e:
        logger.warning("Ignoring invalid access token: %s", e)
        return None
    user_id = payload.get("sub")
    return str(user_id) if user_id else None
