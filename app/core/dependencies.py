"""
Dependency injection for FastAPI endpoints.
"""
from typing import Generator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.security import decode_token
from app.db.base import SessionLocal
from app.db.storage import StorageAdapter
from app.services.attempt_recorder import AttemptRecorder
from app.services.mcq_repository import MCQRepository

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator:
    """
    Dependency for database session.

    Yields:
        Database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_storage(db: Session = Depends(get_db)) -> StorageAdapter:
    """Storage adapter bound to the request's session."""
    return StorageAdapter(db)


def get_mcq_repository(storage: StorageAdapter = Depends(get_storage)) -> MCQRepository:
    return MCQRepository(storage)


def get_attempt_recorder(storage: StorageAdapter = Depends(get_storage)) -> AttemptRecorder:
    return AttemptRecorder(storage)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Get the authenticated identity from the bearer token.

    Args:
        credentials: Bearer credentials from the Authorization header

    Returns:
        Opaque user identifier (the token's ``sub`` claim)

    Raises:
        HTTPException: If the token is missing or invalid
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise credentials_exception

    user_id: Optional[str] = payload.get("sub")
    if not user_id:
        raise credentials_exception

    return str(user_id)
