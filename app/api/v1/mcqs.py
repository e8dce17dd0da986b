"""
MCQ management endpoints.
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_current_user_id, get_mcq_repository
from app.schemas.common import Message
from app.schemas.mcq import GeneratedMCQPayload, MCQCreate, MCQPage, MCQRead, MCQUpdate
from app.services.mcq_repository import MCQRepository

router = APIRouter()


@router.post("", response_model=MCQRead, status_code=status.HTTP_201_CREATED)
def create_mcq(
    payload: MCQCreate,
    repository: MCQRepository = Depends(get_mcq_repository),
    current_user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Create an MCQ owned by the current user.

    Args:
        payload: MCQ fields and choices
        repository: MCQ repository
        current_user_id: Authenticated identity

    Returns:
        Created MCQ with ordered choices
    """
    return repository.create(current_user_id, payload)


@router.post("/generated", response_model=MCQRead, status_code=status.HTTP_201_CREATED)
def create_mcq_from_generator(
    payload: GeneratedMCQPayload,
    repository: MCQRepository = Depends(get_mcq_repository),
    current_user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Save a candidate MCQ produced by the content generator.

    The candidate goes through the same validation as manual input.
    """
    return repository.create(current_user_id, payload.to_mcq_create())


@router.get("", response_model=MCQPage)
def list_mcqs(
    search: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = None,
    repository: MCQRepository = Depends(get_mcq_repository),
    current_user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    List the current user's MCQs, newest first.

    Args:
        search: Case-insensitive filter on title or question
        page: 1-indexed page number
        page_size: Items per page
        repository: MCQ repository
        current_user_id: Authenticated identity

    Returns:
        Page of MCQs with total and total_pages
    """
    return repository.list(current_user_id, search=search, page=page, page_size=page_size)


@router.get("/{mcq_id}", response_model=MCQRead)
def get_mcq(
    mcq_id: int,
    repository: MCQRepository = Depends(get_mcq_repository),
    current_user_id: str = Depends(get_current_user_id),
) -> Any:
    """Get an MCQ by ID."""
    return repository.get_by_id(mcq_id)


@router.put("/{mcq_id}", response_model=MCQRead)
def update_mcq(
    mcq_id: int,
    payload: MCQUpdate,
    repository: MCQRepository = Depends(get_mcq_repository),
    current_user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Update an MCQ. Only its creator may do this.

    The submitted choices replace the stored set entirely.
    """
    return repository.update(mcq_id, current_user_id, payload)


@router.delete("/{mcq_id}", response_model=Message)
def delete_mcq(
    mcq_id: int,
    repository: MCQRepository = Depends(get_mcq_repository),
    current_user_id: str = Depends(get_current_user_id),
) -> Any:
    """Delete an MCQ with its choices and attempts. Only its creator may do this."""
    repository.delete(mcq_id, current_user_id)
    return {"message": f"MCQ {mcq_id} deleted"}
