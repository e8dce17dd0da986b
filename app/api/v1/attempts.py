"""
Attempt endpoints - answering an MCQ and reviewing past answers.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_attempt_recorder, get_current_user_id
from app.schemas.attempt import AttemptCreate, AttemptRead
from app.services.attempt_recorder import AttemptRecorder

router = APIRouter()


@router.post("/{mcq_id}/attempts", response_model=AttemptRead, status_code=status.HTTP_201_CREATED)
def record_attempt(
    mcq_id: int,
    payload: AttemptCreate,
    recorder: AttemptRecorder = Depends(get_attempt_recorder),
    current_user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Record the current user's answer to an MCQ.

    Returns:
        The attempt, including whether the selected choice was correct
    """
    return recorder.record(mcq_id, current_user_id, payload.selected_choice_id)


@router.get("/{mcq_id}/attempts", response_model=List[AttemptRead])
def list_attempts(
    mcq_id: int,
    recorder: AttemptRecorder = Depends(get_attempt_recorder),
    current_user_id: str = Depends(get_current_user_id),
) -> Any:
    """List the current user's attempts at an MCQ, oldest first."""
    return recorder.list_for_user(mcq_id, current_user_id)
