"""
Pydantic schemas for Attempt model.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class AttemptCreate(BaseModel):
    """Schema for recording an attempt."""

    selected_choice_id: int


class AttemptRead(BaseModel):
    """Schema for attempt response."""

    id: int
    mcq_id: int
    user_id: str
    selected_choice_id: Optional[int] = None
    selected_choice_text: str
    is_correct: bool
    attempted_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True
