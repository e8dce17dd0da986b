"""Schemas module - Import all schemas."""
from app.schemas.mcq import (
    ChoiceCreate,
    ChoiceRead,
    MCQCreate,
    MCQUpdate,
    MCQRead,
    MCQSummary,
    MCQPage,
    GeneratedMCQPayload,
)
from app.schemas.attempt import AttemptCreate, AttemptRead
from app.schemas.common import Message, ErrorResponse

__all__ = [
    "ChoiceCreate",
    "ChoiceRead",
    "MCQCreate",
    "MCQUpdate",
    "MCQRead",
    "MCQSummary",
    "MCQPage",
    "GeneratedMCQPayload",
    "AttemptCreate",
    "AttemptRead",
    "Message",
    "ErrorResponse",
]
