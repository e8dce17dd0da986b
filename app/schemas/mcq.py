"""
Pydantic schemas for MCQ and Choice models.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ChoiceCreate(BaseModel):
    """Schema for one proposed answer choice."""

    choice_text: str
    is_correct: bool = False
    order_index: Optional[int] = None


class ChoiceRead(BaseModel):
    """Schema for a stored choice."""

    id: int
    choice_text: str
    is_correct: bool
    order_index: int

    class Config:
        """Pydantic config."""

        from_attributes = True


class MCQCreate(BaseModel):
    """Schema for MCQ creation."""

    title: str
    description: Optional[str] = None
    question: str
    choices: List[ChoiceCreate]


class MCQUpdate(BaseModel):
    """
    Schema for MCQ update.

    Fields left out keep their stored value. The choice set is always
    replaced as a whole, so it is required.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    question: Optional[str] = None
    choices: List[ChoiceCreate]


class MCQRead(BaseModel):
    """Schema for the MCQ aggregate: the question plus its ordered choices."""

    id: int
    title: str
    description: Optional[str] = None
    question: str
    created_by: str
    created_at: datetime
    updated_at: datetime
    choices: List[ChoiceRead] = []

    class Config:
        """Pydantic config."""

        from_attributes = True


class MCQSummary(BaseModel):
    """Schema for an MCQ row in listings."""

    id: int
    title: str
    description: Optional[str] = None
    question: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True


class MCQPage(BaseModel):
    """One page of a listing."""

    items: List[MCQSummary]
    total: int
    page: int
    page_size: int
    total_pages: int


class GeneratedMCQPayload(BaseModel):
    """
    Candidate MCQ produced by the content generator.

    ``correct_answer`` is a choice letter ("A", "B", ...) or the exact text of
    the correct choice. The payload is untrusted: it is converted into an
    ordinary MCQCreate and validated like manual input.
    """

    title: str = ""
    description: Optional[str] = None
    question: str = ""
    choices: List[str] = Field(default_factory=list)
    correct_answer: str = ""

    def to_mcq_create(self) -> MCQCreate:
        """Convert to the creation schema used by the repository."""
        correct_index = self._correct_index()
        return MCQCreate(
            title=self.title,
            description=self.description,
            question=self.question,
            choices=[
                ChoiceCreate(choice_text=text, is_correct=(i == correct_index))
                for i, text in enumerate(self.choices)
            ],
        )

    def _correct_index(self) -> Optional[int]:
        answer = self.correct_answer.strip()
        if len(answer) == 1 and answer.isalpha():
            index = ord(answer.upper()) - ord("A")
            if 0 <= index < len(self.choices):
                return index
        for i, text in enumerate(self.choices):
            if answer and text.strip() == answer:
                return i
        return None
