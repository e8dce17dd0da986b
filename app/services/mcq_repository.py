"""
MCQ repository: CRUD, search and pagination over MCQ + Choice aggregates.
"""
import logging
import math
from typing import List, Optional

from sqlalchemy import delete, func, or_, select

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.core.permissions import assert_owner
from app.db.storage import StorageAdapter
from app.models.attempt import Attempt
from app.models.mcq import MCQ, Choice, utcnow
from app.schemas.mcq import ChoiceRead, MCQCreate, MCQPage, MCQRead, MCQSummary, MCQUpdate
from app.services.validation import ValidChoice, validate_choice_set, validate_mcq_fields

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class MCQRepository:
    """
    Owns every read and write of MCQs and their choice sets.

    Validation and ownership checks run before any write. Every write of an
    operation happens inside a single storage transaction, so a failure part
    way through leaves the store as it was.
    """

    def __init__(self, storage: StorageAdapter):
        self.storage = storage

    def create(self, owner_id: str, data: MCQCreate) -> MCQRead:
        """
        Create an MCQ with its choices.

        Args:
            owner_id: Identity creating the MCQ
            data: Title, description, question and proposed choices

        Returns:
            The stored aggregate

        Raises:
            ValidationError: If fields or the choice set are invalid
        """
        validate_mcq_fields(data.title, data.description, data.question)
        choices = validate_choice_set(data.choices)

        now = utcnow()
        with self.storage.transaction():
            mcq = self.storage.add(
                MCQ(
                    title=data.title.strip(),
                    description=_clean(data.description),
                    question=data.question.strip(),
                    created_by=owner_id,
                    created_at=now,
                    updated_at=now,
                )
            )
            self._insert_choices(mcq.id, choices)
            mcq_id = mcq.id

        logger.info(f"MCQ {mcq_id} created by {owner_id} with {len(choices)} choices")
        return self.get_by_id(mcq_id)

    def get_by_id(self, mcq_id: int) -> MCQRead:
        """
        Fetch an MCQ and its choices in display order.

        Raises:
            NotFoundError: If no MCQ has this id
        """
        mcq = self._get_mcq(mcq_id)
        choices = self._get_choices(mcq_id)
        return MCQRead(
            id=mcq.id,
            title=mcq.title,
            description=mcq.description,
            question=mcq.question,
            created_by=mcq.created_by,
            created_at=mcq.created_at,
            updated_at=mcq.updated_at,
            choices=[ChoiceRead.model_validate(c) for c in choices],
        )

    def update(self, mcq_id: int, actor_id: str, data: MCQUpdate) -> MCQRead:
        """
        Update an MCQ and replace its whole choice set.

        Old choice rows are deleted and the new set inserted in the same
        transaction as the field update. Attempts pointing at the removed rows
        keep their snapshots; their choice reference is nulled by the store.

        Args:
            mcq_id: MCQ to update
            actor_id: Identity performing the update
            data: New field values (None keeps the stored value) and choices

        Returns:
            The updated aggregate

        Raises:
            NotFoundError: If the MCQ does not exist
            ForbiddenError: If the actor is not the owner
            ValidationError: If the resulting fields or choices are invalid
        """
        mcq = self._get_mcq(mcq_id)
        assert_owner(mcq, actor_id)

        title = data.title if data.title is not None else mcq.title
        question = data.question if data.question is not None else mcq.question
        description = data.description if data.description is not None else mcq.description
        validate_mcq_fields(title, description, question)
        choices = validate_choice_set(data.choices)

        with self.storage.transaction():
            mcq.title = title.strip()
            mcq.question = question.strip()
            mcq.description = _clean(description)
            mcq.updated_at = utcnow()
            self.storage.execute(delete(Choice).where(Choice.mcq_id == mcq_id))
            self._insert_choices(mcq_id, choices)

        logger.info(f"MCQ {mcq_id} updated by {actor_id}, choice set replaced ({len(choices)} choices)")
        return self.get_by_id(mcq_id)

    def delete(self, mcq_id: int, actor_id: str) -> None:
        """
        Delete an MCQ together with its choices and every attempt against it.

        Raises:
            NotFoundError: If the MCQ does not exist
            ForbiddenError: If the actor is not the owner
        """
        mcq = self._get_mcq(mcq_id)
        assert_owner(mcq, actor_id)

        with self.storage.transaction():
            self.storage.execute(delete(Attempt).where(Attempt.mcq_id == mcq_id))
            self.storage.execute(delete(Choice).where(Choice.mcq_id == mcq_id))
            self.storage.execute(delete(MCQ).where(MCQ.id == mcq_id))

        logger.info(f"MCQ {mcq_id} deleted by {actor_id}")

    def list(
        self,
        owner_id: str,
        search: Optional[str] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> MCQPage:
        """
        List the owner's MCQs, newest first.

        Args:
            owner_id: Identity whose MCQs are listed
            search: Case-insensitive substring matched against title or
                question. Empty or None means no filter.
            page: 1-indexed page number
            page_size: Items per page, defaults to DEFAULT_PAGE_SIZE

        Returns:
            The requested page with total count and page count. Pages past
            the end are empty.

        Raises:
            ValidationError: If page or page_size is out of range
        """
        if page_size is None:
            page_size = settings.DEFAULT_PAGE_SIZE
        errors: List[str] = []
        if page < 1:
            errors.append("Page must be 1 or greater")
        if page_size < 1 or page_size > settings.MAX_PAGE_SIZE:
            errors.append(f"Page size must be between 1 and {settings.MAX_PAGE_SIZE}")
        if errors:
            raise ValidationError("Invalid pagination", errors)

        conditions = [MCQ.created_by == owner_id]
        if search and search.strip():
            pattern = f"%{_escape_like(search)}%"
            conditions.append(
                or_(
                    MCQ.title.ilike(pattern, escape="\\"),
                    MCQ.question.ilike(pattern, escape="\\"),
                )
            )

        total = self.storage.scalar(select(func.count(MCQ.id)).where(*conditions)) or 0
        rows = self.storage.query_many(
            select(MCQ)
            .where(*conditions)
            .order_by(MCQ.created_at.desc(), MCQ.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
        )

        return MCQPage(
            items=[MCQSummary.model_validate(row) for row in rows],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total / page_size),
        )

    def _get_mcq(self, mcq_id: int) -> MCQ:
        mcq = self.storage.query_one(select(MCQ).where(MCQ.id == mcq_id))
        if mcq is None:
            raise NotFoundError(f"MCQ with ID {mcq_id} not found")
        return mcq

    def _get_choices(self, mcq_id: int) -> List[Choice]:
        return self.storage.query_many(
            select(Choice)
            .where(Choice.mcq_id == mcq_id)
            .order_by(Choice.order_index.asc())
        )

    def _insert_choices(self, mcq_id: int, choices: List[ValidChoice]) -> None:
        for choice in choices:
            self.storage.add(
                Choice(
                    mcq_id=mcq_id,
                    choice_text=choice.choice_text,
                    is_correct=choice.is_correct,
                    order_index=choice.order_index,
                )
            )
