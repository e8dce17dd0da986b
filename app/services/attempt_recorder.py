"""
Attempt recording and per-user attempt history.
"""
import logging
from typing import List

from sqlalchemy import select

from app.core.exceptions import NotFoundError, ValidationError
from app.db.storage import StorageAdapter
from app.models.attempt import Attempt
from app.models.mcq import MCQ, Choice, utcnow
from app.schemas.attempt import AttemptRead

logger = logging.getLogger(__name__)


class AttemptRecorder:
    """
    Records choice selections against MCQs.

    Correctness is copied from the selected choice when the attempt is
    written and never recomputed, so later edits to the MCQ do not rewrite
    history. Attempts are open to any identity, owner included.
    """

    def __init__(self, storage: StorageAdapter):
        self.storage = storage

    def record(self, mcq_id: int, user_id: str, selected_choice_id: int) -> AttemptRead:
        """
        Record one attempt.

        Args:
            mcq_id: MCQ being attempted
            user_id: Identity making the attempt
            selected_choice_id: Chosen choice, must belong to the MCQ's current set

        Returns:
            The stored attempt with its derived correctness

        Raises:
            NotFoundError: If the MCQ does not exist
            ValidationError: If the choice is not part of the MCQ
        """
        mcq = self.storage.query_one(select(MCQ).where(MCQ.id == mcq_id))
        if mcq is None:
            raise NotFoundError(f"MCQ with ID {mcq_id} not found")

        choice = self.storage.query_one(
            select(Choice).where(Choice.id == selected_choice_id, Choice.mcq_id == mcq_id)
        )
        if choice is None:
            raise ValidationError(
                f"Choice {selected_choice_id} does not belong to MCQ {mcq_id}"
            )

        with self.storage.transaction():
            attempt = self.storage.add(
                Attempt(
                    mcq_id=mcq_id,
                    user_id=user_id,
                    selected_choice_id=choice.id,
                    selected_choice_text=choice.choice_text,
                    is_correct=choice.is_correct,
                    attempted_at=utcnow(),
                )
            )
            result = AttemptRead.model_validate(attempt)

        logger.info(
            f"Attempt {result.id} recorded for MCQ {mcq_id} by {user_id} "
            f"(correct={result.is_correct})"
        )
        return result

    def list_for_user(self, mcq_id: int, user_id: str) -> List[AttemptRead]:
        """Return the user's attempts against the MCQ, oldest first."""
        attempts = self.storage.query_many(
            select(Attempt)
            .where(Attempt.mcq_id == mcq_id, Attempt.user_id == user_id)
            .order_by(Attempt.attempted_at.asc(), Attempt.id.asc())
        )
        return [AttemptRead.model_validate(a) for a in attempts]
