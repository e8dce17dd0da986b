"""
Ownership checks for MCQ mutation.

An MCQ may be changed or deleted only by the identity that created it.
Creating MCQs and recording attempts are open to any authenticated identity.
"""
from app.core.exceptions import ForbiddenError
from app.models.mcq import MCQ


def is_owner(mcq: MCQ, actor_id: str) -> bool:
    """Check ownership without raising."""
    return mcq.created_by == actor_id


def assert_owner(mcq: MCQ, actor_id: str) -> None:
    """
    Verify the actor owns the MCQ.

    Args:
        mcq: MCQ about to be mutated
        actor_id: Identity performing the action

    Raises:
        ForbiddenError: If the actor is not the creator
    """
    if not is_owner(mcq, actor_id):
        raise ForbiddenError("Only the creator of this MCQ can perform this action")
