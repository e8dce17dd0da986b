"""
Input validation for MCQ fields and choice sets.

Both validators collect every problem before raising, so a caller gets the
full list in one ValidationError.
"""
from typing import List, NamedTuple, Optional, Sequence

from app.core.exceptions import ValidationError
from app.schemas.mcq import ChoiceCreate

MIN_CHOICES = 2
MAX_CHOICES = 6
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 500
QUESTION_MAX_LENGTH = 1000


class ValidChoice(NamedTuple):
    """A choice that passed validation, with its final display position."""

    choice_text: str
    is_correct: bool
    order_index: int


def validate_choice_set(choices: Sequence[ChoiceCreate]) -> List[ValidChoice]:
    """
    Check a proposed choice set and return it normalized.

    Rules:
        - between 2 and 6 choices
        - exactly one marked correct
        - no choice text empty after trimming
        - explicit order indices, when given, on every choice, unique and
          covering 0..n-1

    Without explicit indices the list order is the display order.

    Args:
        choices: Proposed choices

    Returns:
        Choices with trimmed text, sorted by order index

    Raises:
        ValidationError: Listing every violated rule
    """
    errors: List[str] = []
    count = len(choices)

    if count < MIN_CHOICES or count > MAX_CHOICES:
        errors.append(
            f"An MCQ needs between {MIN_CHOICES} and {MAX_CHOICES} choices, got {count}"
        )

    correct_count = sum(1 for c in choices if c.is_correct)
    if correct_count == 0:
        errors.append("Exactly one choice must be marked correct, none is")
    elif correct_count > 1:
        errors.append(f"Exactly one choice must be marked correct, {correct_count} are")

    for position, choice in enumerate(choices):
        if not (choice.choice_text or "").strip():
            errors.append(f"Choice {position + 1} has empty text")

    indices = [c.order_index for c in choices]
    explicit = [i for i in indices if i is not None]
    if explicit:
        if len(explicit) != count:
            errors.append("Order indices must be given for every choice or for none")
        elif len(set(explicit)) != count:
            errors.append("Order indices must be unique")
        elif sorted(explicit) != list(range(count)):
            errors.append(f"Order indices must run contiguously from 0 to {count - 1}")

    if errors:
        raise ValidationError("Invalid choice set", errors)

    normalized = [
        ValidChoice(
            choice_text=choice.choice_text.strip(),
            is_correct=bool(choice.is_correct),
            order_index=choice.order_index if explicit else position,
        )
        for position, choice in enumerate(choices)
    ]
    return sorted(normalized, key=lambda c: c.order_index)


def validate_mcq_fields(
    title: Optional[str],
    description: Optional[str],
    question: Optional[str],
) -> None:
    """Check title, description and question limits; raise ValidationError if any fail."""
    errors: List[str] = []

    if not (title or "").strip():
        errors.append("Title is required")
    elif len(title.strip()) > TITLE_MAX_LENGTH:
        errors.append(f"Title must be at most {TITLE_MAX_LENGTH} characters")

    if description is not None and len(description.strip()) > DESCRIPTION_MAX_LENGTH:
        errors.append(f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters")

    if not (question or "").strip():
        errors.append("Question is required")
    elif len(question.strip()) > QUESTION_MAX_LENGTH:
        errors.append(f"Question must be at most {QUESTION_MAX_LENGTH} characters")

    if errors:
        raise ValidationError("Invalid MCQ fields", errors)
