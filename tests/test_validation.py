import pytest

from app.core.exceptions import ValidationError
from app.schemas.mcq import ChoiceCreate
from app.services.validation import validate_choice_set, validate_mcq_fields


def choices(n, correct=(0,), indices=None):
    return [
        ChoiceCreate(
            choice_text=f"option {i}",
            is_correct=i in correct,
            order_index=None if indices is None else indices[i],
        )
        for i in range(n)
    ]


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
def test_valid_sizes(n):
    result = validate_choice_set(choices(n))
    assert [c.order_index for c in result] == list(range(n))
    assert sum(c.is_correct for c in result) == 1


@pytest.mark.parametrize("n", [0, 1, 7])
def test_size_out_of_range(n):
    with pytest.raises(ValidationError) as exc:
        validate_choice_set(choices(n))
    assert any("between 2 and 6" in e for e in exc.value.errors)


def test_no_correct_choice():
    with pytest.raises(ValidationError) as exc:
        validate_choice_set(choices(4, correct=()))
    assert any("none is" in e for e in exc.value.errors)


def test_two_correct_choices():
    with pytest.raises(ValidationError) as exc:
        validate_choice_set(choices(4, correct=(0, 2)))
    assert any("2 are" in e for e in exc.value.errors)


def test_blank_text_rejected():
    proposed = choices(3)
    proposed[1].choice_text = "   "
    with pytest.raises(ValidationError) as exc:
        validate_choice_set(proposed)
    assert exc.value.errors == ["Choice 2 has empty text"]


def test_all_problems_reported_together():
    proposed = [ChoiceCreate(choice_text="", is_correct=False)]
    with pytest.raises(ValidationError) as exc:
        validate_choice_set(proposed)
    assert len(exc.value.errors) == 3


def test_text_is_trimmed():
    proposed = [
        ChoiceCreate(choice_text="  yes ", is_correct=True),
        ChoiceCreate(choice_text="no", is_correct=False),
    ]
    assert validate_choice_set(proposed)[0].choice_text == "yes"


def test_explicit_indices_define_order():
    result = validate_choice_set(choices(3, correct=(2,), indices=[2, 0, 1]))
    assert [c.choice_text for c in result] == ["option 1", "option 2", "option 0"]
    assert [c.order_index for c in result] == [0, 1, 2]
    assert result[1].is_correct


def test_duplicate_indices_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_choice_set(choices(3, indices=[0, 1, 1]))
    assert exc.value.errors == ["Order indices must be unique"]


def test_gapped_indices_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_choice_set(choices(3, indices=[0, 1, 3]))
    assert "contiguously" in exc.value.errors[0]


def test_partial_indices_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_choice_set(choices(3, indices=[0, None, 2]))
    assert "every choice or for none" in exc.value.errors[0]


def test_fields_valid():
    validate_mcq_fields("Title", None, "Question?")


def test_fields_missing_title_and_question():
    with pytest.raises(ValidationError) as exc:
        validate_mcq_fields("  ", None, None)
    assert exc.value.errors == ["Title is required", "Question is required"]


def test_fields_length_limits():
    with pytest.raises(ValidationError) as exc:
        validate_mcq_fields("t" * 201, "d" * 501, "q" * 1001)
    assert len(exc.value.errors) == 3


def test_fields_at_limits_pass():
    validate_mcq_fields("t" * 200, "d" * 500, "q" * 1000)
