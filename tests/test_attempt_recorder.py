import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.schemas.mcq import ChoiceCreate, MCQUpdate
from conftest import OTHER, OWNER, make_mcq


def test_record_correct_and_incorrect(repository, recorder):
    mcq = repository.create(OWNER, make_mcq(correct=1))

    right = recorder.record(mcq.id, OWNER, mcq.choices[1].id)
    wrong = recorder.record(mcq.id, OWNER, mcq.choices[2].id)

    assert right.is_correct is True
    assert wrong.is_correct is False
    assert right.selected_choice_id == mcq.choices[1].id
    assert right.selected_choice_text == "4"
    assert right.user_id == OWNER
    assert right.mcq_id == mcq.id


def test_record_choice_from_another_mcq_is_rejected(repository, recorder):
    first = repository.create(OWNER, make_mcq())
    second = repository.create(OWNER, make_mcq(title="Other"))

    with pytest.raises(ValidationError):
        recorder.record(first.id, OWNER, second.choices[0].id)
    assert recorder.list_for_user(first.id, OWNER) == []


def test_record_unknown_choice_is_rejected(repository, recorder):
    mcq = repository.create(OWNER, make_mcq())
    with pytest.raises(ValidationError):
        recorder.record(mcq.id, OWNER, 9999)


def test_record_against_missing_mcq(recorder):
    with pytest.raises(NotFoundError):
        recorder.record(777, OWNER, 1)


def test_repeat_attempts_are_not_deduplicated(repository, recorder):
    mcq = repository.create(OWNER, make_mcq())
    choice_id = mcq.choices[0].id
    ids = [recorder.record(mcq.id, OWNER, choice_id).id for _ in range(3)]
    assert len(set(ids)) == 3


def test_list_for_user_is_ordered_and_scoped(repository, recorder):
    mcq = repository.create(OWNER, make_mcq())
    other_mcq = repository.create(OWNER, make_mcq(title="Other"))
    first = recorder.record(mcq.id, OWNER, mcq.choices[0].id)
    recorder.record(mcq.id, OTHER, mcq.choices[1].id)
    second = recorder.record(mcq.id, OWNER, mcq.choices[1].id)
    recorder.record(other_mcq.id, OWNER, other_mcq.choices[1].id)

    history = recorder.list_for_user(mcq.id, OWNER)
    assert [a.id for a in history] == [first.id, second.id]
    assert [a.is_correct for a in history] == [False, True]


def test_attempt_snapshot_survives_choice_replacement(repository, recorder):
    mcq = repository.create(OWNER, make_mcq(correct=1))
    attempt = recorder.record(mcq.id, OWNER, mcq.choices[1].id)

    # The former correct answer becomes wrong and its row is replaced.
    repository.update(
        mcq.id,
        OWNER,
        MCQUpdate(
            choices=[
                ChoiceCreate(choice_text="4", is_correct=False),
                ChoiceCreate(choice_text="5", is_correct=True),
            ]
        ),
    )

    [stored] = recorder.list_for_user(mcq.id, OWNER)
    assert stored.id == attempt.id
    assert stored.is_correct is True
    assert stored.selected_choice_text == "4"
    assert stored.selected_choice_id is None


def test_old_choice_id_cannot_be_attempted_after_update(repository, recorder):
    mcq = repository.create(OWNER, make_mcq())
    old_choice_id = mcq.choices[1].id
    repository.update(
        mcq.id,
        OWNER,
        MCQUpdate(
            choices=[
                ChoiceCreate(choice_text="yes", is_correct=True),
                ChoiceCreate(choice_text="no", is_correct=False),
            ]
        ),
    )
    with pytest.raises(ValidationError):
        recorder.record(mcq.id, OWNER, old_choice_id)
