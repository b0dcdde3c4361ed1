import pytest

from stamp_quiz.core.errors import IndexOutOfRange
from stamp_quiz.core.services.answer_store import AnswerStore


def test_new_store_is_empty() -> None:
    store = AnswerStore(3)
    assert len(store) == 3
    assert store.snapshot() == ["", "", ""]
    assert store.get(2) == ""
    assert not store.is_answered(0)


def test_save_trims_and_overwrites() -> None:
    store = AnswerStore(2)
    store.save(1, "  森 \n")
    assert store.get(1) == "森"
    store.save(1, "林")
    assert store.get(1) == "林"
    assert store.snapshot() == ["", "林"]


def test_out_of_range_access_raises() -> None:
    store = AnswerStore(2)
    with pytest.raises(IndexOutOfRange):
        store.save(2, "x")
    with pytest.raises(IndexOutOfRange):
        store.get(-1)
    # Also usable as a plain IndexError by callers.
    with pytest.raises(IndexError):
        store.get(5)


def test_snapshot_is_a_copy() -> None:
    store = AnswerStore(1)
    snapshot = store.snapshot()
    snapshot[0] = "changed"
    assert store.get(0) == ""
