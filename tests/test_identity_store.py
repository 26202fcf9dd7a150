import pytest

from iris_matcher.data_models import IrisCode
from iris_matcher.exceptions import IdentityNotFoundError, InvalidIdentityError


def test_new_store_is_empty(store):
    assert store.is_empty()
    assert len(store) == 0
    assert store.names() == []


def test_enroll_and_lookup(store):
    replaced = store.enroll("Alice", IrisCode("11110000"))

    assert replaced is False
    assert not store.is_empty()
    assert store.is_known("Alice")
    assert "Alice" in store
    assert store.lookup("Alice") == IrisCode("11110000")


def test_lookup_unknown_name(store):
    store.enroll("Alice", IrisCode("1"))

    with pytest.raises(IdentityNotFoundError) as exc_info:
        store.lookup("Carol")

    assert exc_info.value.context["name"] == "Carol"
    assert exc_info.value.error_code == "STORE_001"
    assert not store.is_known("Carol")


def test_reenrollment_keeps_last_code(store):
    store.enroll("Alice", IrisCode("1111"))
    replaced = store.enroll("Alice", IrisCode("1010"))

    assert replaced is True
    assert len(store) == 1
    assert store.lookup("Alice").bits == "1010"


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_blank_names_are_rejected(store, name):
    with pytest.raises(InvalidIdentityError):
        store.enroll(name, IrisCode("1"))

    assert store.is_empty()


def test_names_are_sorted(store):
    for name in ["Carol", "Alice", "Bob"]:
        store.enroll(name, IrisCode("1"))

    assert store.names() == ["Alice", "Bob", "Carol"]


def test_get_record(store):
    store.enroll("Bob", IrisCode("11111111"))
    record = store.get_record("Bob")

    assert record.name == "Bob"
    assert record.code.bits == "11111111"
    assert record.to_dict()["code"] == {"bits": "11111111", "length": 8}


def test_stores_are_independent(store):
    from iris_matcher.identity_store import IdentityStore

    other = IdentityStore()
    store.enroll("Alice", IrisCode("1"))

    assert other.is_empty()
