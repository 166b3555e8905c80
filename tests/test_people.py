import threading

import pytest

from people import (
    ID_POLICY_MONOTONIC,
    NotFoundError,
    PeopleStore,
    StoreError,
    ValidationError,
    has_value,
)
from person import Person


def _ids(store):
    return [p.id for p in store.list()]


def test_seed_collection(store):
    people = store.list()
    assert [p.to_dict() for p in people] == [
        {"id": 1, "nombre": "Alejandra Marin", "edad": "28"},
        {"id": 2, "nombre": "Pedro Fernandez", "edad": "37"},
    ]
    assert len(store) == 2


def test_list_returns_copies(store):
    people = store.list()
    people[0].name = "Changed"
    people.clear()

    assert len(store) == 2
    assert store.list()[0].name == "Alejandra Marin"


def test_create_and_list_round_trip(store):
    created = store.create("Luis", "40")

    assert created == Person(id=3, name="Luis", age="40")
    assert created in store.list()
    assert len(store) == 3


def test_created_person_is_a_snapshot(store):
    created = store.create("Luis", "40")
    created.name = "Mutated"
    assert store.get(3).name == "Luis"


@pytest.mark.parametrize("name, age", [
    (None, "40"),
    ("Luis", None),
    ("", "40"),
    ("Luis", ""),
    (None, None),
])
def test_create_requires_name_and_age(store, name, age):
    with pytest.raises(ValidationError, match="name or age not specified"):
        store.create(name, age)
    assert len(store) == 2


def test_create_keeps_age_as_text(store):
    person = store.create("Luis", " 40 años ")
    assert person.age == " 40 años "

    numeric = store.create("Eva", 22)
    assert numeric.age == "22"


def test_ids_unique_without_deletes(store):
    for i in range(20):
        store.create(f"Person {i}", str(20 + i))

    ids = _ids(store)
    assert len(ids) == len(set(ids)) == 22
    assert ids == list(range(1, 23))


def test_update_name_only_preserves_age(store):
    updated = store.update(1, name="B")
    assert updated == Person(id=1, name="B", age="28")
    assert store.get(1) == updated


def test_update_without_fields_is_a_no_op(store):
    before = store.get(1)
    assert store.update(1) == before
    assert store.list()[0] == before


def test_update_with_empty_values_behaves_like_omission(store):
    updated = store.update(2, name="", age="")
    assert updated == Person(id=2, name="Pedro Fernandez", age="37")


def test_whitespace_values_are_present(store):
    created = store.create(" ", "  ")
    assert created == Person(id=3, name=" ", age="  ")

    updated = store.update(1, name=" ")
    assert updated == Person(id=1, name=" ", age="28")


def test_boolean_age_keeps_json_spelling(store):
    assert store.create("Luis", True).age == "true"
    assert store.update(1, age=True).age == "true"


def test_person_is_unhashable(store):
    with pytest.raises(TypeError):
        hash(store.get(1))


def test_update_both_fields(store):
    updated = store.update(2, name="Pedro F.", age="38")
    assert updated.to_dict() == {"id": 2, "nombre": "Pedro F.", "edad": "38"}


def test_delete_removes_exactly_one_record(store):
    removed = store.delete(1)

    assert removed == Person(id=1, name="Alejandra Marin", age="28")
    assert len(store) == 1
    assert 1 not in _ids(store)


def test_delete_does_not_renumber(store):
    store.create("Luis", "40")
    store.delete(1)
    assert _ids(store) == [2, 3]


@pytest.mark.parametrize("operation", ["update", "delete", "get"])
def test_unknown_id_is_not_found(store, operation):
    with pytest.raises(NotFoundError, match="user not found"):
        getattr(store, operation)(999)
    assert len(store) == 2


def test_errors_share_a_base():
    assert issubclass(ValidationError, StoreError)
    assert issubclass(NotFoundError, StoreError)


def test_size_policy_reuses_ids_after_delete(store):
    # Known defect kept for compatibility: len + 1 collides after a delete
    assert store.create("Luis", "40").id == 3
    assert store.delete(2) == Person(id=2, name="Pedro Fernandez", age="37")
    assert sorted(_ids(store)) == [1, 3]

    eva = store.create("Eva", "22")
    assert eva.id == 3
    assert _ids(store) == [1, 3, 3]


def test_monotonic_policy_never_reuses_ids():
    store = PeopleStore(id_policy=ID_POLICY_MONOTONIC)
    assert store.create("Luis", "40").id == 3
    store.delete(2)
    store.delete(3)

    eva = store.create("Eva", "22")
    assert eva.id == 4
    ids = _ids(store)
    assert len(ids) == len(set(ids))


def test_unknown_id_policy_rejected():
    with pytest.raises(ValueError, match="Unknown id policy"):
        PeopleStore(id_policy="random")


def test_custom_seed_and_reset():
    store = PeopleStore(seed=[{"id": 7, "nombre": "Ana", "edad": "30"}], id_policy=ID_POLICY_MONOTONIC)
    assert store.create("Luis", "40").id == 8

    store.reset()
    assert [p.to_dict() for p in store.list()] == [{"id": 7, "nombre": "Ana", "edad": "30"}]
    assert store.create("Eva", "22").id == 8


def test_concurrent_creates_keep_ids_unique():
    store = PeopleStore(seed=[])

    def worker(n):
        for i in range(50):
            store.create(f"worker-{n}-{i}", "30")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = _ids(store)
    assert len(ids) == 200
    assert len(set(ids)) == 200


@pytest.mark.parametrize("value, expected", [
    (None, False),
    ("", False),
    ("  ", True),
    ("x", True),
    (0, False),
    (False, False),
    (40, True),
])
def test_has_value(value, expected):
    assert has_value(value) is expected
