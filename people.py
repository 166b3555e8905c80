import json
import logging
from threading import RLock
from typing import Any, Iterable, List, Optional

from person import Person

logger = logging.getLogger(__name__)

SEED_PEOPLE = [
    {"id": 1, "nombre": "Alejandra Marin", "edad": "28"},
    {"id": 2, "nombre": "Pedro Fernandez", "edad": "37"},
]

ID_POLICY_SIZE = "size"
ID_POLICY_MONOTONIC = "monotonic"
ID_POLICIES = (ID_POLICY_SIZE, ID_POLICY_MONOTONIC)


class PeopleStore:
    """Owns the in-memory people collection.

    Every operation runs under a single lock, so the store can be shared by
    the threadpool FastAPI uses for sync endpoints. Records handed out are
    snapshot copies; the store keeps the only live references.

    Ids are assigned according to ``id_policy``:

    - ``"size"``: ``len(collection) + 1`` at insertion time. A create after a
      delete can therefore reuse an id that is still present.
    - ``"monotonic"``: one past the highest id ever assigned, never reused.
    """

    def __init__(self, seed: Optional[Iterable[dict]] = None, id_policy: str = ID_POLICY_SIZE) -> None:
        if id_policy not in ID_POLICIES:
            raise ValueError(f"Unknown id policy: {id_policy!r}. Expected one of {ID_POLICIES}.")
        self.id_policy = id_policy
        self._seed = [dict(p) for p in (SEED_PEOPLE if seed is None else seed)]
        self._lock = RLock()
        self._people: List[Person] = []
        self._last_id = 0
        self.reset()

    # ------------------------- Core operations ------------------------- #
    def list(self) -> List[Person]:
        with self._lock:
            return [p.copy() for p in self._people]

    def create(self, name: Any, age: Any) -> Person:
        """Add a person with a store-assigned id. Both fields are required."""
        if not has_value(name) or not has_value(age):
            raise ValidationError("name or age not specified")

        with self._lock:
            person = Person(id=self._next_id(), name=_as_text(name), age=_as_text(age))
            self._people.append(person)
            self._last_id = max(self._last_id, person.id)
            logger.info(f"Person created: id={person.id}, total={len(self._people)}")
            return person.copy()

    def update(self, id: int, name: Any = None, age: Any = None) -> Person:
        """Overwrite name and/or age. Absent or empty values keep the current field."""
        with self._lock:
            person = self._find(id)
            if person is None:
                logger.warning(f"Update failed, person not found: id={id}")
                raise NotFoundError("user not found")

            if has_value(name):
                person.name = _as_text(name)
            if has_value(age):
                person.age = _as_text(age)
            logger.info(f"Person updated: id={person.id}")
            return person.copy()

    def delete(self, id: int) -> Person:
        with self._lock:
            index = self._index_of(id)
            if index is None:
                logger.warning(f"Delete failed, person not found: id={id}")
                raise NotFoundError("user not found")

            removed = self._people.pop(index)
            logger.info(f"Person deleted: id={removed.id}, total={len(self._people)}")
            return removed

    # ------------------------- Helpers ------------------------- #
    def get(self, id: int) -> Person:
        with self._lock:
            person = self._find(id)
            if person is None:
                raise NotFoundError("user not found")
            return person.copy()

    def reset(self) -> None:
        """Restore the seed collection."""
        with self._lock:
            self._people = [Person.from_dict(p) for p in self._seed]
            self._last_id = max((p.id for p in self._people), default=0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._people)

    def _next_id(self) -> int:
        if self.id_policy == ID_POLICY_MONOTONIC:
            return self._last_id + 1
        return len(self._people) + 1

    def _find(self, id: int) -> Optional[Person]:
        for person in self._people:
            if person.id == id:
                return person
        return None

    def _index_of(self, id: int) -> Optional[int]:
        for index, person in enumerate(self._people):
            if person.id == id:
                return index
        return None


def has_value(value: Any) -> bool:
    """True when an untrusted request field is present and non-empty.

    Only the empty string counts as empty text, so whitespace is kept. Other
    values count when truthy, so ``0`` and ``False`` are treated as missing.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return bool(value)


def _as_text(value: Any) -> str:
    # Stored as supplied; ages are never parsed as numbers. Booleans keep their JSON spelling
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return json.dumps(value)
    return str(value)


class StoreError(Exception):
    pass


class ValidationError(StoreError):
    pass


class NotFoundError(StoreError):
    pass
