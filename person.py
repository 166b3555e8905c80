from __future__ import annotations


class Person:
    """A single managed individual in the people collection."""

    def __init__(self, id: int, name: str, age: str) -> None:
        self.id = id
        self.name = name
        self.age = age

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.name} ({self.age}) [id: {self.id}]"

    def __repr__(self) -> str:
        return f"Person(id={self.id!r}, name={self.name!r}, age={self.age!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return (self.id, self.name, self.age) == (other.id, other.name, other.age)

    # Mutable record, compared by value: unhashable
    __hash__ = None

    def copy(self) -> "Person":
        return Person(id=self.id, name=self.name, age=self.age)

    def to_dict(self) -> dict:
        # Wire field names are localized
        return {
            "id": self.id,
            "nombre": self.name,
            "edad": self.age,
        }

    @staticmethod
    def from_dict(data: dict) -> "Person":
        return Person(
            id=int(data["id"]),
            name=data.get("nombre", data.get("name")),
            age=data.get("edad", data.get("age")),
        )
