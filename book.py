from __future__ import annotations


class Book:
    """Represents a single book in the read-only catalog."""

    def __init__(self, id: int, title: str, author: str) -> None:
        self.id = id
        self.title = title.strip()
        self.author = author.strip()

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (id: {self.id})"

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "author": self.author}

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(id=int(data["id"]), title=data["title"], author=data["author"])
