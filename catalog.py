from typing import Iterable, List, Optional

from book import Book

SEED_BOOKS = [
    {"id": 1, "title": "1984", "author": "George Orwell"},
    {"id": 2, "title": "Cien años de soledad", "author": "Gabriel García Márquez"},
]


class BookCatalog:
    """Read-only collection of books."""

    def __init__(self, books: Optional[Iterable[dict]] = None) -> None:
        self._books: List[Book] = [Book.from_dict(b) for b in (SEED_BOOKS if books is None else books)]

    def list_books(self) -> List[Book]:
        return [Book(id=b.id, title=b.title, author=b.author) for b in self._books]

    def __len__(self) -> int:
        return len(self._books)
