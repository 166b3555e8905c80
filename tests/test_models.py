from book import Book
from catalog import BookCatalog
from person import Person


def test_person_to_dict_uses_localized_keys():
    assert Person(1, "Ana", "30").to_dict() == {"id": 1, "nombre": "Ana", "edad": "30"}


def test_person_from_dict_accepts_generic_keys():
    assert Person.from_dict({"id": "4", "name": "Ana", "age": "30"}) == Person(4, "Ana", "30")


def test_person_copy_is_independent():
    original = Person(1, "Ana", "30")
    clone = original.copy()
    clone.name = "Eva"
    assert original.name == "Ana"
    assert clone is not original


def test_book_strips_text():
    book = Book(1, "  1984 ", " George Orwell ")
    assert book.to_dict() == {"id": 1, "title": "1984", "author": "George Orwell"}


def test_catalog_listing_is_a_copy():
    catalog = BookCatalog()
    books = catalog.list_books()
    books[0].title = "Changed"
    books.clear()
    assert len(catalog) == 2
    assert catalog.list_books()[0].title == "1984"


def test_catalog_custom_books():
    catalog = BookCatalog(books=[{"id": 9, "title": "Rayuela", "author": "Julio Cortázar"}])
    assert [b.to_dict() for b in catalog.list_books()] == [{"id": 9, "title": "Rayuela", "author": "Julio Cortázar"}]
