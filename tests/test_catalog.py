import pytest

from librarysys.article import Article
from librarysys.book import Book
from librarysys.catalog import resource_from_json
from librarysys.thesis import Thesis


def test_book_round_trip():
    book = Book(
        "Dune", "Frank Herbert", "BK-001", "Fiction", 1965, "Chilton", 412, "0-441-17271-7"
    )
    restored = resource_from_json(book.to_json())
    assert isinstance(restored, Book)
    assert restored.to_json() == book.to_json()


def test_article_round_trip():
    article = Article(
        "Sorting Networks", "Kim Park", "AR-001", "Science", 2001, "Computing Letters",
        3, 4, "10.1000/xyz", 10, 20,
    )
    article.is_available = False
    restored = resource_from_json(article.to_json())
    assert isinstance(restored, Article)
    assert restored.to_json() == article.to_json()


def test_unknown_type_raises():
    with pytest.raises(ValueError, match="Unknown resource type 'Map'"):
        resource_from_json({"type": "Map"})


def test_thesis_is_not_a_known_type():
    thesis = Thesis("Graph Work", "Ada Lane", "TH-001")
    with pytest.raises(ValueError, match="Unknown resource type 'Thesis'"):
        resource_from_json(thesis.to_json())


def test_missing_type_raises():
    data = Book("Dune", "Frank Herbert", "BK-001").to_json()
    del data["type"]
    with pytest.raises(ValueError, match="Error parsing JSON"):
        resource_from_json(data)


def test_incomplete_book_raises():
    with pytest.raises(ValueError, match="Book"):
        resource_from_json({"type": "Book", "title": "Dune"})