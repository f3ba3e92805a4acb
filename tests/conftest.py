"""Shared fixtures."""
import pytest

from readinglist.database import ReadingListStore
from readinglist.models import Book


@pytest.fixture
def hercules():
    """The book used across the reading list scenarios."""
    return Book(
        title="Hercules",
        authors="Jennifer Posedel, Stephen Lawton",
        publisher="Arcadia Publishing"
    )


@pytest.fixture
def store(tmp_path):
    """An open store backed by a fresh file."""
    with ReadingListStore(str(tmp_path / "db.json")) as store:
        yield store


@pytest.fixture
def hercules_response():
    """Google Books response for "hercules" with more items than one batch."""
    return {
        "kind": "books#volumes",
        "totalItems": 7,
        "items": [
            {
                "id": "vol1",
                "volumeInfo": {
                    "title": "Hercules",
                    "authors": ["Jennifer Posedel", "Stephen Lawton"],
                    "publisher": "Arcadia Publishing",
                    "publishedDate": "2009"
                }
            },
            {"id": "vol2", "volumeInfo": {"title": "Hercules", "authors": ["Alastair Blanshard"]}},
            {"id": "vol3", "volumeInfo": {"title": "The Labours of Hercules", "publisher": "HarperCollins"}},
            {"id": "vol4", "volumeInfo": {"authors": ["Emma Stafford"]}},
            {"id": "vol5", "volumeInfo": {"title": "Hercules: A Novel"}},
            {"id": "vol6", "volumeInfo": {"title": "Sixth"}},
            {"id": "vol7", "volumeInfo": {"title": "Seventh"}}
        ]
    }
