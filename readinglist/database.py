"""JSON file storage for the reading list."""
import json
import logging
import os
import tempfile
from typing import Any, Dict, List, Optional

from readinglist.errors import StoreError
from readinglist.models import Book

logger = logging.getLogger(__name__)


class ReadingListStore:
    """Reading list kept as a single JSON document: {"books": [...]}.

    Assumes exactly one process uses the file at a time.
    """

    def __init__(self, path: str):
        """
        Initialize the store handle. Nothing is read until open().

        Args:
            path: Location of the JSON document
        """
        self.path = path
        self._data: Optional[Dict[str, Any]] = None

    def open(self) -> "ReadingListStore":
        """Load the document, creating it with an empty list if missing."""
        if not os.path.exists(self.path):
            self._data = {"books": []}
            self._write()
            logger.info(f"Created empty reading list at {self.path}")
            return self

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Reading list {self.path} is not valid JSON: {e}") from e
        except OSError as e:
            raise StoreError(f"Could not read reading list {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Reading list {self.path} must contain a JSON object")

        books = data.setdefault("books", [])
        if not isinstance(books, list):
            raise StoreError(f"Reading list {self.path} has a non-list 'books' entry")

        self._data = data
        logger.info(f"Opened reading list {self.path} ({len(books)} books)")
        return self

    def books(self) -> List[Book]:
        """Return all stored books in insertion order."""
        return [Book.from_dict(row) for row in self._rows()]

    def append(self, book: Book) -> None:
        """
        Append a book and write the document to disk immediately.

        Args:
            book: Book to persist
        """
        self._rows().append(book.to_dict())
        self._write()
        logger.info(f"Added to reading list: {book.title!r}")

    def _rows(self) -> List[Dict[str, Any]]:
        if self._data is None:
            raise StoreError("Reading list is not open")
        return self._data["books"]

    def _write(self) -> None:
        """Replace the document atomically via a temporary file."""
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(self._data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            raise StoreError(f"Could not write reading list {self.path}: {e}") from e

    def close(self):
        """Release the in-memory document."""
        self._data = None

    def __enter__(self):
        """Context manager entry."""
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
