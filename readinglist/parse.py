"""Parse and normalize Google Books API responses."""
from typing import Dict, Any, List, Optional
from readinglist.errors import SearchError
from readinglist.models import Book


def _text_field(volume_info: Dict[str, Any], name: str) -> Optional[str]:
    value = volume_info.get(name)
    if value is not None and not isinstance(value, str):
        raise SearchError(f"Malformed search response: {name} is not a string")
    return value or None


def parse_book(item: Dict[str, Any]) -> Book:
    """
    Parse a single book item from Google Books API.

    Only title, authors and publisher are copied. Fields missing from
    ``volumeInfo`` stay absent on the book rather than being defaulted.

    Args:
        item: Single item from Google Books API response

    Returns:
        Book object

    Raises:
        SearchError: If the item or one of the copied fields has the wrong shape
    """
    if not isinstance(item, dict):
        raise SearchError("Malformed search response: item is not an object")

    volume_info = item.get("volumeInfo") or {}
    if not isinstance(volume_info, dict):
        raise SearchError("Malformed search response: volumeInfo is not an object")

    authors = volume_info.get("authors")
    if isinstance(authors, list):
        if not all(isinstance(author, str) for author in authors):
            raise SearchError("Malformed search response: authors must be strings")
        authors = ", ".join(authors)
    elif authors is not None and not isinstance(authors, str):
        raise SearchError("Malformed search response: authors is not a list")

    return Book(
        title=_text_field(volume_info, "title"),
        authors=authors or None,
        publisher=_text_field(volume_info, "publisher")
    )


def parse_books_response(response_json: Any, limit: int = 5) -> List[Book]:
    """
    Parse full Google Books API response.

    Args:
        response_json: Complete API response JSON
        limit: Maximum number of books to keep, in response order

    Returns:
        List of between 1 and ``limit`` Book objects

    Raises:
        SearchError: If the body is malformed or has no items
    """
    if not isinstance(response_json, dict):
        raise SearchError("Malformed search response")

    items = response_json.get("items")
    if items is not None and not isinstance(items, list):
        raise SearchError("Malformed search response")
    if not items:
        # Google Books omits "items" entirely when nothing matched
        raise SearchError("No books found")

    return [parse_book(item) for item in items[:limit]]
