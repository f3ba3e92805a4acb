"""HTTP client for Google Books API."""
import requests
from typing import Optional, Dict, Any, List
import logging

from readinglist.errors import SearchError
from readinglist.models import Book
from readinglist.parse import parse_books_response

logger = logging.getLogger(__name__)


class GoogleBooksClient:
    """Client for Google Books API volume search.

    Each search is a single request: no retries and no caching. Every
    failure is raised as SearchError so callers can tell it apart from an
    empty result.
    """

    BASE_URL = "https://www.googleapis.com/books/v1/volumes"

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: int = 10,
        base_url: Optional[str] = None
    ):
        """
        Initialize Google Books API client.

        Args:
            api_key: API key sent with every request
            timeout: Request timeout in seconds
            base_url: Override for the volumes endpoint
        """
        self.api_key = api_key
        self.timeout = timeout
        self.base_url = base_url or self.BASE_URL

        # Create session for connection pooling
        self.session = requests.Session()

    def search(self, query: str, max_results: int = 5) -> Dict[str, Any]:
        """
        Search for books.

        Args:
            query: Search query string
            max_results: Maximum results to request (1-40)

        Returns:
            API response JSON

        Raises:
            SearchError: On connection failure, timeout, non-200 status
                or a body that is not JSON
        """
        params = {
            "q": query,
            "maxResults": max(1, min(max_results, 40))  # API limit
        }

        if self.api_key:
            params["key"] = self.api_key

        logger.info(f"Searching Google Books for: {query!r}")

        try:
            response = self.session.get(
                self.base_url,
                params=params,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            logger.warning(f"Timeout after {self.timeout}s searching for {query!r}")
            raise SearchError(f"Search timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"Connection error searching for {query!r}: {e}")
            raise SearchError(f"Could not reach Google Books: {e}") from e

        # Handle different status codes
        if response.status_code == 429:
            logger.warning("Rate limited (429)")
            raise SearchError("Rate limited by Google Books, try again shortly")

        elif response.status_code >= 500:
            logger.warning(f"Server error ({response.status_code})")
            raise SearchError(f"Google Books server error ({response.status_code})")

        elif response.status_code != 200:
            # Bad or missing API key lands here
            logger.error(f"Client error ({response.status_code}): {response.text}")
            raise SearchError(f"Search request rejected ({response.status_code})")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Response body is not JSON: {e}")
            raise SearchError("Malformed search response") from e

        logger.info(f"Success: {response.status_code}")
        return data

    def fetch_books(self, search_term: str, limit: int = 5) -> List[Book]:
        """
        Search and shape the first ``limit`` results into books.

        Args:
            search_term: Non-empty search term
            limit: Batch size

        Returns:
            Up to ``limit`` Book objects
        """
        response = self.search(search_term, max_results=limit)
        books = parse_books_response(response, limit=limit)
        logger.info(f"Found {len(books)} books for {search_term!r}")
        return books

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
