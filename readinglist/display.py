"""Display helpers: result summaries and reading list tables."""
from typing import List, Optional, Sequence, Tuple
from tabulate import tabulate
from readinglist.models import Book

EMPTY_SUMMARY = "(no details)"


def summarize(book: Book) -> str:
    """
    Build the one-line summary shown for a search result.

    Fields appear in the fixed order title, authors, publisher; absent
    fields are skipped. Returns an empty string if nothing is present.
    """
    parts = []
    if book.title:
        parts.append(f"Title: {book.title}")
    if book.authors:
        parts.append(f"| Authors: {book.authors}")
    if book.publisher:
        parts.append(f"| Publisher: {book.publisher}")
    return " ".join(parts).strip()


def label_batch(batch: Sequence[Book]) -> List[Tuple[int, str]]:
    """Pair each search result with a 1-based index and its summary."""
    return [(index, summarize(book)) for index, book in enumerate(batch, 1)]


def render_reading_list(books: List[Book], heading: str = "READING LIST:"):
    """Print the reading list as a table."""
    print("\n" + heading)
    if not books:
        print("(empty)")
        return

    headers = ["#", "Title", "Authors", "Publisher"]
    rows = [
        [i, book.title or "", book.authors or "", book.publisher or ""]
        for i, book in enumerate(books, 1)
    ]
    print(tabulate(rows, headers=headers, tablefmt="grid"))


def render_report(books: List[Book], rejected_titles: List[Optional[str]]):
    """Print the updated reading list and any titles that were already on it."""
    render_reading_list(books, heading="UPDATED READING LIST:")

    if rejected_titles:
        titles = ", ".join(title or "(untitled)" for title in rejected_titles)
        print(f"These titles already exist in the reading list: {titles}")
