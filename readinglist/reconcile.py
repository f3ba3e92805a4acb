"""Merge selected books into the reading list without duplicates."""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from readinglist.database import ReadingListStore
from readinglist.models import Book

logger = logging.getLogger(__name__)


@dataclass
class ReconcileResult:
    """Outcome of one reconcile pass."""
    accepted: List[Book] = field(default_factory=list)
    rejected: List[Optional[str]] = field(default_factory=list)


def is_in_reading_list(books: Iterable[Book], book: Book) -> bool:
    """
    Check whether a book with the same title and authors is already listed.

    Publisher is not compared. A missing title or authors value matches
    another missing value.
    """
    return any(existing.dedup_key == book.dedup_key for existing in books)


def reconcile(store: ReadingListStore, selected: List[Book]) -> ReconcileResult:
    """
    Append each selected book that is not already in the store.

    Books are checked in selection order against the stored list plus
    everything accepted earlier in the same call, so repeated selections
    in one batch are only added once. Each accepted book is written as
    soon as it is accepted; there is no rollback if a later write fails.

    Args:
        store: Open reading list store
        selected: Books chosen by the operator

    Returns:
        ReconcileResult with accepted books and rejected titles
    """
    result = ReconcileResult()
    seen = store.books()

    for book in selected:
        if is_in_reading_list(seen, book):
            result.rejected.append(book.title)
            continue

        store.append(book)
        seen.append(book)
        result.accepted.append(book)

    logger.info(
        f"Reconciled {len(selected)} selections: "
        f"{len(result.accepted)} added, {len(result.rejected)} already listed"
    )
    return result
