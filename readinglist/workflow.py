"""The list and query commands."""
import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape

from readinglist.client import GoogleBooksClient
from readinglist.database import ReadingListStore
from readinglist.display import render_reading_list, render_report
from readinglist.errors import RecoverableError
from readinglist.prompts import prompt_for_selection, prompt_for_term
from readinglist.reconcile import ReconcileResult, reconcile

logger = logging.getLogger(__name__)


def list_books(store: ReadingListStore):
    """Print the stored reading list."""
    render_reading_list(store.books())


def run_query(
    store: ReadingListStore,
    client: GoogleBooksClient,
    limit: int = 5,
    console: Optional[Console] = None
) -> ReconcileResult:
    """
    Search, let the operator pick books, and add the new ones.

    Search failures and a cancelled selection go back to the term prompt.
    Any other error ends the command.

    Args:
        store: Open reading list store
        client: Google Books client
        limit: Number of search results offered
        console: Console used for prompts

    Returns:
        ReconcileResult for the accepted selection
    """
    console = console or Console()
    list_books(store)

    while True:
        term = prompt_for_term(console)
        try:
            batch = client.fetch_books(term, limit=limit)
            selected = prompt_for_selection(batch, console)
        except RecoverableError as e:
            logger.warning(f"Search round failed for {term!r}: {e}")
            console.print(f"[red]{escape(str(e))}. Try another search.[/]")
            continue

        result = reconcile(store, selected)
        render_report(store.books(), result.rejected)
        return result
