"""Interactive prompts for the search term and result selection."""
import re
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from readinglist.display import EMPTY_SUMMARY, label_batch
from readinglist.errors import SelectionCancelled
from readinglist.models import Book

TERM_MESSAGE = "Search Google Books library by entering a keyword"
SELECT_MESSAGE = "Select which books to add to your local reading list"


def prompt_for_term(console: Optional[Console] = None) -> str:
    """
    Ask for a search term until a non-blank one is entered.

    EOFError from the terminal is left to the caller.
    """
    console = console or Console()
    while True:
        term = Prompt.ask(TERM_MESSAGE, console=console).strip()
        if term:
            return term
        console.print("[red]Please enter a search term.[/]")


def parse_selection(answer: str, count: int) -> List[int]:
    """
    Turn an answer like "1, 3 4" into sorted unique 1-based indices.

    Raises:
        ValueError: On a token that is not a number in 1..count
    """
    indices = set()
    for token in re.split(r"[\s,]+", answer.strip()):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise ValueError(f"{token!r} is not a number between 1 and {count}")
        indices.add(int(token))
    return sorted(indices)


def prompt_for_selection(
    batch: Sequence[Book],
    console: Optional[Console] = None
) -> List[Book]:
    """
    Show numbered search results and ask which ones to add.

    Choices are resolved by position, so two results with the same
    summary stay distinct. A blank answer selects nothing.

    Raises:
        SelectionCancelled: If input ends at the prompt
    """
    console = console or Console()
    labels = label_batch(batch)

    console.print()
    for index, summary in labels:
        console.print(f"  [cyan]{index}[/]. {escape(summary or EMPTY_SUMMARY)}")

    while True:
        try:
            answer = Prompt.ask(
                f"{SELECT_MESSAGE} (numbers separated by commas, blank for none)",
                console=console,
                default="",
                show_default=False
            )
        except EOFError as e:
            raise SelectionCancelled("Selection cancelled") from e

        try:
            chosen = parse_selection(answer, len(batch))
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/]")
            continue

        return [batch[index - 1] for index in chosen]
