"""Exception hierarchy for the reading list tool."""


class ReadingListError(Exception):
    """Base class for all reading list errors."""
    pass


class RecoverableError(ReadingListError):
    """A failure that sends the query workflow back to the term prompt."""
    pass


class SearchError(RecoverableError):
    """The book search request failed or returned an unusable body."""
    pass


class SelectionCancelled(RecoverableError):
    """The operator ended input at the selection prompt."""
    pass


class StoreError(ReadingListError):
    """The reading list file could not be read or written."""
    pass
