"""Tests for merging selections into the reading list."""
from readinglist.models import Book
from readinglist.reconcile import is_in_reading_list, reconcile


def test_add_to_empty_list(store, hercules):
    """Test that a new book is accepted into an empty list."""
    result = reconcile(store, [hercules])
    
    assert result.accepted == [hercules]
    assert result.rejected == []
    assert store.books() == [hercules]


def test_existing_book_is_rejected(store, hercules):
    """Test that a book with the same title and authors is rejected."""
    store.append(hercules)
    other_edition = Book(
        title="Hercules",
        authors="Jennifer Posedel, Stephen Lawton",
        publisher="Another Press"
    )
    
    result = reconcile(store, [other_edition])
    
    assert result.accepted == []
    assert result.rejected == ["Hercules"]
    assert store.books() == [hercules]


def test_reconcile_is_idempotent(store, hercules):
    """Test that reconciling the same book twice leaves one entry."""
    reconcile(store, [hercules])
    result = reconcile(store, [hercules])
    
    assert result.rejected == ["Hercules"]
    assert len(store.books()) == 1


def test_empty_selection(store, hercules):
    """Test that selecting nothing changes nothing."""
    store.append(hercules)
    
    result = reconcile(store, [])
    
    assert result.accepted == []
    assert result.rejected == []
    assert store.books() == [hercules]


def test_same_title_different_authors_is_accepted(store, hercules):
    """Test that only the title and authors pair counts as a duplicate."""
    store.append(hercules)
    other = Book(title="Hercules", authors="Alastair Blanshard")
    
    result = reconcile(store, [other])
    
    assert result.accepted == [other]
    assert store.books() == [hercules, other]


def test_duplicates_within_one_selection(store):
    """Test that a book selected twice in one batch is added once."""
    book = Book(title="Twin", authors="Author")
    
    result = reconcile(store, [book, book])
    
    assert result.accepted == [book]
    assert result.rejected == ["Twin"]
    assert store.books() == [book]


def test_selection_order_is_preserved(store):
    """Test that accepted books are stored in selection order."""
    books = [Book(title="B"), Book(title="A"), Book(title="C")]
    
    reconcile(store, books)
    
    assert [book.title for book in store.books()] == ["B", "A", "C"]


def test_missing_fields_match_each_other():
    """Test that absent title and authors compare equal."""
    listed = [Book(publisher="Somewhere")]
    
    assert is_in_reading_list(listed, Book(publisher="Elsewhere"))
    assert not is_in_reading_list(listed, Book(title="Named"))
