"""Data models for books."""
from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple

FIELDS = ("title", "authors", "publisher")


@dataclass(frozen=True)
class Book:
    """A reading list entry: title, joined authors and publisher, all optional."""
    title: Optional[str] = None
    authors: Optional[str] = None
    publisher: Optional[str] = None
    
    @property
    def dedup_key(self) -> Tuple[Optional[str], Optional[str]]:
        """(title, authors) pair compared when checking for duplicates."""
        return (self.title, self.authors)
    
    def to_dict(self) -> Dict[str, str]:
        """Serialize present fields only; absent fields are omitted."""
        return {
            name: getattr(self, name)
            for name in FIELDS
            if getattr(self, name) is not None
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        """Build a book from a stored dict, ignoring unknown keys."""
        return cls(**{name: data[name] for name in FIELDS if name in data})
