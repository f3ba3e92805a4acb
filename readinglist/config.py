"""Configuration management."""
import logging
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""
    
    # Storage
    READING_LIST_PATH = os.getenv("READING_LIST_PATH", "db.json")
    
    # API
    GOOGLE_BOOKS_API_KEY = os.getenv("GOOGLE_BOOKS_API_KEY")
    GOOGLE_BOOKS_URL = os.getenv(
        "GOOGLE_BOOKS_URL", "https://www.googleapis.com/books/v1/volumes"
    )
    
    # Defaults
    DEFAULT_TIMEOUT = int(os.getenv("DEFAULT_TIMEOUT", "10"))
    MAX_SEARCH_LIMIT = 5
    SEARCH_LIMIT = int(os.getenv("SEARCH_LIMIT", "5"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
    
    @property
    def log_level(self) -> int:
        """Numeric logging level, falling back to WARNING for unknown names."""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.WARNING
    
    @property
    def search_limit(self) -> int:
        """Batch size, kept between 1 and MAX_SEARCH_LIMIT."""
        return max(1, min(self.SEARCH_LIMIT, self.MAX_SEARCH_LIMIT))
