from libris.models.author import Author
from libris.models.book import Book

__all__ = ["Author", "Book"]
