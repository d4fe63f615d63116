from libris.repositories.author import SqlAuthorStore
from libris.repositories.base import AuthorStore, BookStore
from libris.repositories.book import SqlBookStore

__all__ = ["AuthorStore", "BookStore", "SqlAuthorStore", "SqlBookStore"]
