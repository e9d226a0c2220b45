from .base import Base
from .gateway import Database, DatabaseClosedError, to_async_url
from .errors import classify_database_error
from .models import ArticleModel

__all__ = [
    "Base",
    "Database",
    "DatabaseClosedError",
    "to_async_url",
    "classify_database_error",
    "ArticleModel",
]
