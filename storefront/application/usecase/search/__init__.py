"""Search history use cases."""

from .delete_search import DeleteSearchUseCase
from .list_searches import ListSearchesUseCase
from .record_search import RecordSearchUseCase

__all__ = ["DeleteSearchUseCase", "ListSearchesUseCase", "RecordSearchUseCase"]
