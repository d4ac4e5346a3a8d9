from .models import MovieRecord
from .movie_store import MovieStore
from .search import find_by_id, parse_int, search_by_title

__all__ = [
    'MovieRecord',
    'MovieStore',
    'find_by_id',
    'parse_int',
    'search_by_title'
]
