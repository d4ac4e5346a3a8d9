"""Linear lookups over the movie collection"""
import re

LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


def parse_int(value):
    """
    Coerce a form/path value to int

    Reads the leading integer, so "1.5" gives 1 and "2abc" gives 2.
    Returns None when the value does not start with ASCII digits.
    """
    if value is None:
        return None

    match = LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def find_by_id(movies, movie_id):
    """Return the first movie whose Movie_ID equals movie_id, or None"""
    if movie_id is None:
        return None

    for movie in movies:
        if movie.movie_id == movie_id:
            return movie
    return None


def search_by_title(movies, term):
    """
    Case-insensitive substring match on the title

    An empty term matches every movie.
    """
    needle = (term or '').lower()

    return [movie for movie in movies if needle in movie.title.lower()]
