from catalog.models import MovieRecord
from catalog.search import find_by_id, parse_int, search_by_title


MOVIES = tuple(MovieRecord.from_dict(item) for item in [
    {'Movie_ID': 1, 'Title': 'Up'},
    {'Movie_ID': 2, 'Title': 'Her'},
    {'Movie_ID': 3, 'Title': 'Upgrade'},
    {'Movie_ID': 3, 'Title': 'Same Id'},
    {'Movie_ID': 4, 'Title': 'The Dark Knight'},
])


def test_parse_int():
    assert parse_int('5') == 5
    assert parse_int(' 12 ') == 12
    assert parse_int('-1') == -1
    assert parse_int('abc') is None
    assert parse_int('') is None
    assert parse_int(None) is None


def test_parse_int_reads_leading_integer():
    assert parse_int('1.5') == 1
    assert parse_int('2abc') == 2
    assert parse_int('+7') == 7
    assert parse_int('0_1') == 0
    assert parse_int('x1') is None
    assert parse_int('\u0661') is None


def test_find_by_own_id():
    for movie in MOVIES[:3]:
        assert find_by_id(MOVIES, movie.movie_id) is movie


def test_find_by_id_returns_first_match():
    assert find_by_id(MOVIES, 3).title == 'Upgrade'


def test_find_by_id_not_found():
    assert find_by_id(MOVIES, 9) is None
    assert find_by_id(MOVIES, None) is None
    assert find_by_id((), 1) is None


def test_search_by_title_case_insensitive():
    titles = [movie.title for movie in search_by_title(MOVIES, 'UP')]

    assert titles == ['Up', 'Upgrade']


def test_search_by_title_substring():
    titles = [movie.title for movie in search_by_title(MOVIES, 'dark kn')]

    assert titles == ['The Dark Knight']


def test_search_by_title_no_match():
    assert search_by_title(MOVIES, 'zzz') == []


def test_empty_term_matches_everything():
    assert search_by_title(MOVIES, '') == list(MOVIES)
    assert search_by_title(MOVIES, None) == list(MOVIES)
