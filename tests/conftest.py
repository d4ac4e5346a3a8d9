import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from catalog.movie_store import MovieStore


SCENARIO_MOVIES = [
    {'Movie_ID': 1, 'Title': 'Up', 'Metascore': '88', 'Year': '2009'},
    {'Movie_ID': 2, 'Title': 'Her', 'Metascore': 'N/A', 'Year': '2013'},
]


def write_movies(path, movies):
    path.write_text(json.dumps(movies), encoding='utf-8')
    return path


@pytest.fixture
def movie_file(tmp_path):
    return write_movies(tmp_path / 'movieData.json', SCENARIO_MOVIES)


@pytest.fixture
def store(movie_file):
    movie_store = MovieStore(movie_file)
    movie_store.load()
    return movie_store


@pytest.fixture
def empty_store(tmp_path):
    movie_store = MovieStore(tmp_path / 'missing.json')
    movie_store.load()
    return movie_store


@pytest.fixture
def client(store, monkeypatch):
    import app as movie_app

    monkeypatch.setattr(movie_app, 'store', store)
    movie_app.app.config['TESTING'] = True

    with movie_app.app.test_client() as test_client:
        yield test_client
