"""In-memory movie collection loaded once from a JSON file"""
import json
import logging
import threading

from .models import MovieRecord

logger = logging.getLogger(__name__)


class MovieStore:
    """
    Holds the movie collection for the lifetime of the process.

    The collection is loaded at most once. Until the load finishes the store
    serves an empty tuple; afterwards it serves the parsed records, or still
    the empty tuple when the load failed.
    """

    def __init__(self, path):
        self.path = path
        self._movies = ()
        self._ready = threading.Event()
        self._lock = threading.Lock()
        self._attempted = False
        self._load_failed = False

    @property
    def movies(self):
        return self._movies

    @property
    def is_loaded(self):
        return self._ready.is_set()

    @property
    def load_failed(self):
        return self._load_failed

    def get(self, index):
        """Return the movie at a 0-based position, or None when out of range"""
        movies = self._movies

        if index is None or index < 0 or index >= len(movies):
            return None
        return movies[index]

    def wait_until_loaded(self, timeout=None):
        return self._ready.wait(timeout)

    def _claim_attempt(self):
        with self._lock:
            if self._attempted:
                return False
            self._attempted = True
            return True

    def load(self):
        """
        Read and publish the movie collection

        Errors are logged and swallowed: the store keeps its previous
        (empty) collection and the server keeps running.
        """
        if not self._claim_attempt():
            logger.warning(f"Movie data already loaded from {self.path}, skipping reload")
            return
        self._load()

    def load_in_background(self):
        """Start the single load attempt on a daemon thread"""
        if not self._claim_attempt():
            logger.warning(f"Movie data already loaded from {self.path}, skipping reload")
            return None

        thread = threading.Thread(target=self._load, name='movie-data-loader', daemon=True)
        thread.start()
        return thread

    def _load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, list):
                raise ValueError(f"Expected a JSON array, got {type(data).__name__}")

            movies = tuple(MovieRecord.from_dict(item) for item in data)

        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            self._load_failed = True
            logger.error(f"Failed to load movie data from {self.path}: {e}")

        else:
            self._movies = movies
            logger.info(f"Movie data loaded successfully ({len(movies)} movies)")

        finally:
            self._ready.set()
