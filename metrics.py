from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response
import time
import functools


REQUEST_COUNT = Counter(
    'movie_app_request_count',
    'Total request count',
    ['endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movie_app_request_duration_seconds',
    'Request duration',
    ['endpoint']
)


SEARCH_QUERY_COUNT = Counter(
    'movie_app_search_queries_total',
    'Total search queries',
    ['kind']
)

SEARCH_RESULTS_COUNT = Histogram(
    'movie_app_search_results',
    'Number of search results returned',
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 1000)
)


MOVIE_VIEWS = Counter(
    'movie_app_movie_views_total',
    'Total movie detail page views'
)

MOVIES_LOADED = Gauge(
    'movie_app_movies_loaded',
    'Number of movies in the in-memory collection'
)


def _status_of(response):
    if isinstance(response, tuple) and len(response) > 1 and isinstance(response[1], int):
        return response[1]
    return getattr(response, 'status_code', 200)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)
        except Exception:
            REQUEST_COUNT.labels(
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

        REQUEST_COUNT.labels(
            endpoint=f.__name__,
            http_status=_status_of(response)
        ).inc()

        REQUEST_DURATION.labels(
            endpoint=f.__name__
        ).observe(time.time() - start_time)

        return response

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
