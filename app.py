from flask import Flask, jsonify, request, render_template, Response
from werkzeug.exceptions import MethodNotAllowed, NotFound
from config import Config
import logging

from catalog.movie_store import MovieStore
from catalog.search import find_by_id, parse_int, search_by_title
from views import register_template_helpers

from metrics import (
    metrics_endpoint, track_request,
    SEARCH_QUERY_COUNT, SEARCH_RESULTS_COUNT,
    MOVIE_VIEWS, MOVIES_LOADED
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = Flask(
    __name__,
    static_folder=Config.PUBLIC_DIR,
    static_url_path='',
    template_folder=Config.TEMPLATES_DIR
)
app.config.from_object(Config)
register_template_helpers(app)


store = MovieStore(Config.MOVIE_DATA_FILE)
store.load_in_background()

MOVIES_LOADED.set_function(lambda: len(store.movies))


@app.route('/')
@track_request
def home():
    return render_template('index.html', title='Express')


@app.route('/data')
@track_request
def data():
    return render_template('data.html', title='All Movies', movies=store.movies)


@app.route('/data/movie/<index>')
@track_request
def movie_detail(index):
    movie = store.get(parse_int(index))

    if movie is None:
        return render_template(
            'error.html',
            title='Error',
            message=f'No movie found at index {index}'
        ), 404

    MOVIE_VIEWS.inc()

    return render_template(
        'movie.html',
        title='Movie Details',
        movie=movie,
        no_metascore=movie.missing_metascore
    )


@app.route('/data/search/id', methods=['GET'])
@track_request
def search_id_form():
    return render_template('search_id.html', title='Search by Movie ID')


@app.route('/data/search/id', methods=['POST'])
@track_request
def search_id():
    submitted = request.form.get('movie_id', '').strip()
    SEARCH_QUERY_COUNT.labels(kind='id').inc()

    movie = find_by_id(store.movies, parse_int(submitted))

    if movie is None:
        SEARCH_RESULTS_COUNT.observe(0)
        return render_template(
            'search_id_result.html',
            title='Search Result',
            not_found=True,
            id=submitted
        )

    SEARCH_RESULTS_COUNT.observe(1)

    return render_template('search_id_result.html', title='Search Result', movie=movie)


@app.route('/data/search/title', methods=['GET'])
@track_request
def search_title_form():
    return render_template('search_title.html', title='Search by Title')


@app.route('/data/search/title', methods=['POST'])
@track_request
def search_title():
    search_term = request.form.get('title', '')
    SEARCH_QUERY_COUNT.labels(kind='title').inc()

    results = search_by_title(store.movies, search_term)
    SEARCH_RESULTS_COUNT.observe(len(results))

    return render_template(
        'search_title_result.html',
        title='Search Results',
        results=results,
        search_term=search_term
    )


@app.route('/filteredData')
@track_request
def filtered_data():
    return render_template('filtered_data.html', title='Filtered Movies', movies=store.movies)


@app.route('/allData')
@track_request
def all_data():
    return render_template('all_data.html', title='All Movies With Metascore', movies=store.movies)


@app.route('/users')
@track_request
def users():
    return Response('respond with a resource', mimetype='text/plain')


@app.route('/health')
def health():
    if not store.is_loaded:
        status = 'loading'
    elif store.load_failed:
        status = 'degraded'
    else:
        status = 'healthy'

    return jsonify({
        'status': status,
        'service': 'movie-app',
        'movies_loaded': store.is_loaded,
        'load_failed': store.load_failed,
        'movie_count': len(store.movies)
    }), 200


@app.route('/metrics')
def metrics():
    return metrics_endpoint()


@app.errorhandler(NotFound)
@app.errorhandler(MethodNotAllowed)
def wrong_route(e):
    logger.debug(f"No route for {request.method} {request.path}")
    return render_template('error.html', title='Error', message='Wrong Route'), 404


if __name__ == '__main__':
    logger.info(f"Server listening at http://localhost:{Config.PORT}")
    app.run(
        host=Config.HOST,
        port=Config.PORT,
        debug=Config.DEBUG
    )
