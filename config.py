import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Config:
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '3000'))
    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


    BASE_DIR = Path(__file__).resolve().parent
    MOVIE_DATA_FILE = BASE_DIR / 'data' / 'movieData.json'
    PUBLIC_DIR = BASE_DIR / 'public'
    TEMPLATES_DIR = BASE_DIR / 'templates'
