# File: wordmap_app/config.py
# Application configuration. Every value can be overridden from the environment.

import os

# Project root: wordmap_app/ sits one level below it.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Default SQLite database file, kept in database/ at the project root
DATABASE_PATH = os.path.join(BASE_DIR, "database", "wordmap.db")


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """
    Configuration class for the Flask application.
    """
    # Secret key protecting the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'a_very_secret_key_for_word_map'

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('WORDMAP_LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('WORDMAP_LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_flag('WORDMAP_LOG_JSON')
    LOG_TO_FILE = _env_flag('WORDMAP_LOG_TO_FILE', True)

    # Password reset codes
    RESET_CODE_TTL_MINUTES = int(os.environ.get('RESET_CODE_TTL_MINUTES', 15))

    @staticmethod
    def ensure_directories(database_uri):
        """Create the parent folder of a file-backed SQLite database."""
        prefix = 'sqlite:///'
        if database_uri.startswith(prefix) and database_uri != prefix:
            db_dir = os.path.dirname(database_uri[len(prefix):])
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)
