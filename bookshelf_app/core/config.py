# File: bookshelf_app/core/config.py
# Settings read by create_app via app.config.from_object.

import os

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, 'database', 'bookshelf.db')


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Defaults for running locally; every value can be overridden from the environment or .env."""

    APP_NAME = os.environ.get('APP_NAME', 'Bookshelf')
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'bookshelf-dev-key'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DEFAULT_DB_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(PROJECT_ROOT, 'logs')
    LOG_JSON = _env_flag('LOG_JSON')

    # Zone for users who have not picked one
    SYSTEM_TIMEZONE = os.environ.get('SYSTEM_TIMEZONE', 'UTC')

    @classmethod
    def init_app(cls, app):
        """Make sure the default SQLite file and the log directory can be written."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DEFAULT_DB_PATH}':
            os.makedirs(os.path.dirname(DEFAULT_DB_PATH), exist_ok=True)
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
