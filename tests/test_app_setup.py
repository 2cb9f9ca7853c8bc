import json
import logging

import pytest
from flask import Flask
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import text

from bookshelf_app import create_app, db
from bookshelf_app.core.config import Config
from bookshelf_app.core.error_handlers import ValidationError
from bookshelf_app.core.logging_config import JsonFormatter
from bookshelf_app.core.module_registry import ModuleDefinition, register_modules
from bookshelf_app.modules.goals.schemas import ReadingGoalPayload


def test_index_redirects_to_login(client):
    response = client.get('/')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/auth/login')


def test_index_redirects_logged_in_user_to_goals(logged_in_client):
    response = logged_in_client.get('/')
    assert response.headers['Location'].endswith('/goals/')


def test_unknown_api_endpoint_is_json(logged_in_client):
    response = logged_in_client.get('/goals/api/nothing-here')

    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'message': 'Endpoint not found', 'code': 'NOT_FOUND'}


def test_registry_skips_disabled_modules():
    app = Flask(__name__)
    register_modules(app, [
        ModuleDefinition('shelves', url_prefix='/shelves'),
        ModuleDefinition('goals', url_prefix='/goals', enabled=False),
    ])

    assert 'shelves' in app.blueprints
    assert 'goals' not in app.blueprints


def test_json_log_lines_are_valid_json():
    record = logging.LogRecord('bookshelf_app.test', logging.INFO, __file__, 1,
                               'said "%s"', ('hi',), None)

    entry = json.loads(JsonFormatter().format(record))

    assert entry['message'] == 'said "hi"'
    assert entry['level'] == 'INFO'
    assert entry['logger'] == 'bookshelf_app.test'


def test_validation_error_from_pydantic():
    with pytest.raises(PydanticValidationError) as excinfo:
        ReadingGoalPayload.model_validate({'goal_type': 'minutes', 'target': 0})

    error = ValidationError.from_pydantic(excinfo.value, 'Invalid reading goal')

    assert error.status_code == 400
    assert set(error.details['errors']) == {'goal_type', 'target'}
    assert error.to_dict()['code'] == 'VALIDATION_ERROR'


def test_sqlite_file_database_pragmas(tmp_path):

    class FileConfig(Config):
        TESTING = True
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'bookshelf.db'}"
        LOG_DIR = None

    app = create_app(FileConfig)
    with app.app_context():
        assert db.session.execute(text('PRAGMA journal_mode')).scalar() == 'wal'
        assert db.session.execute(text('PRAGMA foreign_keys')).scalar() == 1
        assert db.session.execute(text('PRAGMA busy_timeout')).scalar() == 10000
        db.session.remove()
        db.engine.dispose()
