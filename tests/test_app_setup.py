import logging
import logging.handlers
import os

from scenelingo_app import create_app
from scenelingo_app.config import Config


def test_logging_handlers_attached(app):
    logger = logging.getLogger('scenelingo_app')

    assert app.logger is logger
    kinds = {type(h) for h in logger.handlers}
    assert logging.handlers.RotatingFileHandler in kinds
    assert logging.StreamHandler in kinds


def test_log_file_written_to_configured_dir(tmp_path):
    class LogDirConfig(Config):
        SQLALCHEMY_DATABASE_URI = 'sqlite://'
        LOG_DIR = str(tmp_path / 'logs')
        LOG_LEVEL = 'DEBUG'

    app = create_app(LogDirConfig)
    for handler in logging.getLogger('scenelingo_app').handlers:
        handler.flush()

    assert app.logger.level == logging.DEBUG
    assert os.path.exists(os.path.join(LogDirConfig.LOG_DIR, 'scenelingo.log'))


def test_blueprints_registered(app):
    prefixes = {rule.rule.split('/')[2] for rule in app.url_map.iter_rules() if rule.rule.startswith('/api/')}

    assert {'scenes', 'stats', 'learn', 'shell', 'speech'} <= prefixes
