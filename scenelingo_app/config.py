# File: scenelingo_app/config.py
# Application configuration. Values that differ per deployment come from the
# environment (or a .env file).

import os

from dotenv import load_dotenv

load_dotenv()

# config.py lives in <root>/scenelingo_app/, so the project root is one level up.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "scenelingo.db")


class Config:
    """Flask configuration for SceneLingo."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')

    # Generative service credential and models
    GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY') or os.environ.get('API_KEY')
    GEMINI_TEXT_MODEL = os.environ.get('GEMINI_TEXT_MODEL', 'gemini-2.5-flash')
    GEMINI_IMAGE_MODEL = os.environ.get('GEMINI_IMAGE_MODEL', 'gemini-2.5-flash-image')

    VOCABULARY_WORD_COUNT = 5
    VOCABULARY_TIMEOUT_SECONDS = 30.0
    IMAGE_TIMEOUT_SECONDS = 20.0

    # Learning session
    ADVANCE_DELAY_SECONDS = 0.3
    SESSION_REWARD_POINTS = 50

    # Stats
    STATS_STORAGE_KEY = 'lingoScene_stats'
    CHECK_IN_BONUS_POINTS = 10
    DEFAULT_DAILY_GOAL = 10

    db_dir = os.path.dirname(DATABASE_PATH)
    os.makedirs(db_dir, exist_ok=True)
