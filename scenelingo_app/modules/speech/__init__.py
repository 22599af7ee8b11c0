from flask import Blueprint

speech_api_bp = Blueprint(
    'speech_api',
    __name__,
)

from . import routes  # noqa: E402,F401
