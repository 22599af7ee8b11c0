from flask import Blueprint

learning_api_bp = Blueprint(
    'learning_api',
    __name__,
)

from . import routes  # noqa: E402,F401
