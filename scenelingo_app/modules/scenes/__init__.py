from flask import Blueprint

scenes_api_bp = Blueprint(
    'scenes_api',
    __name__,
)

from . import routes  # noqa: E402,F401
