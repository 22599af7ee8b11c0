from flask import Blueprint

shell_api_bp = Blueprint(
    'shell_api',
    __name__,
)

from . import routes  # noqa: E402,F401
