from flask import current_app, jsonify, request
from flask_wtf.csrf import generate_csrf

from scenelingo_app.core.error_handlers import ValidationError, success_response

from . import shell_api_bp
from .state import Tab


def _get_shell():
    return current_app.extensions['scenelingo.shell']


def _parse_tab(raw):
    try:
        return Tab(str(raw).upper())
    except ValueError:
        raise ValidationError(f"Unknown tab '{raw}'", errors={'tab': [t.value for t in Tab]})


@shell_api_bp.route('', methods=['GET'])
def shell_view_api():
    """View model of the current tab; ?tab= switches first."""
    shell = _get_shell()
    raw_tab = request.args.get('tab')
    if raw_tab:
        shell.switch_tab(_parse_tab(raw_tab))
    data = shell.view()
    data['csrfToken'] = generate_csrf()
    return jsonify(success_response(data))


@shell_api_bp.route('/tab', methods=['POST'])
def switch_tab_api():
    payload = request.get_json(silent=True) or {}
    shell = _get_shell()
    shell.switch_tab(_parse_tab(payload.get('tab')))
    return jsonify(success_response(shell.view()))
