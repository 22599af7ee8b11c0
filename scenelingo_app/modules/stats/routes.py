from flask import jsonify

from scenelingo_app.core.error_handlers import success_response

from . import stats_api_bp
from .interface import daily_check_in, get_stats_view


@stats_api_bp.route('', methods=['GET'])
def get_stats_api():
    """Current stats with level, goal progress and achievements."""
    return jsonify(success_response(get_stats_view().to_dict()))


@stats_api_bp.route('/check-in', methods=['POST'])
def check_in_api():
    """Daily bonus button."""
    result = daily_check_in()
    return jsonify(success_response({
        'outcome': result.outcome.value,
        'celebrate': result.celebrate,
        'stats': get_stats_view().to_dict(),
    }))
