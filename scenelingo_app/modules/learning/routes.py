from flask import jsonify, request

from scenelingo_app.core.error_handlers import NotFoundError, ValidationError, success_response
from scenelingo_app.modules.scenes.catalog import get_scene
from scenelingo_app.modules.stats.interface import get_stats_view

from . import learning_api_bp
from .interface import get_session_registry


@learning_api_bp.route('/sessions', methods=['POST'])
async def start_session_api():
    """Select a scene and load its vocabulary."""
    payload = request.get_json(silent=True) or {}
    scene_id = payload.get('scene_id')
    if not scene_id or not isinstance(scene_id, str):
        raise ValidationError('scene_id is required', errors={'scene_id': 'missing'})

    scene = get_scene(scene_id)
    if scene is None:
        raise NotFoundError(f"Scene '{scene_id}' not found", resource='scene')

    session = await get_session_registry().start_session(scene)
    return jsonify(success_response(session.snapshot())), 201


@learning_api_bp.route('/session', methods=['GET'])
def get_session_api():
    session = get_session_registry().require_active()
    return jsonify(success_response(session.snapshot()))


@learning_api_bp.route('/session/image', methods=['POST'])
async def load_image_api():
    """
    Show the current card's picture.

    An optional ``index`` in the body names the card the client is showing;
    if the cursor has moved on, nothing is fetched.
    """
    session = get_session_registry().require_active()
    payload = request.get_json(silent=True) or {}
    index = payload.get('index')
    if index is not None and (isinstance(index, bool) or not isinstance(index, int)):
        raise ValidationError('index must be an integer', errors={'index': repr(index)})

    if index is not None and index != session.current_index:
        data = session.snapshot()
        data['stale'] = True
        return jsonify(success_response(data))

    await session.show_card()
    return jsonify(success_response(session.snapshot()))


@learning_api_bp.route('/session/flip', methods=['POST'])
def flip_card_api():
    session = get_session_registry().require_active()
    session.flip()
    return jsonify(success_response(session.snapshot()))


@learning_api_bp.route('/session/next', methods=['POST'])
async def next_card_api():
    session = get_session_registry().require_active()
    await session.advance()
    return jsonify(success_response(session.snapshot()))


@learning_api_bp.route('/session/finish', methods=['POST'])
def finish_session_api():
    """Collect rewards; the stats are updated by the session_completed listener."""
    reward = get_session_registry().finish()
    return jsonify(success_response({
        'reward': reward.to_dict(),
        'stats': get_stats_view().to_dict(),
    }))


@learning_api_bp.route('/session', methods=['DELETE'])
def cancel_session_api():
    get_session_registry().cancel()
    return jsonify(success_response(message='Session cancelled'))
