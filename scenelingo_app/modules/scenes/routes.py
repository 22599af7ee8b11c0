from flask import jsonify, request

from scenelingo_app.core.error_handlers import NotFoundError, ValidationError, success_response

from . import scenes_api_bp
from .catalog import get_scene, list_scenes
from .schemas import SceneCategory


@scenes_api_bp.route('', methods=['GET'])
def list_scenes_api():
    """Scene gallery, optionally filtered by ?category=."""
    raw_category = request.args.get('category')
    category = None
    if raw_category:
        try:
            category = SceneCategory(raw_category.lower())
        except ValueError:
            raise ValidationError(
                f"Unknown category '{raw_category}'",
                errors={'category': [c.value for c in SceneCategory]},
            )

    return jsonify(success_response([scene.to_dict() for scene in list_scenes(category)]))


@scenes_api_bp.route('/<scene_id>', methods=['GET'])
def get_scene_api(scene_id):
    scene = get_scene(scene_id)
    if scene is None:
        raise NotFoundError(f"Scene '{scene_id}' not found", resource='scene')
    return jsonify(success_response(scene.to_dict()))
