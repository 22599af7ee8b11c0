# File: scenelingo_app/modules/scenes/catalog.py
# The fixed scene catalog. Not user-mutable.

from typing import List, Optional, Tuple

from .schemas import Scene, SceneCategory

INITIAL_SCENES: Tuple[Scene, ...] = (
    Scene(
        id='coffee-shop',
        title='Coffee Shop',
        description='Ordering drinks and snacks',
        image_url='https://picsum.photos/seed/coffee/600/400',
        category=SceneCategory.FOOD,
        color='bg-amber-100 text-amber-800',
    ),
    Scene(
        id='subway',
        title='Subway Station',
        description='Navigating public transport',
        image_url='https://picsum.photos/seed/subway/600/400',
        category=SceneCategory.TRAVEL,
        color='bg-blue-100 text-blue-800',
    ),
    Scene(
        id='office',
        title='Business Meeting',
        description='Workplace vocabulary',
        image_url='https://picsum.photos/seed/office/600/400',
        category=SceneCategory.BUSINESS,
        color='bg-slate-100 text-slate-800',
    ),
    Scene(
        id='supermarket',
        title='Supermarket',
        description='Buying groceries',
        image_url='https://picsum.photos/seed/market/600/400',
        category=SceneCategory.DAILY,
        color='bg-green-100 text-green-800',
    ),
)


def list_scenes(category: Optional[SceneCategory] = None) -> List[Scene]:
    if category is None:
        return list(INITIAL_SCENES)
    return [scene for scene in INITIAL_SCENES if scene.category is category]


def get_scene(scene_id: str) -> Optional[Scene]:
    for scene in INITIAL_SCENES:
        if scene.id == scene_id:
            return scene
    return None
