"""
Event Handlers for Stats Module.

The Learning module announces finished sessions; the stats record is updated
here so Learning never touches the stats directly.
"""
from flask import current_app

from scenelingo_app.core.signals import session_completed


@session_completed.connect
def on_session_completed(sender, **kwargs):
    """
    Expected kwargs:
        - scene_id: str
        - points: int
        - words: int
    """
    from .interface import record_session_completion

    points = kwargs.get('points', 0)
    words = kwargs.get('words', 0)

    try:
        record_session_completion(points, words)
    except Exception as e:
        current_app.logger.error(f"[Stats] Error recording session completion: {e}", exc_info=True)
        raise
