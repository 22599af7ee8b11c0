from flask import current_app

from .schemas import StatsView, UserStats
from .services.stats_controller import CheckInResult, StatsController


def get_stats_controller() -> StatsController:
    """The controller owned by the application's shell state."""
    return current_app.extensions['scenelingo.shell'].stats


def get_stats_view() -> StatsView:
    return get_stats_controller().view()


def daily_check_in() -> CheckInResult:
    """Public API for the daily bonus button."""
    return get_stats_controller().check_in()


def record_session_completion(points: int, words: int) -> UserStats:
    """Add a finished session's reward to the stats."""
    return get_stats_controller().record_completion(points, words)
