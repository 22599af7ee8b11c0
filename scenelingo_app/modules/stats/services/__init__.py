from .stats_controller import CheckInResult, StatsController
from .stats_store import StatsStore

__all__ = ["CheckInResult", "StatsController", "StatsStore"]
