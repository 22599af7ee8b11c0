# File: scenelingo_app/modules/stats/services/stats_store.py
"""
Stats Store
===========
Reads and writes the single persisted stats record.
"""

import logging
from datetime import date

from scenelingo_app.models import AppState

from ..logics.stats_logic import apply_day_rollover, default_stats, parse_stats_payload, serialize_stats
from ..schemas import DEFAULT_DAILY_GOAL, UserStats

logger = logging.getLogger(__name__)


class StatsStore:
    """Keyed persistence for UserStats. Last write wins."""

    def __init__(self, key: str = 'lingoScene_stats', default_goal: int = DEFAULT_DAILY_GOAL):
        self.key = key
        self.default_goal = default_goal

    def load(self, today: date) -> UserStats:
        """
        Read the stored record and roll it onto ``today``.

        A missing record yields defaults dated today. A payload that cannot be
        parsed is treated the same way.
        """
        raw = AppState.get_value(self.key)
        if raw is None:
            logger.info(f"No saved stats under '{self.key}', starting fresh.")
            return default_stats(today, self.default_goal)

        stats = parse_stats_payload(raw, self.default_goal)
        if stats is None:
            logger.warning(f"Saved stats under '{self.key}' are malformed, falling back to defaults.")
            return default_stats(today, self.default_goal)

        rolled = apply_day_rollover(stats, today)
        if rolled is not stats:
            logger.info(
                f"Day rollover: last login {stats.last_login_date}, "
                f"streak {stats.streak} -> {rolled.streak}, wordsToday reset."
            )
        return rolled

    def save(self, stats: UserStats) -> None:
        AppState.set_value(self.key, serialize_stats(stats))
        logger.debug(f"Saved stats under '{self.key}': {stats.to_dict()}")
