# File: scenelingo_app/modules/stats/services/stats_controller.py
"""
Stats Controller
================
In-memory owner of the current UserStats. Every mutation goes through here
and is followed by an explicit save.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from scenelingo_app.core.signals import checked_in, stats_updated

from ..logics import stats_logic
from ..schemas import CheckInOutcome, StatsView, UserStats
from .stats_store import StatsStore

logger = logging.getLogger(__name__)


@dataclass
class CheckInResult:
    outcome: CheckInOutcome
    stats: UserStats

    @property
    def celebrate(self) -> bool:
        return self.outcome.celebrate


class StatsController:
    """Single writer for the persisted stats record."""

    def __init__(
        self,
        store: StatsStore,
        clock: Callable[[], date] = stats_logic.utc_today,
        check_in_bonus: int = stats_logic.CHECK_IN_BONUS_POINTS
    ):
        self.store = store
        self.clock = clock
        self.check_in_bonus = check_in_bonus
        self._stats: Optional[UserStats] = None

    @property
    def stats(self) -> UserStats:
        """Current record, rolled onto today if the day changed since the last access."""
        if self._stats is None:
            self.load()
        elif self._stats.last_login_date != self.clock():
            self._roll_over()
        return self._stats

    def load(self) -> UserStats:
        """Initial load: read, roll over to today, persist the result."""
        self._stats = self.store.load(self.clock())
        self._persist('load')
        return self._stats

    def check_in(self) -> CheckInResult:
        # No rollover beforehand: the first check-in of a new day is the award.
        if self._stats is None:
            self.load()
        updated, outcome = stats_logic.check_in_with_rollover(self._stats, self.clock(), self.check_in_bonus)
        if outcome is CheckInOutcome.AWARDED:
            self._stats = updated
            self._persist('check_in')
            logger.info(f"Daily check-in awarded: streak={updated.streak}, points={updated.points}")
        else:
            logger.debug(f"Daily check-in not awarded ({outcome.value}).")

        checked_in.send(self, outcome=outcome, stats=self._stats)
        return CheckInResult(outcome=outcome, stats=self._stats)

    def record_completion(self, points_earned: int, words_learned: int) -> UserStats:
        self._stats = stats_logic.record_completion(self.stats, points_earned, words_learned)
        self._persist('completion')
        logger.info(
            f"Session reward recorded: +{points_earned} points, +{words_learned} words "
            f"(total points={self._stats.points})"
        )
        return self._stats

    def view(self) -> StatsView:
        stats = self.stats
        return StatsView(
            stats=stats,
            level=stats_logic.compute_level(stats.points),
            goal_percent=stats_logic.daily_goal_percent(stats),
            achievements=stats_logic.build_achievements(stats),
        )

    def _roll_over(self) -> None:
        previous = self._stats.last_login_date
        self._stats = stats_logic.apply_day_rollover(self._stats, self.clock())
        logger.info(f"Day changed since {previous}: wordsToday reset, streak={self._stats.streak}")
        self._persist('rollover')

    def _persist(self, reason: str) -> None:
        self.store.save(self._stats)
        stats_updated.send(self, stats=self._stats, reason=reason)
