"""
Stats Logic - Pure functions for streak, rollover and reward bookkeeping.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.
"""
import json
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Any, List, Optional, Tuple

from ..schemas import DEFAULT_DAILY_GOAL, Achievement, CheckInOutcome, UserStats

CHECK_IN_BONUS_POINTS = 10
POINTS_PER_LEVEL = 100
WORD_MASTER_TARGET = 100
WEEK_WARRIOR_TARGET = 7


def utc_today() -> date:
    """Current calendar date in UTC, the day boundary used for rollover."""
    return datetime.now(timezone.utc).date()


def days_between(earlier: date, later: date) -> int:
    """Whole calendar days from ``earlier`` to ``later`` (negative if reversed)."""
    return (later - earlier).days


def default_stats(today: date, goal_today: int = DEFAULT_DAILY_GOAL) -> UserStats:
    """Fresh record for a first run."""
    return UserStats(last_login_date=today, goal_today=goal_today)


def apply_day_rollover(stats: UserStats, today: date) -> UserStats:
    """
    Move a loaded record onto ``today``.

    Same day: unchanged. Otherwise wordsToday goes back to 0 and the login
    date moves to today. The streak is reset when the last login is older
    than yesterday (or unknown) and left alone otherwise; continuing it is
    the job of check_in / record_completion.

    Examples:
        >>> s = UserStats(streak=3, last_login_date=date(2024, 1, 1), words_today=4)
        >>> apply_day_rollover(s, date(2024, 1, 2)).streak
        3
        >>> apply_day_rollover(s, date(2024, 1, 3)).streak
        0
    """
    if stats.last_login_date == today:
        return stats

    streak = stats.streak
    if stats.last_login_date is None or days_between(stats.last_login_date, today) > 1:
        streak = 0

    return replace(stats, streak=streak, words_today=0, last_login_date=today)


def check_in(
    stats: UserStats,
    today: date,
    bonus_points: int = CHECK_IN_BONUS_POINTS
) -> Tuple[UserStats, CheckInOutcome]:
    """
    Daily bonus button.

    Any learning today counts as already checked in, so the call is skipped
    outright. A record already dated today only earns the celebration.
    """
    if stats.words_today > 0:
        return stats, CheckInOutcome.SKIPPED

    if stats.last_login_date == today:
        return stats, CheckInOutcome.CELEBRATE_ONLY

    updated = replace(
        stats,
        streak=stats.streak + 1,
        last_login_date=today,
        points=stats.points + bonus_points,
    )
    return updated, CheckInOutcome.AWARDED


def check_in_with_rollover(
    stats: UserStats,
    today: date,
    bonus_points: int = CHECK_IN_BONUS_POINTS
) -> Tuple[UserStats, CheckInOutcome]:
    """
    Check-in against a record that may still be dated an earlier day.

    The rollover resets (wordsToday, broken streak) apply first, but the old
    login date is kept so the first check-in of a new day earns the bonus.
    """
    if stats.last_login_date == today:
        return check_in(stats, today, bonus_points)

    rolled = apply_day_rollover(stats, today)
    return check_in(replace(rolled, last_login_date=stats.last_login_date), today, bonus_points)


def record_completion(stats: UserStats, points_earned: int, words_learned: int) -> UserStats:
    """Add a finished session's reward. The first completion of a day extends the streak."""
    streak = stats.streak + 1 if stats.words_today == 0 else stats.streak
    return replace(
        stats,
        streak=streak,
        points=stats.points + points_earned,
        learned_words=stats.learned_words + words_learned,
        words_today=stats.words_today + words_learned,
    )


def serialize_stats(stats: UserStats) -> str:
    return json.dumps(stats.to_dict(), ensure_ascii=False)


def parse_stats_payload(raw: Optional[str], default_goal: int = DEFAULT_DAILY_GOAL) -> Optional[UserStats]:
    """
    Parse a stored record.

    Returns None when the payload is absent or is not a JSON object.
    Missing or invalid fields fall back to their defaults.
    """
    if not raw:
        return None

    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None

    if not isinstance(data, dict):
        return None

    return UserStats(
        streak=_counter(data.get('streak'), 0),
        last_login_date=_parse_date(data.get('lastLoginDate')),
        points=_counter(data.get('points'), 0),
        learned_words=_counter(data.get('learnedWords'), 0),
        words_today=_counter(data.get('wordsToday'), 0),
        goal_today=_counter(data.get('goalToday'), default_goal, minimum=1),
    )


def compute_level(points: int) -> int:
    return points // POINTS_PER_LEVEL


def daily_goal_percent(stats: UserStats) -> float:
    if stats.goal_today <= 0:
        return 100.0
    return min(100.0, stats.words_today / stats.goal_today * 100)


def build_achievements(stats: UserStats) -> List[Achievement]:
    return [
        Achievement(
            name='Word Master',
            description=f'Learn {WORD_MASTER_TARGET} words',
            target=WORD_MASTER_TARGET,
            current=stats.learned_words,
        ),
        Achievement(
            name='Week Warrior',
            description=f'{WEEK_WARRIOR_TARGET} Day Streak',
            target=WEEK_WARRIOR_TARGET,
            current=stats.streak,
        ),
    ]


def _counter(value: Any, default: int, minimum: int = 0) -> int:
    # bool is an int subclass; a stored true/false is not a count.
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        return default
    return value


def _parse_date(value: Any) -> Optional[date]:
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None
