"""
Tests for Stats Logic - day rollover, check-in and completion bookkeeping.
"""

from datetime import date, timedelta

import pytest

from scenelingo_app.modules.stats.logics.stats_logic import (
    apply_day_rollover,
    build_achievements,
    check_in,
    check_in_with_rollover,
    compute_level,
    daily_goal_percent,
    days_between,
    default_stats,
    parse_stats_payload,
    record_completion,
    serialize_stats,
)
from scenelingo_app.modules.stats.schemas import CheckInOutcome, UserStats

TODAY = date(2024, 3, 1)
YESTERDAY = TODAY - timedelta(days=1)


class TestDayRollover:
    """Test what loading a record on a new day does."""

    @pytest.mark.parametrize('days_ago', [2, 3, 30, 400])
    def test_older_than_yesterday_resets_streak(self, days_ago):
        stats = UserStats(streak=9, last_login_date=TODAY - timedelta(days=days_ago), words_today=7)

        rolled = apply_day_rollover(stats, TODAY)

        assert rolled.streak == 0
        assert rolled.words_today == 0
        assert rolled.last_login_date == TODAY

    def test_yesterday_keeps_streak_and_resets_words_today(self):
        stats = UserStats(streak=4, last_login_date=YESTERDAY, points=120, learned_words=30, words_today=6)

        rolled = apply_day_rollover(stats, TODAY)

        assert rolled.streak == 4
        assert rolled.words_today == 0
        assert rolled.points == 120
        assert rolled.learned_words == 30
        assert rolled.last_login_date == TODAY

    def test_same_day_is_untouched(self):
        stats = UserStats(streak=2, last_login_date=TODAY, words_today=5)
        assert apply_day_rollover(stats, TODAY) is stats

    def test_missing_login_date_counts_as_broken_streak(self):
        rolled = apply_day_rollover(UserStats(streak=3, last_login_date=None), TODAY)
        assert rolled.streak == 0
        assert rolled.last_login_date == TODAY

    def test_future_login_date_keeps_streak(self):
        stats = UserStats(streak=3, last_login_date=TODAY + timedelta(days=2), words_today=2)

        rolled = apply_day_rollover(stats, TODAY)

        assert rolled.streak == 3
        assert rolled.words_today == 0
        assert rolled.last_login_date == TODAY

    def test_rollover_across_month_and_year_boundaries(self):
        assert apply_day_rollover(UserStats(streak=5, last_login_date=date(2023, 12, 31)), date(2024, 1, 1)).streak == 5
        assert apply_day_rollover(UserStats(streak=5, last_login_date=date(2024, 2, 28)), date(2024, 3, 1)).streak == 0

    def test_days_between(self):
        assert days_between(YESTERDAY, TODAY) == 1
        assert days_between(TODAY, YESTERDAY) == -1
        assert days_between(date(2024, 2, 28), date(2024, 3, 1)) == 2


class TestCheckIn:
    """Test the daily bonus button."""

    def test_new_day_awards_bonus(self):
        stats = UserStats(streak=2, last_login_date=YESTERDAY, points=40)

        updated, outcome = check_in(stats, TODAY)

        assert outcome is CheckInOutcome.AWARDED
        assert updated.streak == 3
        assert updated.points == 50
        assert updated.last_login_date == TODAY

    def test_second_call_same_day_awards_nothing(self):
        stats = UserStats(streak=2, last_login_date=YESTERDAY, points=40)

        once, first = check_in(stats, TODAY)
        twice, second = check_in(once, TODAY)

        assert first is CheckInOutcome.AWARDED
        assert second is CheckInOutcome.CELEBRATE_ONLY
        assert twice == once

    def test_already_dated_today_only_celebrates(self):
        stats = UserStats(streak=1, last_login_date=TODAY, points=10)

        updated, outcome = check_in(stats, TODAY)

        assert outcome is CheckInOutcome.CELEBRATE_ONLY
        assert outcome.celebrate
        assert updated == stats

    def test_learning_today_skips_check_in(self):
        stats = UserStats(streak=1, last_login_date=YESTERDAY, points=10, words_today=5)

        updated, outcome = check_in(stats, TODAY)

        assert outcome is CheckInOutcome.SKIPPED
        assert not outcome.celebrate
        assert updated == stats

    def test_custom_bonus(self):
        updated, _ = check_in(UserStats(last_login_date=YESTERDAY), TODAY, bonus_points=25)
        assert updated.points == 25


    def test_first_check_in_of_new_day_rolls_over_and_awards(self):
        stale = UserStats(streak=4, last_login_date=TODAY - timedelta(days=1), words_today=6, points=20)

        updated, outcome = check_in_with_rollover(stale, TODAY)

        assert outcome is CheckInOutcome.AWARDED
        assert updated.streak == 5
        assert updated.words_today == 0
        assert updated.points == 30
        assert updated.last_login_date == TODAY

    def test_check_in_after_a_gap_restarts_streak(self):
        stale = UserStats(streak=4, last_login_date=TODAY - timedelta(days=3), words_today=6)

        updated, outcome = check_in_with_rollover(stale, TODAY)

        assert outcome is CheckInOutcome.AWARDED
        assert updated.streak == 1

    def test_same_day_record_behaves_like_check_in(self):
        stats = UserStats(last_login_date=TODAY, words_today=2)

        assert check_in_with_rollover(stats, TODAY) == (stats, CheckInOutcome.SKIPPED)


class TestRecordCompletion:
    """Test session rewards."""

    def test_reward_from_zero(self):
        stats = UserStats(last_login_date=TODAY)

        updated = record_completion(stats, points_earned=50, words_learned=5)

        assert updated.points == 50
        assert updated.learned_words == 5
        assert updated.words_today == 5

    def test_first_completion_of_day_extends_streak(self):
        updated = record_completion(UserStats(streak=3, last_login_date=TODAY), 50, 5)
        assert updated.streak == 4

    def test_later_completion_same_day_keeps_streak(self):
        updated = record_completion(UserStats(streak=3, last_login_date=TODAY, words_today=5), 50, 5)
        assert updated.streak == 3
        assert updated.words_today == 10

    def test_check_in_then_completion_counts_the_day_twice(self):
        yesterday = UserStats(streak=2, last_login_date=TODAY - timedelta(days=1))

        checked, _ = check_in(yesterday, TODAY)
        updated = record_completion(checked, 50, 5)

        assert checked.streak == 3
        assert updated.streak == 4

    def test_does_not_mutate_input(self):
        stats = UserStats(last_login_date=TODAY)
        record_completion(stats, 50, 5)
        assert stats.points == 0


class TestPayloadParsing:
    """Test reading stored records."""

    def test_serialize_parse_round_trip(self):
        stats = UserStats(streak=3, last_login_date=TODAY, points=80, learned_words=12, words_today=2, goal_today=15)
        assert parse_stats_payload(serialize_stats(stats)) == stats

    def test_serialized_shape_uses_stored_keys(self):
        data = UserStats(last_login_date=TODAY).to_dict()
        assert set(data) == {'streak', 'lastLoginDate', 'points', 'learnedWords', 'wordsToday', 'goalToday'}
        assert data['lastLoginDate'] == '2024-03-01'
        assert UserStats().to_dict()['lastLoginDate'] == ''

    @pytest.mark.parametrize('raw', [None, '', 'not json', '[1, 2]', '"text"', '42'])
    def test_malformed_payload_is_rejected(self, raw):
        assert parse_stats_payload(raw) is None

    def test_missing_and_invalid_fields_use_defaults(self):
        stats = parse_stats_payload('{"streak": -2, "points": "lots", "learnedWords": true, "goalToday": 0, "lastLoginDate": "soon"}')

        assert stats == UserStats(streak=0, last_login_date=None, points=0, learned_words=0, words_today=0, goal_today=10)

    def test_accepts_full_iso_timestamp(self):
        stats = parse_stats_payload('{"lastLoginDate": "2024-03-01T08:00:00.000Z"}')
        assert stats.last_login_date == TODAY


class TestDerivedValues:

    def test_default_stats(self):
        stats = default_stats(TODAY)
        assert stats == UserStats(streak=0, last_login_date=TODAY, points=0, learned_words=0, words_today=0, goal_today=10)

    def test_level_is_points_over_hundred(self):
        assert compute_level(0) == 0
        assert compute_level(99) == 0
        assert compute_level(250) == 2

    def test_goal_percent_is_capped(self):
        assert daily_goal_percent(UserStats(words_today=5, goal_today=10)) == 50
        assert daily_goal_percent(UserStats(words_today=25, goal_today=10)) == 100

    def test_achievements(self):
        word_master, week_warrior = build_achievements(UserStats(streak=7, learned_words=40))

        assert word_master.name == 'Word Master'
        assert not word_master.unlocked
        assert word_master.current == 40
        assert week_warrior.unlocked
