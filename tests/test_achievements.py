"""Tests for player statistics and achievements."""

import pytest

from game.gridshooter.achievements import (
    MASTER_BLASTER,
    STEADY_AIM,
    SURVIVOR,
    Achievement,
    AchievementManager,
)


# --- Stats tracker ---

def test_fresh_tracker(tracker):
    assert tracker.shots_fired == 0
    assert tracker.shots_hit == 0
    assert tracker.accuracy == 0.0
    assert tracker.elapsed_seconds == 0


def test_accuracy(tracker):
    for _ in range(4):
        tracker.record_shot_fired()
    tracker.record_shot_hit()
    assert tracker.accuracy == 0.25


def test_elapsed_seconds_are_whole(tracker, clock):
    clock.now += 2.9
    assert tracker.elapsed_seconds == 2


# --- Achievement ---

def test_tiers():
    ach = Achievement("a", "b")
    assert ach.current_tier == "Novice"
    ach.set_progress(0.5)
    assert ach.current_tier == "Expert"
    ach.set_progress(0.998)
    assert ach.current_tier == "Expert"
    ach.set_progress(0.999)
    assert ach.current_tier == "Master"


@pytest.mark.parametrize("value", [-0.1, 1.01])
def test_set_progress_out_of_range(value):
    ach = Achievement("a", "b", 0.3)
    with pytest.raises(ValueError):
        ach.set_progress(value)
    assert ach.progress == 0.3


def test_initial_progress_is_validated():
    with pytest.raises(ValueError):
        Achievement("a", "b", 2.0)


def test_update_progress_caps_at_one():
    ach = Achievement("a", "b", 0.9)
    ach.update_progress(0.5)
    assert ach.progress == 1.0


def test_update_progress_rejects_negative():
    ach = Achievement("a", "b", 0.5)
    with pytest.raises(ValueError):
        ach.update_progress(-0.1)


# --- Manager ---

def test_default_achievements(tracker):
    manager = AchievementManager(tracker)
    assert [a.name for a in manager.achievements] == [SURVIVOR, STEADY_AIM, MASTER_BLASTER]


def test_manager_requires_tracker():
    with pytest.raises(ValueError):
        AchievementManager(None)


def test_duplicate_registration(tracker):
    manager = AchievementManager(tracker, achievements=[])
    manager.register(Achievement("x", "y"))
    with pytest.raises(ValueError):
        manager.register(Achievement("x", "z"))


def test_unknown_achievement(tracker):
    manager = AchievementManager(tracker, achievements=[])
    with pytest.raises(KeyError):
        manager.update_achievement("nope", 0.5)


def test_update_clamps(tracker):
    manager = AchievementManager(tracker)
    manager.update_achievement(SURVIVOR, 3.0)
    assert manager.achievements[0].progress == 1.0


def test_on_mastered_fires_once(tracker):
    mastered = []
    manager = AchievementManager(tracker, on_mastered=mastered.append)
    manager.update_achievement(MASTER_BLASTER, 0.4)
    manager.update_achievement(MASTER_BLASTER, 1.0)
    manager.update_achievement(MASTER_BLASTER, 1.0)
    assert [a.name for a in mastered] == [MASTER_BLASTER]


def test_refresh_from_stats(tracker, clock):
    manager = AchievementManager(tracker)
    clock.now += 30
    for _ in range(5):
        tracker.record_shot_fired()
        tracker.record_shot_hit()
    manager.refresh()
    progress = {a.name: a.progress for a in manager.achievements}
    assert progress[SURVIVOR] == pytest.approx(0.25)
    assert progress[MASTER_BLASTER] == pytest.approx(0.25)
    # Steady Aim waits for ten shots
    assert progress[STEADY_AIM] == 0.0

    for _ in range(5):
        tracker.record_shot_fired()
        tracker.record_shot_hit()
    manager.refresh()
    steady = [a for a in manager.achievements if a.name == STEADY_AIM][0]
    assert steady.progress == 1.0
    assert steady.current_tier == "Master"
