"""Tests for the tuxkart race state."""

import pytest

from tuxkart.scoring.race_state import RaceConfig, RacePhase, RaceState


def _won_race(lap_target: int = 6) -> RaceState:
    race = RaceState(RaceConfig(lap_target=lap_target))
    race.lap_count = lap_target
    return race


class TestRaceProgress:
    """Test laps and the win transition."""
    
    def test_initial_state(self):
        """Test a new race is racing with no laps."""
        race = RaceState()
        
        assert race.phase == RacePhase.RACING
        assert race.lap_count == 0
        assert not race.won
        assert not race.banner_visible
        
    def test_ticks_before_target_do_nothing(self):
        """Test ticking below the lap target leaves the race running."""
        race = RaceState(RaceConfig(lap_target=6))
        race.lap_count = 5
        for _ in range(100):
            race.tick()
        
        assert not race.won
        assert race.blink_counter == 0
        assert race.frames == 100
        
    def test_complete_lap(self):
        """Test lap completion increments the count."""
        race = RaceState(RaceConfig(lap_target=2))
        assert race.complete_lap() == 1
        race.tick()
        assert not race.won
        
        race.complete_lap()
        assert race.tick()
        assert race.phase == RacePhase.WON
        
    def test_tick_reports_win_once(self):
        """Test tick returns True only on the winning frame."""
        race = _won_race()
        results = [race.tick() for _ in range(10)]
        assert results == [True] + [False] * 9
        
    def test_lap_count_cannot_decrease(self):
        """Test lap count is monotonic."""
        race = RaceState()
        race.lap_count = 3
        with pytest.raises(ValueError):
            race.lap_count = 2
            
    def test_won_never_reverts(self):
        """Test the race stays won."""
        race = _won_race()
        race.tick()
        for _ in range(500):
            race.tick()
            assert race.won
            
    @pytest.mark.parametrize("kwargs", [
        {"lap_target": 0},
        {"blink_period": 0},
        {"blink_drop": -1},
        {"blink_high": 2, "blink_floor": 5},
    ])
    def test_invalid_config(self, kwargs):
        """Test invalid rules are rejected."""
        with pytest.raises(ValueError):
            RaceState(RaceConfig(**kwargs))


class TestBlinkCounter:
    """Test win banner timing."""
    
    def test_counter_rises_to_21(self):
        """Test 21 ticks after reaching the target count up to 21."""
        race = _won_race()
        for _ in range(21):
            race.tick()
        
        assert race.won
        assert race.blink_counter == 21
        
    def test_sawtooth_drop(self):
        """Test the counter drops by 40 after exceeding 20."""
        race = _won_race()
        for _ in range(22):
            race.tick()
        assert race.blink_counter == -19
        
    def test_sawtooth_period(self):
        """Test the counter repeats every 41 ticks and stays bounded."""
        race = _won_race()
        for _ in range(22):
            race.tick()
        start = race.blink_counter
        
        for _ in range(41):
            race.tick()
            assert -19 <= race.blink_counter <= 21
        assert race.blink_counter == start
        
    def test_two_toggles_in_thirty_ticks(self):
        """Test the 15-tick cadence hides then shows the banner."""
        race = _won_race()
        visibility = []
        for _ in range(30):
            race.tick()
            visibility.append(race.banner_visible)
        
        toggles = sum(1 for a, b in zip(visibility, visibility[1:]) if a != b)
        assert toggles == 2
        assert visibility[:14] == [True] * 14
        assert visibility[14:26] == [False] * 12
        assert visibility[26:] == [True] * 4
        
    def test_negative_counter_truncates(self):
        """Test -15 hides the banner and -14 shows it."""
        race = _won_race()
        for _ in range(26):
            race.tick()
        assert race.blink_counter == -15
        assert not race.banner_visible
        
        race.tick()
        assert race.blink_counter == -14
        assert race.banner_visible
        
    def test_state_dict(self):
        """Test state dictionary."""
        race = _won_race()
        race.tick()
        state = race.get_state()
        
        assert state["phase"] == "won"
        assert state["lap_count"] == 6
        assert state["blink_counter"] == 1
        assert state["banner_visible"]
