"""Tests for the tuxkart car module."""

import pytest
import numpy as np

from tuxkart.car.car import Car, CarConfig, CarPose
from tuxkart.car.footprint import Footprint
from tuxkart.car.presets import PLAYER_ONE, PLAYER_TWO, Vehicle, get_preset
from tuxkart.track.mask import GridMask


class TestCarConfig:
    """Test car configuration validation."""
    
    def test_defaults_are_valid(self):
        """Test default constants pass validation."""
        config = CarConfig()
        config.validate()
        assert config.max_reverse_velocity == pytest.approx(1.5)
        
    @pytest.mark.parametrize("field,value", [
        ("max_velocity", 0.0),
        ("max_velocity", -1.0),
        ("rotation_velocity", -4.0),
        ("acceleration", 0.0),
        ("coast_factor", 1.0),
        ("bounce_factor", 0.0),
        ("width", 0.0),
        ("max_velocity", float("nan")),
        ("max_velocity", float("inf")),
        ("rotation_velocity", float("nan")),
        ("acceleration", float("nan")),
        ("acceleration", float("inf")),
        ("stop_epsilon", float("nan")),
        ("width", float("inf")),
        ("length", float("nan")),
    ])
    def test_invalid_constants_rejected(self, field, value):
        """Test malformed constants fail at construction."""
        config = CarConfig(**{field: value})
        with pytest.raises(ValueError):
            Car(config)
            
    def test_zero_turn_rate_allowed(self):
        """Test a car that cannot turn is still valid."""
        car = Car(CarConfig(rotation_velocity=0.0))
        car.rotate(True, False)
        assert car.heading == 0.0


class TestCarMotion:
    """Test acceleration, coasting and bounce."""
    
    def test_single_forward_step(self):
        """Test one accelerate tick from rest moves the car up the screen."""
        car = Car(CarConfig(max_velocity=3.0, acceleration=0.1), start=(0.0, 0.0))
        car.move_forward()
        
        assert car.velocity == pytest.approx(0.1)
        assert car.position[0] == pytest.approx(0.0, abs=1e-12)
        assert car.position[1] == pytest.approx(-0.1)
        
    def test_forward_velocity_capped(self):
        """Test repeated acceleration never exceeds the forward cap."""
        car = Car()
        for _ in range(100):
            car.move_forward()
            assert car.velocity <= car.config.max_velocity
        assert car.velocity == pytest.approx(car.config.max_velocity)
        
    def test_reverse_velocity_capped(self):
        """Test repeated braking never drops below half the forward cap."""
        car = Car()
        for _ in range(100):
            car.move_backward()
            assert car.velocity >= -car.config.max_velocity / 2
        assert car.velocity == pytest.approx(-1.5)
        
    def test_braking_from_forward_speed(self):
        """Test braking reduces forward velocity before reversing."""
        car = Car()
        for _ in range(5):
            car.move_forward()
        car.move_backward()
        assert car.velocity == pytest.approx(0.4)
        
    def test_heading_left_moves_left(self):
        """Test a car turned 90 degrees left drives towards -x."""
        car = Car(start=(100.0, 100.0), start_heading=90.0)
        car.move_forward()
        
        assert car.position[0] == pytest.approx(99.9)
        assert car.position[1] == pytest.approx(100.0)
        
    def test_coast_strictly_decays(self):
        """Test coasting shrinks speed every tick, forwards and backwards."""
        for start_velocity in (2.0, -1.2):
            car = Car()
            car.state.velocity = start_velocity
            previous = abs(car.velocity)
            for _ in range(50):
                car.coast()
                assert 0 < abs(car.velocity) < previous
                assert np.sign(car.velocity) == np.sign(start_velocity)
                previous = abs(car.velocity)
                
    def test_coast_is_multiplicative(self):
        """Test coasting applies the 0.9 damping factor."""
        car = Car()
        car.state.velocity = 2.0
        car.coast()
        assert car.velocity == pytest.approx(1.8)
        car.coast()
        assert car.velocity == pytest.approx(1.62)
        
    def test_coast_snaps_to_rest(self):
        """Test tiny residual speeds become exactly zero."""
        car = Car()
        car.state.velocity = 2.0
        for _ in range(200):
            car.coast()
        assert car.velocity == 0.0
        
    def test_bounce_reverses_at_half_speed(self):
        """Test bounce turns v into -0.5v and moves the other way."""
        car = Car(start=(0.0, 0.0))
        car.state.velocity = 2.0
        car.bounce()
        
        assert car.velocity == pytest.approx(-1.0)
        assert car.position[1] == pytest.approx(1.0)
        
    def test_bounce_from_reverse(self):
        """Test bounce while reversing pushes the car forwards."""
        car = Car()
        car.state.velocity = -1.5
        car.bounce()
        assert car.velocity == pytest.approx(0.75)
        
    def test_bounce_stays_within_caps(self):
        """Test bounce from full speed respects the reverse cap."""
        car = Car(CarConfig(bounce_factor=1.0))
        car.state.velocity = car.config.max_velocity
        car.bounce()
        assert car.velocity == pytest.approx(-car.config.max_reverse_velocity)


class TestCarRotation:
    """Test turning."""
    
    def test_left_and_right(self):
        """Test left adds and right subtracts the turn rate."""
        car = Car()
        car.rotate(True, False)
        assert car.heading == pytest.approx(4.0)
        car.rotate(False, True)
        car.rotate(False, True)
        assert car.heading == pytest.approx(-4.0)
        
    def test_left_wins_tie(self):
        """Test both keys held turns left."""
        car = Car()
        car.rotate(True, True)
        assert car.heading == pytest.approx(4.0)
        
    def test_no_wraparound(self):
        """Test heading grows past a full turn."""
        car = Car()
        for _ in range(100):
            car.rotate(True, False)
        assert car.heading == pytest.approx(400.0)


class TestCarReset:
    """Test returning to spawn."""
    
    def test_reset_restores_spawn(self):
        """Test reset undoes any sequence of moves."""
        car = Car(start=(920.0, 1350.0), start_heading=10.0)
        for _ in range(20):
            car.rotate(True, False)
            car.move_forward()
        car.bounce()
        car.reset()
        
        assert car.position == (920.0, 1350.0)
        assert car.heading == 10.0
        assert car.velocity == 0.0
        
    def test_reset_idempotent(self):
        """Test resetting twice equals resetting once."""
        car = Car(start=(5.0, 6.0))
        car.move_forward()
        car.reset()
        once = (car.position, car.heading, car.velocity)
        car.reset()
        assert (car.position, car.heading, car.velocity) == once


class TestCarCollision:
    """Test collision queries."""
    
    def test_clear_track(self):
        """Test no contact away from obstacles."""
        car = Car(start=(50.0, 50.0))
        mask = GridMask.from_rects((100, 100), [(40, 0, 20, 5)])
        assert car.collide(mask) is None
        
    def test_first_contact_point(self):
        """Test the first blocked cell under the car is reported."""
        car = Car(start=(50.0, 50.0))
        mask = GridMask.from_rects((100, 100), [(0, 60, 100, 10)])
        assert car.collide(mask) == (38, 60)
        
    def test_collide_has_no_side_effects(self):
        """Test querying leaves the car untouched."""
        car = Car(start=(50.0, 50.0))
        car.state.velocity = 1.0
        mask = GridMask(np.ones((100, 100), dtype=bool))
        
        assert car.collide(mask) is not None
        assert car.position == (50.0, 50.0)
        assert car.velocity == 1.0


class TestCarOutputs:
    """Test pose, footprint and telemetry."""
    
    def test_pose(self):
        """Test pose mirrors state and negates heading for rendering."""
        car = Car(start=(1.0, 2.0), start_heading=30.0)
        pose = car.pose()
        
        assert pose == CarPose(1.0, 2.0, 30.0)
        assert pose.render_angle == -30.0
        
    def test_footprint_follows_car(self):
        """Test footprint uses current pose and configured size."""
        car = Car(CarConfig(width=10.0, length=20.0), start=(3.0, 4.0))
        footprint = car.footprint()
        
        assert footprint == Footprint(3.0, 4.0, 0.0, 10.0, 20.0)
        
    def test_telemetry(self):
        """Test telemetry output."""
        car = Car(car_id=3)
        telemetry = car.get_telemetry()
        
        assert telemetry["car_id"] == 3
        assert "velocity" in telemetry
        assert "heading_deg" in telemetry


class TestPresets:
    """Test vehicle presets."""
    
    def test_player_presets(self):
        """Test both player slots are registered."""
        assert get_preset("player1") is PLAYER_ONE
        assert get_preset("player2") is PLAYER_TWO
        assert PLAYER_ONE.spawn == (920.0, 1350.0)
        assert PLAYER_TWO.controls == "arrows"
        
    def test_unknown_preset(self):
        """Test unknown names raise."""
        with pytest.raises(ValueError):
            get_preset("player3")
        
    def test_vehicle_collide_takes_obstacle_mask(self):
        """Test the vehicle interface types collide like Car does."""
        assert Vehicle.collide.__annotations__["mask"] == "ObstacleMask"
        assert Car.collide.__annotations__["mask"] == "ObstacleMask"
