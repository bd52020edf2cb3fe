"""
Tests for workout models.

Tests distance, speed and calorie formulas and record validation.
"""

import dataclasses

import pytest
from datetime import timedelta

from tracker.models import (
    ActivityType,
    InfoMessage,
    Training,
    Running,
    Walking,
    Swimming,
    create_training,
    LEN_STEP,
    SWIMMING_LEN_STEP,
)


class TestActivityType:
    """Tests for ActivityType enum."""

    def test_from_string_aliases(self):
        """Test mapping activity aliases."""
        assert ActivityType.from_string("run") == ActivityType.RUNNING
        assert ActivityType.from_string("Running") == ActivityType.RUNNING
        assert ActivityType.from_string(" walk ") == ActivityType.WALKING
        assert ActivityType.from_string("Hike") == ActivityType.WALKING
        assert ActivityType.from_string("SWIM") == ActivityType.SWIMMING

    def test_from_string_unknown(self):
        """Test unknown types raise ValueError."""
        with pytest.raises(ValueError):
            ActivityType.from_string("yoga")
        with pytest.raises(ValueError):
            ActivityType.from_string("")

    def test_label(self):
        assert ActivityType.RUNNING.label == "Running"
        assert ActivityType.SWIMMING.label == "Swimming"


class TestTraining:
    """Tests for the base Training record."""

    def test_distance(self):
        """Test distance uses steps and step length."""
        training = Training(action=1000, duration=timedelta(hours=1), weight=70)
        assert training.len_step == LEN_STEP
        assert training.distance == pytest.approx(0.65)

    def test_mean_speed(self):
        training = Training(action=10000, duration=timedelta(minutes=30), weight=70)
        assert training.mean_speed == pytest.approx(13.0)

    def test_zero_duration(self):
        """Test zero duration yields zero speed instead of raising."""
        training = Training(action=1000, duration=timedelta(0), weight=70)
        assert training.mean_speed == 0.0

    def test_base_calories_zero(self):
        training = Training(action=1000, duration=timedelta(hours=1), weight=70)
        assert training.calories == 0.0
        assert training.training_type == "Training"

    def test_negative_values_rejected(self):
        """Test negative inputs raise ValueError."""
        with pytest.raises(ValueError):
            Training(action=-1, duration=timedelta(hours=1), weight=70)
        with pytest.raises(ValueError):
            Training(action=1, duration=timedelta(hours=1), weight=-70)
        with pytest.raises(ValueError):
            Training(action=1, duration=timedelta(minutes=-5), weight=70)

    def test_negative_len_step_rejected(self):
        with pytest.raises(ValueError):
            Training(action=1, duration=timedelta(hours=1), weight=70, len_step=-0.5)

    def test_non_finite_values_rejected(self):
        """Test nan and inf inputs raise ValueError."""
        with pytest.raises(ValueError):
            Training(action=1, duration=timedelta(hours=1), weight=float("nan"))
        with pytest.raises(ValueError):
            Training(action=1, duration=timedelta(hours=1), weight=float("inf"))
        with pytest.raises(ValueError):
            Walking(
                action=1, duration=timedelta(hours=1), weight=70, height=float("nan")
            )

    def test_frozen(self):
        """Test records cannot be modified after construction."""
        running = Running(action=1000, duration=timedelta(hours=1), weight=70)
        with pytest.raises(dataclasses.FrozenInstanceError):
            running.weight = 80


class TestRunning:
    """Tests for running calories."""

    def test_sample_workout(self):
        """Test 5000 steps in 30 minutes at 85 kg."""
        running = Running(action=5000, duration=timedelta(minutes=30), weight=85)

        assert running.distance == pytest.approx(3.25)
        assert running.mean_speed == pytest.approx(6.5)
        assert running.calories == pytest.approx(302.9145)

    def test_zero_duration_calories(self):
        running = Running(action=5000, duration=timedelta(0), weight=85)
        assert running.calories == 0.0


class TestWalking:
    """Tests for walking calories."""

    def test_sample_workout(self):
        """Test 20000 steps in 3h45m at 85 kg, height value 185."""
        walking = Walking(
            action=20000,
            duration=timedelta(hours=3, minutes=45),
            weight=85,
            height=185,
        )

        assert walking.distance == pytest.approx(13.0)
        assert walking.mean_speed == pytest.approx(3.4667, rel=1e-4)
        assert walking.calories == pytest.approx(672.1595, rel=1e-4)

    def test_zero_height(self):
        """Test missing height gives zero calories."""
        walking = Walking(action=20000, duration=timedelta(hours=1), weight=85)
        assert walking.calories == 0.0

    def test_negative_height_rejected(self):
        with pytest.raises(ValueError):
            Walking(action=1, duration=timedelta(hours=1), weight=85, height=-1)

    def test_height_in_metres(self):
        """Test height is used as given, in metres."""
        walking = Walking(
            action=20000,
            duration=timedelta(hours=3, minutes=45),
            weight=85,
            height=1.85,
        )
        assert walking.calories == pytest.approx(947.82, rel=1e-4)

    def test_zero_duration_calories(self):
        walking = Walking(action=20000, duration=timedelta(0), weight=85, height=1.8)
        assert walking.mean_speed == 0.0
        assert walking.calories == 0.0


class TestSwimming:
    """Tests for swimming speed and calories."""

    def test_sample_workout(self):
        """Test 2000 strokes, 5 laps of a 50 m pool in 90 minutes."""
        swimming = Swimming(
            action=2000,
            duration=timedelta(minutes=90),
            weight=85,
            length_pool=50,
            count_pool=5,
        )

        assert swimming.len_step == SWIMMING_LEN_STEP
        assert swimming.distance == pytest.approx(2.76)
        assert swimming.mean_speed == pytest.approx(0.25 / 1.5)
        assert swimming.calories == pytest.approx(323.0)

    def test_zero_duration(self):
        swimming = Swimming(
            action=2000, duration=timedelta(0), weight=85, length_pool=50, count_pool=5
        )
        assert swimming.mean_speed == 0.0
        assert swimming.calories == 0.0

    def test_negative_pool_rejected(self):
        with pytest.raises(ValueError):
            Swimming(
                action=1, duration=timedelta(hours=1), weight=85, length_pool=-25
            )
        with pytest.raises(ValueError):
            Swimming(
                action=1, duration=timedelta(hours=1), weight=85, count_pool=-2
            )


class TestInfoMessage:
    """Tests for InfoMessage rendering."""

    def test_training_info_uses_variant(self):
        """Test info carries the variant's own speed and calories."""
        swimming = Swimming(
            action=2000,
            duration=timedelta(minutes=90),
            weight=85,
            length_pool=50,
            count_pool=5,
        )
        info = swimming.training_info()

        assert info.training_type == "Swimming"
        assert info.speed == swimming.mean_speed
        assert info.calories == swimming.calories

    def test_str_format(self):
        info = InfoMessage(
            training_type="Running",
            duration=timedelta(minutes=30),
            distance=3.25,
            speed=6.5,
            calories=302.9145,
        )

        assert str(info) == (
            "Training type: Running\n"
            "Duration: 30 min\n"
            "Distance: 3.25 km\n"
            "Avg speed: 6.50 km/h\n"
            "Calories burned: 302.91\n"
        )

    def test_str_fractional_minutes(self):
        info = InfoMessage("Walking", timedelta(seconds=90), 0.1, 4.0, 1.0)
        assert "Duration: 1.5 min\n" in str(info)

    def test_str_repeating_fraction_of_minute(self):
        """Test minutes keep full precision in the duration line."""
        info = InfoMessage("Running", timedelta(minutes=10, seconds=20), 1.0, 6.0, 50.0)
        assert "Duration: 10.333333333333334 min\n" in str(info)

    def test_to_dict(self):
        info = InfoMessage("Running", timedelta(minutes=30), 3.25, 6.5, 302.9145)
        assert info.to_dict() == {
            "training_type": "Running",
            "duration_minutes": 30.0,
            "distance_km": 3.25,
            "speed_kmh": 6.5,
            "calories": 302.91,
        }


class TestCreateTraining:
    """Tests for the create_training factory."""

    def test_builds_each_variant(self):
        duration = timedelta(hours=1)

        assert isinstance(
            create_training(ActivityType.RUNNING, 1000, duration, 70), Running
        )
        walking = create_training(ActivityType.WALKING, 1000, duration, 70, height=170)
        assert isinstance(walking, Walking)
        assert walking.height == 170
        swimming = create_training(
            ActivityType.SWIMMING, 1000, duration, 70, length_pool=25, count_pool=40
        )
        assert isinstance(swimming, Swimming)
        assert swimming.count_pool == 40
