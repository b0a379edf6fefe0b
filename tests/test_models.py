"""모델 단위 테스트."""

import pytest

from combatmeter.models import (
    DamageDealt,
    DamageSignPolicy,
    MainPlayerJoined,
    MeterConfig,
    PlayerStatistics,
    SessionEndPolicy,
    compute_dps,
)


class TestComputeDps:
    def test_damage_per_second_from_ms(self):
        assert compute_dps(50.0, 1000.0) == pytest.approx(50.0)
        assert compute_dps(300.0, 1500.0) == pytest.approx(200.0)

    def test_zero_time_is_zero(self):
        assert compute_dps(1234.0, 0.0) == 0.0

    def test_zero_damage(self):
        assert compute_dps(0.0, 500.0) == 0.0


class TestPlayerStatistics:
    def test_from_totals(self):
        s = PlayerStatistics.from_totals("A", 50.0, 1000.0)
        assert s.player == "A"
        assert s.dps == pytest.approx(50.0)
        assert s.seconds_in_combat == pytest.approx(1.0)

    def test_frozen(self):
        s = PlayerStatistics.from_totals("A", 0.0, 0.0)
        with pytest.raises(AttributeError):
            s.damage = 10.0  # type: ignore[misc]

    def test_equality(self):
        assert PlayerStatistics("A", 1.0, 2.0, 500.0) == PlayerStatistics.from_totals("A", 1.0, 2.0)


class TestDamageSignPolicy:
    def test_negative_only(self):
        policy = DamageSignPolicy.NEGATIVE_ONLY
        assert policy.magnitude(-12.0) == 12.0
        assert policy.magnitude(12.0) is None
        assert policy.magnitude(0.0) is None

    def test_positive_only(self):
        policy = DamageSignPolicy.POSITIVE_ONLY
        assert policy.magnitude(12.0) == 12.0
        assert policy.magnitude(-12.0) is None
        assert policy.magnitude(0.0) is None

    def test_absolute(self):
        policy = DamageSignPolicy.ABSOLUTE
        assert policy.magnitude(-12.0) == 12.0
        assert policy.magnitude(12.0) == 12.0


class TestEvents:
    def test_events_are_frozen(self):
        evt = DamageDealt(player_id=1, damage=-5.0)
        with pytest.raises(AttributeError):
            evt.damage = 1.0  # type: ignore[misc]

    def test_equality(self):
        assert MainPlayerJoined("A", 0) == MainPlayerJoined(name="A", player_id=0)


class TestMeterConfig:
    def test_defaults(self):
        cfg = MeterConfig()
        assert cfg.damage_sign_policy is DamageSignPolicy.NEGATIVE_ONLY
        assert cfg.session_end_policy is SessionEndPolicy.DROP
        assert cfg.log_level == "INFO"
        assert cfg.dps_alert_threshold == 0.0
        assert cfg.dps_alert_cooldown == 10.0
