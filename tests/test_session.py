"""Session 단위 테스트."""

from __future__ import annotations

import pytest

from combatmeter.clock import ManualClock
from combatmeter.meter.session import Session
from combatmeter.models import PlayerStatistics


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture()
def session(clock: ManualClock) -> Session:
    s = Session(clock)
    s.add_player("A", 0)
    s.add_player("B", 1)
    return s


class TestAddPlayer:
    def test_new_player_not_replaced(self, clock: ManualClock) -> None:
        s = Session(clock)
        assert s.add_player("A", 0) is False
        assert len(s) == 1
        assert "A" in s

    def test_readd_resets_accumulators(self, session: Session, clock: ManualClock) -> None:
        """같은 이름 재등록 시 누적값이 0으로 리셋된다."""
        player = session.get_player_by_id(0)
        assert player is not None
        player.register_damage_dealt(100.0)
        player.enter_combat()
        clock.advance(1000.0)
        player.leave_combat()

        assert session.add_player("A", 0) is True

        fresh = session.get_player_by_id(0)
        assert fresh is not None
        assert fresh is not player
        assert fresh.get_damage_dealt() == 0.0
        assert fresh.get_time_elapsed() == 0.0
        assert len(session) == 2

    def test_readd_keeps_first_registration_order(self, session: Session) -> None:
        session.add_player("A", 5)
        assert session.names == ["A", "B"]


class TestGetPlayerById:
    def test_found(self, session: Session) -> None:
        player = session.get_player_by_id(1)
        assert player is not None
        assert player.id == 1

    def test_missing_returns_none(self, session: Session) -> None:
        assert session.get_player_by_id(99) is None

    def test_returns_live_player(self, session: Session) -> None:
        """반환된 Player 변경이 세션 통계에 반영된다."""
        session.get_player_by_id(1).register_damage_dealt(12.0)  # type: ignore[union-attr]
        stats = {s.player: s for s in session.stats()}
        assert stats["B"].damage == pytest.approx(12.0)


class TestStats:
    def test_one_entry_per_player(self, session: Session) -> None:
        stats = session.stats()
        assert [s.player for s in stats] == ["A", "B"]
        assert all(isinstance(s, PlayerStatistics) for s in stats)

    def test_dps_computed_at_snapshot(self, session: Session, clock: ManualClock) -> None:
        player = session.get_player_by_id(0)
        assert player is not None
        player.register_damage_dealt(300.0)
        player.enter_combat()
        clock.advance(2000.0)
        player.leave_combat()

        first = session.stats()[0]
        assert first.dps == pytest.approx(150.0)

        player.register_damage_dealt(300.0)
        second = session.stats()[0]
        assert second.dps == pytest.approx(300.0)
        assert first.dps == pytest.approx(150.0)  # 이전 스냅샷은 불변

    def test_zero_time_dps_is_zero(self, session: Session) -> None:
        session.get_player_by_id(0).register_damage_dealt(50.0)  # type: ignore[union-attr]
        assert session.stats()[0].dps == 0.0

    def test_empty_session(self, clock: ManualClock) -> None:
        assert Session(clock).stats() == []


class TestCloseOpenIntervals:
    def test_closes_only_players_in_combat(self, session: Session, clock: ManualClock) -> None:
        session.get_player_by_id(0).enter_combat()  # type: ignore[union-attr]
        clock.advance(750.0)

        assert session.close_open_intervals() == 1

        stats = {s.player: s for s in session.stats()}
        assert stats["A"].time_in_combat == pytest.approx(750.0)
        assert stats["B"].time_in_combat == 0.0
        assert session.get_player_by_id(0).in_combat is False  # type: ignore[union-attr]
