"""세션 히스토리와 인카운터 경계 판정."""

from __future__ import annotations

from combatmeter.clock import MonotonicClock
from combatmeter.meter.observer import LoggingObserver
from combatmeter.meter.player import Player
from combatmeter.meter.session import Session
from combatmeter.models import (
    DamageSignPolicy,
    MeterConfig,
    PlayerStatistics,
    SessionEndPolicy,
)
from combatmeter.protocols import Clock, MeterObserver


class Meter:
    """이벤트를 현재 세션으로 라우팅하고 세션 경계를 판정한다.

    - 세션 히스토리는 오래된 순서의 append-only 리스트, 마지막이 현재 세션
    - 메인 플레이어의 퇴장이 현재 인카운터를 끝내는 유일한 트리거
    - 대상이 없는 이벤트는 예외 대신 False/None을 반환
    """

    def __init__(
        self,
        clock: Clock | None = None,
        observer: MeterObserver | None = None,
        damage_sign_policy: DamageSignPolicy = DamageSignPolicy.NEGATIVE_ONLY,
        session_end_policy: SessionEndPolicy = SessionEndPolicy.DROP,
    ) -> None:
        self._clock = clock or MonotonicClock()
        self._observer = observer or LoggingObserver()
        self._damage_sign_policy = damage_sign_policy
        self._session_end_policy = session_end_policy
        self._sessions: list[Session] = []
        self._main_player_id: int | None = None

    @classmethod
    def from_config(
        cls,
        config: MeterConfig,
        clock: Clock | None = None,
        observer: MeterObserver | None = None,
    ) -> Meter:
        return cls(
            clock=clock,
            observer=observer,
            damage_sign_policy=config.damage_sign_policy,
            session_end_policy=config.session_end_policy,
        )

    # ── 조회 ──────────────────────────────────────────────

    @property
    def main_player_id(self) -> int | None:
        return self._main_player_id

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    @property
    def current_session(self) -> Session | None:
        return self._sessions[-1] if self._sessions else None

    def get_instance_session(self) -> list[PlayerStatistics] | None:
        """현재 세션의 통계 스냅샷. 세션이 없으면 None."""
        session = self.current_session
        if session is None:
            return None
        return session.stats()

    def get_session_history(self) -> list[list[PlayerStatistics]]:
        """모든 세션의 통계를 오래된 순서로 반환한다."""
        return [session.stats() for session in self._sessions]

    # ── 이벤트 등록 ───────────────────────────────────────

    def register_main_player(self, name: str, player_id: int) -> None:
        self._main_player_id = player_id
        self._observer.on_main_player_registered(name, player_id)
        self._add_to_current(name, player_id)

    def register_leave(self, player_id: int) -> bool:
        if self._main_player_id is None:
            self._observer.on_target_missing("register_leave", player_id)
            return False
        if player_id == self._main_player_id:
            self._end_current_session()
            self._start_session()
        return True

    def register_player(self, name: str, player_id: int) -> None:
        self._add_to_current(name, player_id)

    def register_damage_dealt(self, player_id: int, damage: float) -> bool:
        player = self._find_player("register_damage_dealt", player_id)
        if player is None:
            return False
        amount = self._damage_sign_policy.magnitude(damage)
        if amount is not None:
            player.register_damage_dealt(amount)
        return True

    def register_combat_enter(self, player_id: int) -> bool:
        player = self._find_player("register_combat_enter", player_id)
        if player is None:
            return False
        player.enter_combat()
        return True

    def register_combat_leave(self, player_id: int) -> bool:
        player = self._find_player("register_combat_leave", player_id)
        if player is None:
            return False
        player.leave_combat()
        return True

    # ── 내부 ──────────────────────────────────────────────

    def _start_session(self) -> Session:
        session = Session(self._clock)
        self._sessions.append(session)
        self._observer.on_session_started(len(self._sessions))
        return session

    def _end_current_session(self) -> None:
        session = self.current_session
        if session is not None and self._session_end_policy is SessionEndPolicy.FLUSH:
            session.close_open_intervals()

    def _add_to_current(self, name: str, player_id: int) -> None:
        session = self.current_session or self._start_session()
        replaced = session.add_player(name, player_id)
        self._observer.on_player_registered(name, player_id, replaced)

    def _find_player(self, operation: str, player_id: int) -> Player | None:
        session = self.current_session
        player = session.get_player_by_id(player_id) if session is not None else None
        if player is None:
            self._observer.on_target_missing(operation, player_id)
        return player
