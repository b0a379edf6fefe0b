"""전투 구간 단위 플레이어 누적기."""

from __future__ import annotations

from combatmeter.protocols import Clock


class Player:
    """한 세션 안에서 한 엔티티의 대미지와 전투 시간을 누적한다.

    - 전투 시간은 완료된 enter → leave 구간으로만 증가한다.
    - 이미 전투 중일 때의 enter, 전투 중이 아닐 때의 leave는 무시한다.
    """

    def __init__(self, player_id: int, clock: Clock) -> None:
        self.id = player_id
        self._clock = clock
        self._damage_dealt: float = 0.0
        self._time_elapsed: float = 0.0
        self._combat_started_at: float | None = None

    @property
    def in_combat(self) -> bool:
        return self._combat_started_at is not None

    def enter_combat(self) -> None:
        if self._combat_started_at is None:
            self._combat_started_at = self._clock.now()

    def leave_combat(self) -> None:
        if self._combat_started_at is None:
            return
        self._time_elapsed += max(self._clock.now() - self._combat_started_at, 0.0)
        self._combat_started_at = None

    def register_damage_dealt(self, amount: float) -> None:
        self._damage_dealt += abs(amount)

    def get_damage_dealt(self) -> float:
        return self._damage_dealt

    def get_time_elapsed(self) -> float:
        """완료된 전투 구간의 합(ms). 진행 중인 구간은 포함하지 않는다."""
        return self._time_elapsed

    def __repr__(self) -> str:
        return (
            f"Player(id={self.id}, damage={self._damage_dealt}, "
            f"time={self._time_elapsed}, in_combat={self.in_combat})"
        )
