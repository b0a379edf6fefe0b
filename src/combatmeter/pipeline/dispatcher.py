"""캡처 이벤트 → Meter 연산 라우팅."""

from __future__ import annotations

from collections.abc import Iterable

from combatmeter.meter.meter import Meter
from combatmeter.models import (
    CombatEntered,
    CombatLeft,
    DamageDealt,
    MainPlayerJoined,
    MeterEvent,
    PlayerJoined,
    PlayerLeft,
)


class EventDispatcher:
    """MeterEvent를 해당하는 Meter 등록 연산으로 전달한다."""

    def __init__(self, meter: Meter) -> None:
        self._meter = meter

    @property
    def meter(self) -> Meter:
        return self._meter

    def dispatch(self, event: MeterEvent) -> bool:
        """이벤트를 적용한다. 대상이 없어 무시되면 False."""
        meter = self._meter
        if isinstance(event, MainPlayerJoined):
            meter.register_main_player(event.name, event.player_id)
            return True
        if isinstance(event, PlayerJoined):
            meter.register_player(event.name, event.player_id)
            return True
        if isinstance(event, PlayerLeft):
            return meter.register_leave(event.player_id)
        if isinstance(event, DamageDealt):
            return meter.register_damage_dealt(event.player_id, event.damage)
        if isinstance(event, CombatEntered):
            return meter.register_combat_enter(event.player_id)
        if isinstance(event, CombatLeft):
            return meter.register_combat_leave(event.player_id)
        raise TypeError(f"지원하지 않는 이벤트 타입: {type(event).__name__}")

    def dispatch_all(self, events: Iterable[MeterEvent]) -> int:
        """이벤트를 순서대로 적용하고 적용된 수를 반환한다."""
        return sum(1 for event in events if self.dispatch(event))
