"""플레이어별 DPS 임계값 알림."""

from __future__ import annotations

from dataclasses import dataclass

from combatmeter.clock import MonotonicClock
from combatmeter.models import PlayerStatistics
from combatmeter.protocols import Clock


@dataclass(frozen=True)
class AlertEvent:
    """DPS 알림 이벤트."""

    alert_type: str  # "above" | "below"
    player: str
    threshold: float
    current_dps: float
    timestamp: float  # ms


class AlertManager:
    """플레이어 DPS가 임계값을 초과/미달할 때 알림을 생성한다."""

    def __init__(self, threshold: float, cooldown: float = 10.0, clock: Clock | None = None) -> None:
        self._threshold = threshold
        self._cooldown_ms = cooldown * 1000.0
        self._clock = clock or MonotonicClock()
        self._was_above: dict[str, bool] = {}
        self._last_alert_time: dict[tuple[str, str], float] = {}

    def check(self, stats: PlayerStatistics) -> AlertEvent | None:
        """한 플레이어의 스냅샷을 확인하여 알림 이벤트를 반환한다."""
        if self._threshold <= 0:
            return None

        is_above = stats.dps >= self._threshold
        was_above = self._was_above.get(stats.player, False)
        if is_above == was_above:
            return None

        self._was_above[stats.player] = is_above
        alert_type = "above" if is_above else "below"
        now = self._clock.now()
        if not self._is_cooled_down(stats.player, alert_type, now):
            return None

        self._last_alert_time[(stats.player, alert_type)] = now
        return AlertEvent(
            alert_type=alert_type,
            player=stats.player,
            threshold=self._threshold,
            current_dps=stats.dps,
            timestamp=now,
        )

    def check_all(self, stats: list[PlayerStatistics]) -> list[AlertEvent]:
        alerts: list[AlertEvent] = []
        for s in stats:
            alert = self.check(s)
            if alert is not None:
                alerts.append(alert)
        return alerts

    def reset(self) -> None:
        """세션이 바뀌었을 때 플레이어 상태를 초기화한다."""
        self._was_above.clear()
        self._last_alert_time.clear()

    def _is_cooled_down(self, player: str, alert_type: str, now: float) -> bool:
        last = self._last_alert_time.get((player, alert_type))
        if last is None:
            return True
        return (now - last) >= self._cooldown_ms
