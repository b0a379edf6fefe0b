"""밀리초 단위 Clock 구현."""

from __future__ import annotations

import time


class MonotonicClock:
    """time.monotonic() 기반 실시간 Clock."""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """직접 값을 지정하는 Clock. 테스트와 리플레이에서 사용한다."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> None:
        if ms < 0:
            raise ValueError(f"시간은 뒤로 갈 수 없습니다: {ms}")
        self._now += ms

    def set(self, ms: float) -> None:
        """절대 시각으로 설정한다. 현재보다 이전 값은 거부한다."""
        if ms < self._now:
            raise ValueError(f"시간은 뒤로 갈 수 없습니다: {ms} < {self._now}")
        self._now = ms
