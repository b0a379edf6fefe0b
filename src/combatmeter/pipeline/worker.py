"""여러 생산자 스레드의 이벤트를 단일 Meter로 직렬화하는 워커."""

from __future__ import annotations

import logging
import queue
import threading

logger = logging.getLogger(__name__)

from combatmeter.models import MeterEvent, PlayerStatistics
from combatmeter.pipeline.dispatcher import EventDispatcher


class MeterWorker(threading.Thread):
    """이벤트 큐를 소비하여 Meter에 적용하는 워커 스레드.

    Meter 자체는 동기화를 하지 않으므로 적용과 스냅샷 조회를 같은 lock으로 감싼다.
    stop() 이후에도 큐에 남은 이벤트는 모두 처리하고 종료한다.
    """

    def __init__(self, dispatcher: EventDispatcher, max_queue_size: int = 0) -> None:
        super().__init__(name="meter-worker", daemon=True)
        self._dispatcher = dispatcher
        self._queue: queue.Queue[MeterEvent] = queue.Queue(maxsize=max_queue_size)
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self.applied_count = 0
        self.ignored_count = 0

    def enqueue(self, event: MeterEvent, timeout: float | None = None) -> None:
        """이벤트를 큐에 추가한다. 큐가 가득 차면 timeout까지 대기한다."""
        self._queue.put(event, timeout=timeout)

    def run(self) -> None:
        while not self._stop_event.is_set():
            try:
                event = self._queue.get(timeout=0.1)
            except queue.Empty:
                continue
            self._apply(event)

        # 남은 이벤트 처리
        while True:
            try:
                event = self._queue.get_nowait()
            except queue.Empty:
                break
            self._apply(event)

    def stop(self, timeout: float | None = 2.0) -> None:
        self._stop_event.set()
        if self.is_alive():
            self.join(timeout)

    def snapshot(self) -> list[PlayerStatistics] | None:
        """현재 세션 스냅샷을 lock 안에서 조회한다."""
        with self._lock:
            return self._dispatcher.meter.get_instance_session()

    def _apply(self, event: MeterEvent) -> None:
        try:
            with self._lock:
                applied = self._dispatcher.dispatch(event)
        except Exception:
            logger.warning("이벤트 처리 실패: %r", event, exc_info=True)
            self.ignored_count += 1
            return
        if applied:
            self.applied_count += 1
        else:
            self.ignored_count += 1
