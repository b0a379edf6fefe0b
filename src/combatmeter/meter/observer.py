"""MeterObserver 구현."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LoggingObserver:
    """Meter 상태 변화를 logging으로 남긴다."""

    def on_session_started(self, session_number: int) -> None:
        logger.info("새 세션 시작: #%d", session_number)

    def on_main_player_registered(self, name: str, player_id: int) -> None:
        logger.debug("메인 플레이어 등록: %s (id=%d)", name, player_id)

    def on_player_registered(self, name: str, player_id: int, replaced: bool) -> None:
        if replaced:
            logger.debug("플레이어 재등록, 누적값 리셋: %s (id=%d)", name, player_id)
        else:
            logger.debug("플레이어 등록: %s (id=%d)", name, player_id)

    def on_target_missing(self, operation: str, player_id: int | None) -> None:
        logger.debug("%s 무시: 대상 없음 (id=%s)", operation, player_id)


class NullObserver:
    """아무것도 하지 않는 Observer."""

    def on_session_started(self, session_number: int) -> None:
        pass

    def on_main_player_registered(self, name: str, player_id: int) -> None:
        pass

    def on_player_registered(self, name: str, player_id: int, replaced: bool) -> None:
        pass

    def on_target_missing(self, operation: str, player_id: int | None) -> None:
        pass
