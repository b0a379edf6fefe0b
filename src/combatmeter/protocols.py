"""Protocol 인터페이스 정의."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """밀리초 단위 시간 소스."""

    def now(self) -> float: ...


@runtime_checkable
class MeterObserver(Protocol):
    """Meter 상태 변화 관찰 인터페이스."""

    def on_session_started(self, session_number: int) -> None:
        """새 세션이 추가됨. session_number는 1부터 시작."""
        ...

    def on_main_player_registered(self, name: str, player_id: int) -> None: ...

    def on_player_registered(self, name: str, player_id: int, replaced: bool) -> None:
        """플레이어 등록. 같은 이름이 이미 있었으면 replaced=True."""
        ...

    def on_target_missing(self, operation: str, player_id: int | None) -> None:
        """대상(메인 플레이어, 세션, 플레이어)이 없어 이벤트가 무시됨."""
        ...
