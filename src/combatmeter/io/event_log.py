"""이벤트 로그 JSON Lines 기록/리플레이."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from combatmeter.clock import ManualClock
from combatmeter.models import (
    CombatEntered,
    CombatLeft,
    DamageDealt,
    MainPlayerJoined,
    MeterEvent,
    PlayerJoined,
    PlayerLeft,
)
from combatmeter.pipeline.dispatcher import EventDispatcher

_TYPE_NAMES: dict[type, str] = {
    MainPlayerJoined: "main_player",
    PlayerJoined: "player",
    PlayerLeft: "leave",
    DamageDealt: "damage",
    CombatEntered: "combat_enter",
    CombatLeft: "combat_leave",
}


@dataclass(frozen=True)
class TimedEvent:
    """캡처 시각(ms)이 붙은 이벤트."""

    at: float
    event: MeterEvent


def _to_record(timed: TimedEvent) -> dict:
    event = timed.event
    record: dict = {"at": timed.at, "type": _TYPE_NAMES[type(event)]}
    if isinstance(event, (MainPlayerJoined, PlayerJoined)):
        record["name"] = event.name
    record["player_id"] = event.player_id
    if isinstance(event, DamageDealt):
        record["damage"] = event.damage
    return record


def _name(record: dict) -> str:
    name = record["name"]
    if not isinstance(name, str):
        raise ValueError(f"플레이어 이름은 문자열이어야 합니다: {name!r}")
    return name


def _from_record(record: dict) -> TimedEvent:
    kind = record["type"]
    player_id = int(record["player_id"])
    event: MeterEvent
    if kind == "main_player":
        event = MainPlayerJoined(name=_name(record), player_id=player_id)
    elif kind == "player":
        event = PlayerJoined(name=_name(record), player_id=player_id)
    elif kind == "leave":
        event = PlayerLeft(player_id=player_id)
    elif kind == "damage":
        event = DamageDealt(player_id=player_id, damage=float(record["damage"]))
    elif kind == "combat_enter":
        event = CombatEntered(player_id=player_id)
    elif kind == "combat_leave":
        event = CombatLeft(player_id=player_id)
    else:
        raise ValueError(f"알 수 없는 이벤트 타입: {kind!r}")
    return TimedEvent(at=float(record["at"]), event=event)


def save_events(events: Iterable[TimedEvent], filepath: Path) -> None:
    """이벤트를 한 줄에 하나씩 JSON으로 저장한다."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        for timed in events:
            f.write(json.dumps(_to_record(timed), ensure_ascii=False))
            f.write("\n")


def load_events(filepath: Path) -> list[TimedEvent]:
    """JSON Lines 파일에서 이벤트를 읽는다. 빈 줄은 건너뛴다."""
    events: list[TimedEvent] = []
    with open(filepath, encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                events.append(_from_record(json.loads(line)))
            except (ValueError, KeyError, TypeError) as e:
                raise ValueError(f"{filepath}:{lineno}: 잘못된 이벤트 ({e})") from e
    return events


def replay(events: Iterable[TimedEvent], dispatcher: EventDispatcher, clock: ManualClock) -> int:
    """시각 순서대로 clock을 맞춘 뒤 이벤트를 적용한다. 적용된 수를 반환."""
    applied = 0
    for timed in events:
        clock.set(timed.at)
        if dispatcher.dispatch(timed.event):
            applied += 1
    return applied
