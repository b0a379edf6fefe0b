"""전투 세션(인카운터)."""

from __future__ import annotations

from combatmeter.meter.player import Player
from combatmeter.models import PlayerStatistics
from combatmeter.protocols import Clock


class Session:
    """한 인카운터에서 관측된 플레이어를 이름으로 보관한다.

    같은 이름으로 다시 등록하면 기존 Player를 버리고 새로 만든다 (누적값 리셋).
    stats()는 이름이 처음 등록된 순서를 따른다.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._players: dict[str, Player] = {}

    def add_player(self, name: str, player_id: int) -> bool:
        """플레이어를 추가한다. 기존 플레이어를 교체했으면 True."""
        replaced = name in self._players
        self._players[name] = Player(player_id, self._clock)
        return replaced

    def get_player_by_id(self, player_id: int) -> Player | None:
        for player in self._players.values():
            if player.id == player_id:
                return player
        return None

    def stats(self) -> list[PlayerStatistics]:
        return [
            PlayerStatistics.from_totals(
                player=name,
                damage=player.get_damage_dealt(),
                time_in_combat=player.get_time_elapsed(),
            )
            for name, player in self._players.items()
        ]

    def close_open_intervals(self) -> int:
        """전투 중인 플레이어의 구간을 현재 시각으로 닫고 닫은 수를 반환한다."""
        closed = 0
        for player in self._players.values():
            if player.in_combat:
                player.leave_combat()
                closed += 1
        return closed

    @property
    def names(self) -> list[str]:
        return list(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name: object) -> bool:
        return name in self._players
