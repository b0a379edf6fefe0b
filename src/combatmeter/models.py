"""Frozen dataclass 모델 정의."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


def compute_dps(damage: float, time_in_combat: float) -> float:
    """밀리초 단위 전투 시간으로 초당 대미지를 계산한다.

    전투 시간이 0이면 0.0을 반환한다.
    """
    if time_in_combat <= 0:
        return 0.0
    return damage * 1000.0 / time_in_combat


@dataclass(frozen=True)
class PlayerStatistics:
    """특정 시점의 플레이어 통계 스냅샷."""

    player: str
    damage: float
    time_in_combat: float  # ms
    dps: float

    @classmethod
    def from_totals(cls, player: str, damage: float, time_in_combat: float) -> PlayerStatistics:
        return cls(
            player=player,
            damage=damage,
            time_in_combat=time_in_combat,
            dps=compute_dps(damage, time_in_combat),
        )

    @property
    def seconds_in_combat(self) -> float:
        return self.time_in_combat / 1000.0


class DamageSignPolicy(Enum):
    """대미지 이벤트 부호 처리 정책."""

    NEGATIVE_ONLY = "negative_only"
    POSITIVE_ONLY = "positive_only"
    ABSOLUTE = "absolute"

    def magnitude(self, damage: float) -> float | None:
        """적용할 대미지 크기를 반환한다. 무시해야 하면 None."""
        if self is DamageSignPolicy.NEGATIVE_ONLY:
            return -damage if damage < 0 else None
        if self is DamageSignPolicy.POSITIVE_ONLY:
            return damage if damage > 0 else None
        return abs(damage)


class SessionEndPolicy(Enum):
    """세션 종료 시 전투 중인 플레이어 처리 정책."""

    DROP = "drop"  # 미종료 구간은 0으로 처리
    FLUSH = "flush"  # 종료 시점까지의 구간을 반영


# ── 캡처 계층 이벤트 ──────────────────────────────────────


@dataclass(frozen=True)
class MainPlayerJoined:
    """메인 플레이어 식별 이벤트."""

    name: str
    player_id: int


@dataclass(frozen=True)
class PlayerJoined:
    """플레이어 입장 이벤트."""

    name: str
    player_id: int


@dataclass(frozen=True)
class PlayerLeft:
    """플레이어 퇴장 이벤트."""

    player_id: int


@dataclass(frozen=True)
class DamageDealt:
    """대미지 이벤트. 부호 해석은 DamageSignPolicy를 따른다."""

    player_id: int
    damage: float


@dataclass(frozen=True)
class CombatEntered:
    player_id: int


@dataclass(frozen=True)
class CombatLeft:
    player_id: int


MeterEvent = Union[
    MainPlayerJoined, PlayerJoined, PlayerLeft, DamageDealt, CombatEntered, CombatLeft
]


@dataclass
class MeterConfig:
    """미터 설정."""

    damage_sign_policy: DamageSignPolicy = DamageSignPolicy.NEGATIVE_ONLY
    session_end_policy: SessionEndPolicy = SessionEndPolicy.DROP
    log_level: str = "INFO"
    dps_alert_threshold: float = 0.0
    dps_alert_cooldown: float = 10.0
