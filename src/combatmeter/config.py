"""TOML 기반 설정 관리."""

from __future__ import annotations

import tomllib
from enum import Enum
from pathlib import Path
from typing import TypeVar

from combatmeter.models import DamageSignPolicy, MeterConfig, SessionEndPolicy

_DEFAULT_PATH = Path.home() / ".combatmeter" / "config.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_E = TypeVar("_E", bound=Enum)


def _parse_enum(enum_cls: type[_E], key: str, raw: object, default: _E) -> _E:
    if raw is None:
        return default
    try:
        return enum_cls(str(raw).lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"{key} 값이 잘못되었습니다: {raw!r} (허용: {allowed})") from None


def _parse_float(key: str, raw: object, default: float, minimum: float = 0.0) -> float:
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise ValueError(f"{key} 값이 잘못되었습니다: {raw!r}")
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"{key} 값이 잘못되었습니다: {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{key}는 {minimum:g} 이상이어야 합니다: {value}")
    return value


class ConfigManager:
    """MeterConfig를 TOML 파일로 로드/저장하는 관리자."""

    def __init__(self, default_path: Path | None = None) -> None:
        self.default_path = default_path or _DEFAULT_PATH

    # ── 로드 ──────────────────────────────────────────────

    def load(self, path: Path | None = None) -> MeterConfig:
        """TOML 파일에서 설정을 로드한다. 파일이 없으면 기본값을 반환."""
        target = path or self.default_path
        if not target.exists():
            return MeterConfig()

        with open(target, "rb") as f:
            data = tomllib.load(f)

        defaults = MeterConfig()

        log_level = str(data.get("log_level", defaults.log_level)).upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level 값이 잘못되었습니다: {log_level!r}")


        return MeterConfig(
            damage_sign_policy=_parse_enum(
                DamageSignPolicy,
                "damage_sign_policy",
                data.get("damage_sign_policy"),
                defaults.damage_sign_policy,
            ),
            session_end_policy=_parse_enum(
                SessionEndPolicy,
                "session_end_policy",
                data.get("session_end_policy"),
                defaults.session_end_policy,
            ),
            log_level=log_level,
            dps_alert_threshold=_parse_float(
                "dps_alert_threshold",
                data.get("dps_alert_threshold"),
                defaults.dps_alert_threshold,
            ),
            dps_alert_cooldown=_parse_float(
                "dps_alert_cooldown",
                data.get("dps_alert_cooldown"),
                defaults.dps_alert_cooldown,
            ),
        )

    # ── 저장 ──────────────────────────────────────────────

    def save(self, config: MeterConfig, path: Path | None = None) -> None:
        """MeterConfig를 TOML 문자열로 직렬화하여 저장한다."""
        target = path or self.default_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self._serialize(config), encoding="utf-8")

    # ── 직렬화 ────────────────────────────────────────────

    @staticmethod
    def _serialize(config: MeterConfig) -> str:
        """MeterConfig를 TOML 문자열로 변환한다 (외부 의존성 없음)."""
        lines: list[str] = [
            f'damage_sign_policy = "{config.damage_sign_policy.value}"',
            f'session_end_policy = "{config.session_end_policy.value}"',
            f'log_level = "{config.log_level}"',
            f"dps_alert_threshold = {float(config.dps_alert_threshold)}",
            f"dps_alert_cooldown = {float(config.dps_alert_cooldown)}",
            "",  # trailing newline
        ]
        return "\n".join(lines)
