"""세션 통계 CSV/JSON 내보내기."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from combatmeter.models import PlayerStatistics


_CSV_COLUMNS = [
    "player",
    "damage",
    "time_in_combat",
    "dps",
]


class StatsExporter:
    """PlayerStatistics 리스트를 CSV 또는 JSON으로 내보낸다."""

    @staticmethod
    def export_csv(stats: list[PlayerStatistics], filepath: Path) -> None:
        """통계를 CSV 파일로 저장한다."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(_CSV_COLUMNS)
            for s in stats:
                writer.writerow([s.player, s.damage, s.time_in_combat, s.dps])

    @staticmethod
    def export_json(stats: list[PlayerStatistics], filepath: Path) -> None:
        """통계를 JSON 파일로 저장한다."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        data = [
            {
                "player": s.player,
                "damage": s.damage,
                "time_in_combat": s.time_in_combat,
                "dps": s.dps,
            }
            for s in stats
        ]
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
