"""세션 통계 내보내기 단위 테스트."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from combatmeter.io.stats_exporter import StatsExporter
from combatmeter.models import PlayerStatistics


def _sample_stats() -> list[PlayerStatistics]:
    return [
        PlayerStatistics.from_totals("플레이어", 50.0, 1000.0),
        PlayerStatistics.from_totals("B", 0.0, 0.0),
    ]


class TestCsvExport:
    """CSV 내보내기 검증."""

    def test_csv_has_header(self, tmp_path: Path) -> None:
        filepath = tmp_path / "test.csv"
        StatsExporter.export_csv(_sample_stats(), filepath)
        with open(filepath, encoding="utf-8") as f:
            header = next(csv.reader(f))
        assert header == ["player", "damage", "time_in_combat", "dps"]

    def test_csv_data_values(self, tmp_path: Path) -> None:
        filepath = tmp_path / "test.csv"
        StatsExporter.export_csv(_sample_stats(), filepath)
        with open(filepath, encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 2
        assert rows[0]["player"] == "플레이어"
        assert float(rows[0]["dps"]) == 50.0
        assert float(rows[1]["time_in_combat"]) == 0.0

    def test_csv_creates_parent_dirs(self, tmp_path: Path) -> None:
        filepath = tmp_path / "sub" / "dir" / "test.csv"
        StatsExporter.export_csv(_sample_stats(), filepath)
        assert filepath.exists()

    def test_csv_empty_stats(self, tmp_path: Path) -> None:
        filepath = tmp_path / "empty.csv"
        StatsExporter.export_csv([], filepath)
        with open(filepath, encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert len(rows) == 1  # header only


class TestJsonExport:
    """JSON 내보내기 검증."""

    def test_json_data_values(self, tmp_path: Path) -> None:
        filepath = tmp_path / "test.json"
        StatsExporter.export_json(_sample_stats(), filepath)
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        assert data[0] == {
            "player": "플레이어",
            "damage": 50.0,
            "time_in_combat": 1000.0,
            "dps": 50.0,
        }
        assert len(data) == 2

    def test_json_korean_encoding(self, tmp_path: Path) -> None:
        filepath = tmp_path / "test.json"
        StatsExporter.export_json(_sample_stats(), filepath)
        raw = filepath.read_text(encoding="utf-8")
        assert "플레이어" in raw  # ensure_ascii=False 확인

    def test_json_empty_stats(self, tmp_path: Path) -> None:
        filepath = tmp_path / "a" / "empty.json"
        StatsExporter.export_json([], filepath)
        with open(filepath, encoding="utf-8") as f:
            assert json.load(f) == []
