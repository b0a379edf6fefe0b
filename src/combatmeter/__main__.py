"""이벤트 로그 리플레이 CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from combatmeter.alert_manager import AlertEvent, AlertManager
from combatmeter.clock import ManualClock
from combatmeter.config import ConfigManager
from combatmeter.io.event_log import load_events, replay
from combatmeter.io.stats_exporter import StatsExporter
from combatmeter.logging_config import setup_logging
from combatmeter.meter.meter import Meter
from combatmeter.models import PlayerStatistics
from combatmeter.pipeline.dispatcher import EventDispatcher

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="combatmeter")
    sub = parser.add_subparsers(dest="command", required=True)

    rp = sub.add_parser("replay", help="JSON Lines 이벤트 로그를 리플레이한다")
    rp.add_argument("event_log", type=Path)
    rp.add_argument("--config", type=Path, default=None)
    rp.add_argument("--log-dir", type=Path, default=None)
    rp.add_argument("--csv", type=Path, default=None, help="현재 세션 통계 CSV 경로")
    rp.add_argument("--json", type=Path, default=None, help="현재 세션 통계 JSON 경로")
    rp.add_argument("--all-sessions", action="store_true", help="모든 세션 출력")
    return parser


def format_stats(stats: list[PlayerStatistics]) -> str:
    """통계를 고정폭 표 문자열로 만든다."""
    lines = [f"{'player':<20} {'damage':>12} {'time(s)':>10} {'dps':>12}"]
    for s in stats:
        lines.append(
            f"{s.player:<20} {s.damage:>12.1f} {s.seconds_in_combat:>10.2f} {s.dps:>12.1f}"
        )
    return "\n".join(lines)


def format_alert(alert: AlertEvent) -> str:
    op = ">=" if alert.alert_type == "above" else "<"
    return f"[alert] {alert.player}: DPS {alert.current_dps:.1f} {op} {alert.threshold:.1f}"


def _run_replay(args: argparse.Namespace) -> int:
    config = ConfigManager().load(args.config)
    setup_logging(config.log_level, args.log_dir)

    clock = ManualClock()
    meter = Meter.from_config(config, clock=clock)
    dispatcher = EventDispatcher(meter)

    events = load_events(args.event_log)
    applied = replay(events, dispatcher, clock)
    logger.info("리플레이 완료: %d/%d 이벤트 적용", applied, len(events))

    stats = meter.get_instance_session()
    if stats is None:
        print("세션 없음")
        return 0

    alerts = AlertManager(config.dps_alert_threshold, config.dps_alert_cooldown, clock=clock)
    if args.all_sessions:
        for number, session_stats in enumerate(meter.get_session_history(), start=1):
            print(f"# session {number}")
            print(format_stats(session_stats))
            alerts.reset()
            for alert in alerts.check_all(session_stats):
                print(format_alert(alert))
    else:
        print(format_stats(stats))
        for alert in alerts.check_all(stats):
            print(format_alert(alert))

    if args.csv is not None:
        StatsExporter.export_csv(stats, args.csv)
    if args.json is not None:
        StatsExporter.export_json(stats, args.json)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        return _run_replay(args)
    except (OSError, ValueError) as e:
        print(f"오류: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
