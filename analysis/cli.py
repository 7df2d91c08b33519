"""Command-line interface for command analytics and rest status."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from analysis.command.analyzer import CommandAnalyzer
from analysis.command.reporting import filter_records_by_sessions, filter_sessions
from analysis.loaders import load_pitch_records, load_sessions, parse_datetime
from analysis.workload.rest_engine import compute_pitch_rest_status
from configs.settings import AnalyticsConfig, default_config, load_config
from contracts import PitchSession, PitcherHandedness, PitchSessionAnalytics
from contracts.versioning import COMMAND_REPORT, REST_STATUS, SESSION_ANALYTICS, make_envelope
from exceptions import PitchCommandError
from log_config.logger import configure_console_logging, configure_file_logging, get_logger

logger = get_logger(__name__)


def _load_config(args) -> AnalyticsConfig:
    if getattr(args, "config", None):
        return load_config(Path(args.config))
    return default_config()


def _align_timezone(value: Optional[datetime], sessions: Sequence[PitchSession]) -> Optional[datetime]:
    # Naive times are read as UTC; comparisons need both sides alike.
    if value is None or not sessions:
        return value
    sessions_aware = sessions[0].session_start_time.tzinfo is not None
    if sessions_aware and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    if not sessions_aware and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _print_analytics(analytics: PitchSessionAnalytics, total_pitches: int) -> None:
    print(f"  Total pitches: {total_pitches}")
    print(f"  Strike percentage: {analytics.strike_pct}%")
    print(f"  Target hit rate: {analytics.accuracy_hit_rate}%")
    print(f"  Proximity average: {analytics.accuracy_proximity_avg:.2f}")
    print(f"  Command score: {analytics.command_score}")

    for metrics in analytics.pitch_type_metrics:
        print(
            f"    {metrics.pitch_type_name:<12} n={metrics.count:<3} strike {metrics.strike_pct}% "
            f"hit {metrics.accuracy_hit_rate}% rating {metrics.command_rating}"
        )

    if analytics.insights:
        print("\n  Insights:")
        for insight in analytics.insights:
            print(f"    - {insight}")


def analyze_session_command(args) -> int:
    """Handle analyze-session command.

    Args:
        args: Parsed command-line arguments
    """
    config = _load_config(args)
    records = load_pitch_records(Path(args.records))
    logger.info(f"Analyzing {len(records)} pitches from {args.records}")

    analyzer = CommandAnalyzer(config)
    analytics = analyzer.analyze(records, pitcher_hand=PitcherHandedness(args.hand))

    if args.json:
        print(json.dumps(make_envelope(analytics.to_dict(), SESSION_ANALYTICS), indent=2))
        return 0

    print("Session analysis complete")
    _print_analytics(analytics, len(records))
    return 0


def rest_status_command(args) -> int:
    """Handle rest-status command.

    Args:
        args: Parsed command-line arguments
    """
    config = _load_config(args)
    sessions = load_sessions(Path(args.sessions))
    now = parse_datetime(args.now, "now") if args.now else datetime.now(timezone.utc)
    now = _align_timezone(now, sessions)
    rest_hours = (
        args.rest_hours_per_pitch
        if args.rest_hours_per_pitch is not None
        else config.workload.rest_hours_per_pitch
    )

    status = compute_pitch_rest_status(sessions, now, rest_hours)

    if args.json:
        print(json.dumps(make_envelope(status.to_dict(), REST_STATUS), indent=2))
        return 0

    print(f"{status.status_label} [{status.status.value}]")
    print(f"  {status.status_message}")
    if status.required_rest_days is not None:
        print(f"  Remaining rest: {status.required_rest_days:.1f} days")
        print(f"  Days since last session: {status.days_since_last:.1f}")
        print(f"  Last session pitches: {status.total_pitches}")
    return 0


def report_command(args) -> int:
    """Handle report command (date-filtered analysis across sessions).

    Args:
        args: Parsed command-line arguments
    """
    config = _load_config(args)
    records = load_pitch_records(Path(args.records))
    sessions = load_sessions(Path(args.sessions))
    start = _align_timezone(parse_datetime(args.start, "start") if args.start else None, sessions)
    end = _align_timezone(parse_datetime(args.end, "end") if args.end else None, sessions)

    selected = filter_sessions(sessions, start, end, args.pitcher)
    subset = filter_records_by_sessions(records, sessions, start, end, args.pitcher)
    logger.info(f"Report covers {len(selected)} session(s), {len(subset)} pitch(es)")

    analytics = CommandAnalyzer(config).analyze(subset, pitcher_hand=PitcherHandedness(args.hand))

    if args.json:
        payload = {
            "session_ids": [s.id for s in selected],
            "analytics": analytics.to_dict(),
        }
        print(json.dumps(make_envelope(payload, COMMAND_REPORT), indent=2))
        return 0

    print(f"Command report: {len(selected)} session(s)")
    _print_analytics(analytics, len(subset))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pitch Command Analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze one finalized session
  python -m analysis.cli analyze-session --records exports/session_42.json

  # Rest status for a pitcher's session history
  python -m analysis.cli rest-status --sessions exports/sessions.json --now 2026-03-14T18:00:00Z

  # Command report for March across all sessions
  python -m analysis.cli report --records exports/pitches.json --sessions exports/sessions.json \\
      --start 2026-03-01 --end 2026-03-31
        """
    )
    parser.add_argument('--config', help='Path to analytics YAML config (default: built-in)')
    parser.add_argument('--log-dir', help='Also write rotating log files to this directory')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging on stderr')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # analyze-session command
    analyze_parser = subparsers.add_parser('analyze-session', help='Analyze a single session')
    analyze_parser.add_argument('--records', required=True, help='Path to pitch records JSON')
    analyze_parser.add_argument('--hand', choices=['R', 'L'], default='R', help='Pitcher handedness')
    analyze_parser.add_argument('--json', action='store_true', help='Print analytics as JSON')

    # rest-status command
    rest_parser = subparsers.add_parser('rest-status', help='Compute pitching rest status')
    rest_parser.add_argument('--sessions', required=True, help='Path to sessions JSON')
    rest_parser.add_argument('--now', help='Evaluation time, ISO-8601 (default: current time)')
    rest_parser.add_argument(
        '--rest-hours-per-pitch',
        type=float,
        help='Override rest hours owed per pitch'
    )
    rest_parser.add_argument('--json', action='store_true', help='Print status as JSON')

    # report command
    report_parser = subparsers.add_parser('report', help='Analyze pitches across a date range')
    report_parser.add_argument('--records', required=True, help='Path to pitch records JSON')
    report_parser.add_argument('--sessions', required=True, help='Path to sessions JSON')
    report_parser.add_argument('--start', help='Earliest session start (ISO-8601)')
    report_parser.add_argument('--end', help='Latest session start (ISO-8601)')
    report_parser.add_argument('--pitcher', nargs='+', help='Only include these pitcher IDs')
    report_parser.add_argument('--hand', choices=['R', 'L'], default='R', help='Pitcher handedness')
    report_parser.add_argument('--json', action='store_true', help='Print report as JSON')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        configure_console_logging("DEBUG")
    if args.log_dir:
        configure_file_logging(Path(args.log_dir))

    handlers = {
        'analyze-session': analyze_session_command,
        'rest-status': rest_status_command,
        'report': report_command,
    }

    try:
        return handlers[args.command](args)
    except PitchCommandError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
