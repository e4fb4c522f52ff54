# homegate/cli.py

import argparse
import logging
import sys
from datetime import date, timedelta
from typing import List, Optional, Union

from dotenv import load_dotenv

from homegate.core.exceptions import DashboardError
from homegate.core.settings import Settings
from homegate.processing.dashboard import DashboardService
from homegate import schemas

log = logging.getLogger("homegate.cli")

ACTIVE_MARK = "*"
IDLE_MARK = "."


def render_text(view: schemas.DashboardView) -> str:
    """Plain-text quota card followed by one timeline row per hour."""
    quota = view.quota
    lines = [
        f"{view.device_name} activity on {view.date_label} ({view.date.isoformat()})",
        f"{quota.status_label}: {quota.used_display} used of {quota.limit_display} "
        f"({quota.usage_percentage}%), {quota.idle_display} idle",
        quota.reset_label,
        "",
    ]
    for row in view.hours:
        marks = "".join(ACTIVE_MARK if cell.is_active else IDLE_MARK for cell in row.intervals)
        lines.append(f"{row.hour_label:02d}:00 {marks}")
    return "\n".join(lines)


def positive_int(value: str) -> int:
    minutes = int(value)
    if minutes <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number of minutes, got {value}")
    return minutes


def resolve_day(day: Optional[str], days_ago: Optional[int], settings: Settings) -> Union[str, date]:
    """Pick the reference date: --days-ago, then --day, then REFERENCE_DATE, then today."""
    if days_ago is not None:
        return date.today() - timedelta(days=days_ago)
    return day or settings.REFERENCE_DATE or date.today()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="homegate",
        description="Home Gate: device activity timeline and quota dashboard"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging for all homegate modules."
    )
    subparsers = parser.add_subparsers(dest="command", title="Available Commands", required=True)

    # --- Show Subcommand ---
    parser_show = subparsers.add_parser("show", help="Print the activity timeline and quota for a day.")
    # Parsed leniently here; the generator rejects bad dates with InvalidDateError
    parser_show.add_argument("--day", type=str, default=None, help="Day YYYY-MM-DD (default: today).")
    parser_show.add_argument("--days-ago", type=int, default=None, help="Days ago (overrides --day).")
    parser_show.add_argument("--quota", type=positive_int, default=None, help="Quota limit in minutes (overrides settings).")
    parser_show.add_argument("--json", action="store_true", help="Print the dashboard as JSON.")

    def handle_show(args_ns, current_settings: Settings) -> int:
        if args_ns.quota is not None:
            current_settings = current_settings.model_copy(
                update={"QUOTA_LIMIT_MINUTES": args_ns.quota, "QUOTA_POLICY": None}
            )
        target_day = resolve_day(args_ns.day, args_ns.days_ago, current_settings)
        log.info(f"CLI: Building dashboard for {target_day}...")
        view = DashboardService(current_settings).build_view(target_day)
        if args_ns.json:
            print(view.model_dump_json(indent=2))
        else:
            print(render_text(view))
        return 0
    parser_show.set_defaults(func=handle_show)

    # --- Serve Subcommand ---
    parser_serve = subparsers.add_parser("serve", help="Run the dashboard API server.")
    parser_serve.add_argument("--host", default="127.0.0.1", help="Bind address.")
    parser_serve.add_argument("--port", type=int, default=8000, help="Bind port.")

    def handle_serve(args_ns, current_settings: Settings) -> int:
        import uvicorn
        log.info(f"CLI: Starting API server on {args_ns.host}:{args_ns.port}...")
        uvicorn.run("homegate.main:app", host=args_ns.host, port=args_ns.port, log_level="info")
        return 0
    parser_serve.set_defaults(func=handle_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-25s | %(message)s",
        level=logging.DEBUG if args.debug else logging.INFO,
    )
    if args.debug:
        log.debug("Debug logging enabled.")

    try:
        settings = Settings()
        return args.func(args, settings)
    except DashboardError as e:
        log.error(f"CLI: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
