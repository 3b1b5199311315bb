#!/usr/bin/env python3
"""
Bookkeeping reminders management CLI.

Usage:
    python manage.py start       Start the API server (daily sweep included)
    python manage.py sweep       Run one reminder sweep now and print counters
    python manage.py list        Print stored reminders
"""

import argparse
import asyncio
import json
import sys
from dataclasses import asdict


def cmd_start(args: argparse.Namespace) -> None:
    """Start the server in the foreground."""
    import uvicorn

    from src.config import get_settings

    settings = get_settings()
    host = args.host or settings.api.host
    port = args.port or settings.api.port

    # One process only: the daily sweep runs inside the server
    print(f"Starting server on {host}:{port}...")
    uvicorn.run(
        "src.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )


def cmd_sweep(args: argparse.Namespace) -> None:
    """Run the reminder sweep once, outside the server."""
    from src.application.services import get_reminder_scheduler
    from src.config import configure_logging

    configure_logging()
    result = asyncio.run(get_reminder_scheduler().run_now())
    print(json.dumps(asdict(result), indent=2))
    if result.failed:
        sys.exit(1)


def cmd_list(args: argparse.Namespace) -> None:
    """Print stored reminders, optionally only the active ones."""
    from src.application.services import get_reminder_service

    records = asyncio.run(get_reminder_service().list_all())
    if args.active:
        records = [r for r in records if r.active]

    if args.json:
        print(json.dumps([r.to_json_dict() for r in records], indent=2, ensure_ascii=False))
        return

    if not records:
        print("No reminders stored.")
        return

    for r in records:
        flag = "active" if r.active else "done"
        notified = r.last_notified_at.isoformat(timespec="minutes") if r.last_notified_at else "never"
        print(f"[{flag:6}] {r.key:30} {r.status or '-':12} {r.recipient or '(no recipient)':30} last: {notified}")
    print(f"{len(records)} reminder(s).")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Bookkeeping reminders management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # start
    p_start = sub.add_parser("start", help="Start the API server")
    p_start.add_argument("--host", default=None, help="Bind host (default: API_HOST)")
    p_start.add_argument("--port", type=int, default=None, help="Bind port (default: PORT or 10000)")
    p_start.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_start.set_defaults(func=cmd_start)

    # sweep
    p_sweep = sub.add_parser("sweep", help="Send due reminders now")
    p_sweep.set_defaults(func=cmd_sweep)

    # list
    p_list = sub.add_parser("list", help="Print stored reminders")
    p_list.add_argument("--active", action="store_true", help="Only active reminders")
    p_list.add_argument("--json", action="store_true", help="Print the raw JSON records")
    p_list.set_defaults(func=cmd_list)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
