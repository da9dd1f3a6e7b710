"""Scheduler CLI entry points.
This module exposes schedule and completed-list commands.
It maps argparse commands onto ScheduleBook calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

from core.config import SchedulerConfig
from core.errors import SchedulerError
from core.types import ScheduledEvent
from store.schedule_book import ScheduleBook


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="scheduler", description="Scheduler CLI")
    parser.add_argument("--data-root", help="Override SCHEDULER_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_add_command(subparsers)
    _add_list_commands(subparsers)
    _add_complete_command(subparsers)
    _add_reschedule_command(subparsers)
    _add_move_command(subparsers)
    _add_completed_maintenance_commands(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Scheduler CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        book = _build_book(args.data_root)
        return _dispatch(book, args)
    except SchedulerError as error:
        print(f"error={error}")
        return 1


def _dispatch(book: ScheduleBook, args: argparse.Namespace) -> int:
    if args.command == "add":
        event = book.add_event(args.name, args.date)
        _print_events([event], start=len(book.schedules) - 1)
        return 0
    if args.command == "list":
        _print_events(book.list_events())
        return 0
    if args.command == "completed":
        _print_events(book.list_completed())
        return 0
    if args.command == "complete":
        event = book.complete_event(args.index)
        print(f"completed\t{_format_event(event)}")
        return 0
    if args.command == "reschedule":
        event = book.reschedule_event(args.index, name=args.name, date=args.date)
        _print_events([event], start=args.index)
        return 0
    if args.command == "move":
        _print_events(book.move_event(args.from_index, args.to_index))
        return 0
    if args.command == "remove-completed":
        event = book.remove_completed(args.index)
        print(f"removed\t{_format_event(event)}")
        return 0
    if args.command == "clear-completed":
        book.clear_completed()
        return 0
    return 2


def _build_book(data_root: str | None) -> ScheduleBook:
    """Build schedule book with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Configured schedule book.
    """
    config = SchedulerConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return ScheduleBook(config)


def _print_events(events: Sequence[ScheduledEvent], start: int = 0) -> None:
    for offset, event in enumerate(events):
        print(f"{start + offset}\t{_format_event(event)}")


def _format_event(event: ScheduledEvent) -> str:
    return f"{event.date.isoformat()}\t{event.name}"


def _parse_date(raw_value: str) -> datetime:
    """Parse an ISO-8601 date argument."""
    try:
        return datetime.fromisoformat(raw_value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(
            f"invalid ISO-8601 date '{raw_value}', e.g. 2024-03-01T09:30"
        ) from error


def _add_add_command(subparsers: Any) -> None:
    """Register add subcommand."""
    parser = subparsers.add_parser("add", help="Schedule a new event")
    parser.add_argument("name", help="Event name")
    parser.add_argument("--date", required=True, type=_parse_date, help="ISO-8601 date")


def _add_list_commands(subparsers: Any) -> None:
    """Register list and completed subcommands."""
    subparsers.add_parser("list", help="List pending events")
    subparsers.add_parser("completed", help="List completed events")


def _add_complete_command(subparsers: Any) -> None:
    """Register complete subcommand."""
    parser = subparsers.add_parser("complete", help="Mark a pending event as completed")
    parser.add_argument("index", type=int, help="Pending event index")


def _add_reschedule_command(subparsers: Any) -> None:
    """Register reschedule subcommand."""
    parser = subparsers.add_parser("reschedule", help="Rename or move a pending event in time")
    parser.add_argument("index", type=int, help="Pending event index")
    parser.add_argument("--name", help="New event name")
    parser.add_argument("--date", type=_parse_date, help="New ISO-8601 date")


def _add_move_command(subparsers: Any) -> None:
    """Register move subcommand."""
    parser = subparsers.add_parser("move", help="Reorder pending events")
    parser.add_argument("from_index", type=int, help="Current position")
    parser.add_argument("to_index", type=int, help="New position")


def _add_completed_maintenance_commands(subparsers: Any) -> None:
    """Register remove-completed and clear-completed subcommands."""
    parser = subparsers.add_parser("remove-completed", help="Delete a completed event")
    parser.add_argument("index", type=int, help="Completed event index")
    subparsers.add_parser("clear-completed", help="Delete all completed events")
