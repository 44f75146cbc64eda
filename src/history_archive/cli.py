#!/usr/bin/env python3
"""
history-archive - archive checklist tasks into a note's History section

Usage:
    history-archive complete <file> <line> [--date DATE] [--dry-run]
    history-archive progress <file> <line> [--date DATE] [--dry-run]
    history-archive history <file> [--date DATE]

Lines are 1-based, as shown by editors and `grep -n`.

Examples:
    history-archive complete TASKS.md 12
    history-archive progress notes/project.md 4 --date yesterday
    history-archive --vault ~/my-brain history notes/project.md --date today
"""

import argparse
import sys
from pathlib import Path

from history_archive.api.handlers import (
    handle_history_list,
    handle_task_complete,
    handle_task_progress,
)
from history_archive.config import ArchiveConfig


def _check(result: dict) -> dict:
    if "error" in result:
        print(f"Error: {result['error']}")
        sys.exit(1)
    return result


def _report(result: dict) -> None:
    if result["status"] == "skipped":
        print(result["message"])
        return

    if result["dry_run"]:
        print(result["content"])
        return

    print(f"{result['action'].capitalize()}: {result['task']} -> {result['date']}")
    for parent in result["parents"]:
        print(f"  under: {parent}")


# --- complete / progress ---

def complete_cmd(args):
    """Check off a task and move it to the History section."""
    result = _check(handle_task_complete(
        args.vault, file_path=args.file, line=args.line,
        date=args.date, dry_run=args.dry_run, config=args.config,
    ))
    _report(result)


def progress_cmd(args):
    """Mark a task in progress and mirror it in the History section."""
    result = _check(handle_task_progress(
        args.vault, file_path=args.file, line=args.line,
        date=args.date, dry_run=args.dry_run, config=args.config,
    ))
    _report(result)


# --- history ---

def history_cmd(args):
    """Show archived entries, grouped by day."""
    result = _check(handle_history_list(
        args.vault, file_path=args.file, date=args.date, config=args.config,
    ))

    if not result["days"]:
        print("No history found.")
        return

    for day in result["days"]:
        print(f"{day['date']} ({len(day['entries'])} entries)")
        for entry in day["entries"]:
            print(f"  {entry}")


# --- main ---

def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Archive markdown checklist tasks into a dated History section",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument('--vault', default='.',
                        help='Vault root directory (default: current directory)')
    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    for name, func, help_text in (
        ('complete', complete_cmd, 'Complete a task and remove it from its place'),
        ('progress', progress_cmd, 'Mark a task in progress, leaving it in place'),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument('file', help='Markdown file (relative to the vault)')
        p.add_argument('line', type=int, help='1-based line number of the task')
        p.add_argument('--date', help='Archive day (YYYY-MM-DD, today, yesterday, friday, etc.)')
        p.add_argument('--dry-run', action='store_true',
                       help='Print the resulting document without writing it')
        p.set_defaults(func=func)

    history_p = subparsers.add_parser('history', help='List archived tasks')
    history_p.add_argument('file', help='Markdown file (relative to the vault)')
    history_p.add_argument('--date', help='Only show this day')
    history_p.set_defaults(func=history_cmd)

    # Parse and dispatch
    args = parser.parse_args(argv)
    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    args.vault = Path(args.vault).resolve()
    if not args.vault.is_dir():
        print(f"Error: Vault directory not found: {args.vault}")
        sys.exit(1)

    try:
        args.config = ArchiveConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    args.func(args)


if __name__ == '__main__':
    main()
