"""
Interactive harness for trying the archiver on a real note.

Usage:
    history-archive-harness <FILE> [--date YYYY-MM-DD]

Loads the file into an in-memory buffer and drops you into a REPL where you
can complete/progress tasks by line number, undo whole operations, and
write the result back once it looks right.
"""

import sys
from pathlib import Path

from history_archive.archive.files import load_buffer
from history_archive.archive.history import archive_task, read_history
from history_archive.config import ArchiveConfig
from history_archive.editor.base import Position
from history_archive.editor.buffer import TextBuffer


def show(buffer: TextBuffer) -> None:
    cursor = buffer.get_cursor()
    for n in range(buffer.line_count()):
        marker = ">" if n == cursor.line else " "
        print(f"{marker}{n + 1:4d}  {buffer.get_line(n)}")


def repl(buffer: TextBuffer, file_path: Path, config: ArchiveConfig, today) -> None:
    """Simple REPL for interactive exploration."""
    print("Interactive mode. Type 'help' for commands, 'quit' to exit.\n")

    commands = {
        "help":     "Show this help",
        "show":     "Print the document with line numbers",
        "complete": "Complete the task on a line. Usage: complete <line>",
        "progress": "Progress the task on a line. Usage: progress <line>",
        "undo":     "Undo the last operation",
        "history":  "List archived entries by day",
        "write":    "Write the buffer back to the file",
        "quit":     "Exit",
    }
    dirty = False

    while True:
        try:
            line = input("history-archive> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue

        parts = line.split()
        cmd = parts[0].lower()

        if cmd == "quit" or cmd == "exit":
            if dirty:
                print("  (unsaved changes discarded)")
            break

        elif cmd == "help":
            for k, v in commands.items():
                print(f"  {k:10s} {v}")

        elif cmd == "show":
            show(buffer)

        elif cmd in ("complete", "progress"):
            if len(parts) < 2 or not parts[1].isdigit():
                print(f"Usage: {cmd} <line>")
                continue
            line_number = int(parts[1]) - 1
            if not 0 <= line_number < buffer.line_count():
                print(f"  Line {parts[1]} out of range")
                continue
            buffer.set_cursor(Position(line_number))
            task = archive_task(buffer, cmd == "complete", today=today, config=config)
            if task is None:
                print(f"  Line {parts[1]} is not a task")
            else:
                dirty = True
                print(f"  {task.task.strip()}")

        elif cmd == "undo":
            if buffer.undo():
                dirty = True
                print("  Undone")
            else:
                print("  Nothing to undo")

        elif cmd == "history":
            for day in read_history(buffer, config):
                print(f"  {day['date']}")
                for entry in day["entries"]:
                    print(f"    {entry}")

        elif cmd == "write":
            file_path.write_text(buffer.text, encoding="utf-8")
            dirty = False
            print(f"  Wrote {file_path}")

        else:
            print(f"Unknown command: {cmd}. Type 'help' for available commands.")


def main():
    if len(sys.argv) < 2:
        print("Usage: history-archive-harness <FILE> [--date YYYY-MM-DD]")
        sys.exit(1)

    file_path = Path(sys.argv[1]).resolve()
    if not file_path.is_file():
        print(f"Error: {file_path} is not a file")
        sys.exit(1)

    today = None
    if "--date" in sys.argv[2:]:
        index = sys.argv.index("--date")
        if index + 1 < len(sys.argv):
            today = sys.argv[index + 1]

    config = ArchiveConfig.from_env()
    buffer = load_buffer(file_path)
    print(f"Loaded {file_path} ({buffer.line_count()} lines)")

    repl(buffer, file_path, config, today)

    print("Done.")


if __name__ == "__main__":
    main()
