"""Command-line entry: resolve the board file, load it, run the TUI."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path
from typing import List, Optional

from application.board_session import BoardSession
from config import get_default_file, get_log_file, set_default_file
from core import MalformedFileError, StartupError
from infrastructure.file_repository import FileBoardRepository

logger = logging.getLogger("todo_board.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-board",
        description="Two-list TODO/DONE board in the terminal.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="board file to load and save (default: $TODO_BOARD_FILE, the user config, or ./TODO)",
    )
    parser.add_argument(
        "--save-default",
        action="store_true",
        help="remember the resolved path as the default board file",
    )
    parser.add_argument("--version", action="store_true", help="print version and exit")
    return parser


def configure_logging(log_file: str = "") -> None:
    """Send records to ``log_file`` if set; never to the terminal the TUI owns."""
    root = logging.getLogger("todo_board")
    if root.handlers:
        return
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.setLevel(logging.INFO)
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)


def resolve_path(raw: Optional[str]) -> Path:
    return Path(raw or get_default_file()).expanduser()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("todo-board"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0

    configure_logging(get_log_file())
    path = resolve_path(args.path)
    if args.save_default:
        set_default_file(str(path.resolve()))

    repository = FileBoardRepository(path)
    try:
        board = repository.load()
    except MalformedFileError as exc:
        print(f"todo-board: malformed board file: {exc}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"todo-board: cannot read {path}: {exc}", file=sys.stderr)
        return 1

    session = BoardSession(board, repository)
    try:
        from interface.tui_app import BoardTUI, ensure_terminal

        ensure_terminal()
        BoardTUI(session).run()
    except StartupError as exc:
        logger.error("Startup failed: %s", exc)
        print(f"todo-board: {exc}", file=sys.stderr)
        return 1

    if session.last_save_error is not None:
        print(f"todo-board: {session.last_save_error}", file=sys.stderr)
        return 1
    print(f"Saved state to {repository.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
