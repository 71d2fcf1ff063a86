#!/usr/bin/env python3
"""TUI application - BoardTUI class wiring prompt_toolkit to the board session."""

import logging
import os
import sys
from typing import Optional, TextIO, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output

from application.board_session import BoardSession
from config import get_ttimeoutlen
from core import StartupError
from interface.tui_input import interpret
from interface.tui_render import render_frame
from interface.tui_style import build_style

logger = logging.getLogger("todo_board.tui")


def ensure_terminal(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Raise StartupError unless both ends are attached to a terminal."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    for name, stream in (("stdin", stdin), ("stdout", stdout)):
        try:
            tty = stream is not None and stream.isatty()
        except (AttributeError, ValueError):
            tty = False
        if not tty:
            raise StartupError(f"{name} is not a terminal")


class BoardTUI:
    def __init__(
        self,
        session: BoardSession,
        *,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ):
        self.session = session

        kb = KeyBindings()

        @kb.add(Keys.Any)
        def _(event):
            """Every key press goes through the interpreter."""
            press = event.key_sequence[0]
            self.handle_key(press.key, press.data)

        self.body_control = FormattedTextControl(self.get_frame_text, focusable=True, show_cursor=False)
        self.main_window = Window(content=self.body_control, always_hide_cursor=True, wrap_lines=False)

        self.app = Application(
            layout=Layout(self.main_window),
            key_bindings=kb,
            style=build_style(),
            full_screen=True,
            mouse_support=False,
            input=input,
            output=output,
        )
        # prompt_toolkit waits ttimeoutlen to tell a lone Escape from an escape sequence.
        self.app.ttimeoutlen = get_ttimeoutlen()

    def get_terminal_size(self) -> Tuple[int, int]:
        """(columns, rows) of the output, falling back to the OS query."""
        try:
            size = self.app.output.get_size()
            return size.columns, size.rows
        except (AttributeError, ValueError, OSError):
            pass
        try:
            size = os.get_terminal_size()
            return size.columns, size.lines
        except (AttributeError, ValueError, OSError):
            return 80, 24

    def get_frame_text(self) -> FormattedText:
        width, height = self.get_terminal_size()
        session = self.session
        return render_frame(session.board, session.edit, width, height, session.current_status())

    def handle_key(self, key: str, data: str = "") -> None:
        session = self.session
        try:
            action = interpret(session.mode, session.board.focused, key, data)
            session.apply(action)
        except Exception as exc:
            logger.exception("Key %r failed", key)
            session.set_status_message(f"Error: {exc}")
        if session.should_quit and self.app.is_running:
            self.app.exit()

    def run(self) -> None:
        try:
            self.app.run()
        except OSError as exc:
            raise StartupError(f"terminal setup failed: {exc}") from exc


__all__ = ["BoardTUI", "ensure_terminal"]
