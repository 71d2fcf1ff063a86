"""Board session: applies actions to the board and the edit state.

One session lives for the whole process. Every action that changes list
contents or order is followed by a save; save failures are kept in memory as
a transient status message instead of interrupting the session.
"""

import logging
import time
from typing import Callable, Optional

from core import (
    Action,
    ActionKind,
    Board,
    EditState,
    Mode,
    MUTATING_KINDS,
    SaveError,
    mode_of,
)
from application.ports import BoardRepository

logger = logging.getLogger("todo_board.session")

STATUS_TTL = 4.0


class BoardSession:
    def __init__(
        self,
        board: Board,
        repository: Optional[BoardRepository] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.board = board
        self.repository = repository
        self.edit: Optional[EditState] = None
        self.should_quit = False
        self.status_message = ""
        self.status_message_expires = 0.0
        self.last_save_error: Optional[SaveError] = None
        self._clock = clock

    @property
    def mode(self) -> Mode:
        return mode_of(self.edit)

    # -------------------- status line --------------------
    def set_status_message(self, message: str, ttl: float = STATUS_TTL) -> None:
        self.status_message = message
        self.status_message_expires = self._clock() + ttl

    def current_status(self) -> str:
        if self.status_message and self._clock() < self.status_message_expires:
            return self.status_message
        self.status_message = ""
        return ""

    # -------------------- persistence --------------------
    def persist(self) -> bool:
        if self.repository is None:
            return True
        try:
            self.repository.save(self.board)
        except SaveError as exc:
            logger.warning("%s", exc)
            self.last_save_error = exc
            self.set_status_message(str(exc))
            return False
        self.last_save_error = None
        return True

    # -------------------- dispatch --------------------
    def apply(self, action: Optional[Action]) -> bool:
        """Apply one action; return True when the board changed."""
        if action is None:
            return False
        kind = action.kind
        if kind is ActionKind.QUIT:
            self.quit()
            return False

        before = self.board.snapshot() if kind in MUTATING_KINDS else None
        if self.edit is None:
            self._apply_navigation(action)
        else:
            self._apply_editing(self.edit, action)
        if before is None or before == self.board.snapshot():
            return False
        self.persist()
        return True

    def quit(self) -> None:
        self.edit = None
        self.should_quit = True
        self.persist()

    def _apply_navigation(self, action: Action) -> None:
        board = self.board
        kind = action.kind
        if kind is ActionKind.MOVE_UP:
            board.move_selection(-1)
        elif kind is ActionKind.MOVE_DOWN:
            board.move_selection(1)
        elif kind is ActionKind.DRAG_UP:
            board.drag(-1)
        elif kind is ActionKind.DRAG_DOWN:
            board.drag(1)
        elif kind is ActionKind.JUMP_START:
            board.jump_start()
        elif kind is ActionKind.JUMP_END:
            board.jump_end()
        elif kind is ActionKind.SWITCH_FOCUS:
            board.toggle_focus()
        elif kind is ActionKind.BEGIN_INSERT:
            self.edit = EditState.begin_insert(board)
        elif kind is ActionKind.BEGIN_RENAME:
            self.edit = EditState.begin_rename(board)
        elif kind is ActionKind.DELETE_ITEM:
            board.delete()
        elif kind is ActionKind.MOVE_TO_OTHER_LIST:
            board.move_item_to_other_list()
        else:
            logger.debug("Ignoring %s in navigation mode", kind.value)

    def _apply_editing(self, edit: EditState, action: Action) -> None:
        kind = action.kind
        if kind is ActionKind.INSERT_CHAR:
            edit.insert_text(action.text)
        elif kind is ActionKind.CURSOR_LEFT:
            edit.move_cursor(-1)
        elif kind is ActionKind.CURSOR_RIGHT:
            edit.move_cursor(1)
        elif kind is ActionKind.CURSOR_HOME:
            edit.cursor_home()
        elif kind is ActionKind.CURSOR_END:
            edit.cursor_end()
        elif kind is ActionKind.DELETE_BACK:
            edit.delete_back()
        elif kind is ActionKind.DELETE_FORWARD:
            edit.delete_forward()
        elif kind is ActionKind.CONFIRM_EDIT:
            edit.commit(self.board)
            self.edit = None
        elif kind is ActionKind.CANCEL_EDIT:
            self.edit = None
        else:
            logger.debug("Ignoring %s in edit mode", kind.value)


__all__ = ["BoardSession", "STATUS_TTL"]
