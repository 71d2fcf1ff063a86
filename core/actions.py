"""Semantic actions produced by the input interpreter."""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet


class ActionKind(Enum):
    # navigation
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    DRAG_UP = "drag_up"
    DRAG_DOWN = "drag_down"
    JUMP_START = "jump_start"
    JUMP_END = "jump_end"
    SWITCH_FOCUS = "switch_focus"
    BEGIN_RENAME = "begin_rename"
    BEGIN_INSERT = "begin_insert"
    DELETE_ITEM = "delete_item"
    MOVE_TO_OTHER_LIST = "move_to_other_list"
    QUIT = "quit"
    # editing
    INSERT_CHAR = "insert_char"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    CURSOR_HOME = "cursor_home"
    CURSOR_END = "cursor_end"
    DELETE_BACK = "delete_back"
    DELETE_FORWARD = "delete_forward"
    CONFIRM_EDIT = "confirm_edit"
    CANCEL_EDIT = "cancel_edit"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    text: str = ""


# Actions that can change list contents or order (and so need a save).
MUTATING_KINDS: FrozenSet[ActionKind] = frozenset(
    {
        ActionKind.DRAG_UP,
        ActionKind.DRAG_DOWN,
        ActionKind.DELETE_ITEM,
        ActionKind.MOVE_TO_OTHER_LIST,
        ActionKind.CONFIRM_EDIT,
    }
)


__all__ = ["Action", "ActionKind", "MUTATING_KINDS"]
