"""Key → Action interpretation.

A pure function of (mode, focused panel, key). Keys are prompt_toolkit key
names: a ``Keys`` member or its value (``"up"``, ``"c-m"``) for special keys,
the literal character for everything else.
"""

from typing import Dict, Optional, Union

from prompt_toolkit.keys import Keys

from core import Action, ActionKind, Mode, Panel

KeyName = Union[Keys, str]

NAVIGATION_KEYS: Dict[str, ActionKind] = {
    Keys.Up.value: ActionKind.MOVE_UP,
    "k": ActionKind.MOVE_UP,
    "w": ActionKind.MOVE_UP,
    Keys.Down.value: ActionKind.MOVE_DOWN,
    "j": ActionKind.MOVE_DOWN,
    "s": ActionKind.MOVE_DOWN,
    Keys.ShiftUp.value: ActionKind.DRAG_UP,
    "K": ActionKind.DRAG_UP,
    "W": ActionKind.DRAG_UP,
    Keys.ShiftDown.value: ActionKind.DRAG_DOWN,
    "J": ActionKind.DRAG_DOWN,
    "S": ActionKind.DRAG_DOWN,
    Keys.Home.value: ActionKind.JUMP_START,
    "g": ActionKind.JUMP_START,
    Keys.End.value: ActionKind.JUMP_END,
    "G": ActionKind.JUMP_END,
    Keys.Tab.value: ActionKind.SWITCH_FOCUS,
    Keys.BackTab.value: ActionKind.SWITCH_FOCUS,
    "r": ActionKind.BEGIN_RENAME,
    "e": ActionKind.BEGIN_RENAME,
    "i": ActionKind.BEGIN_INSERT,
    "a": ActionKind.BEGIN_INSERT,
    Keys.Delete.value: ActionKind.DELETE_ITEM,
    "d": ActionKind.DELETE_ITEM,
    "x": ActionKind.DELETE_ITEM,
    Keys.Enter.value: ActionKind.MOVE_TO_OTHER_LIST,
    " ": ActionKind.MOVE_TO_OTHER_LIST,
    "q": ActionKind.QUIT,
    Keys.ControlC.value: ActionKind.QUIT,
    Keys.SIGINT.value: ActionKind.QUIT,
}

EDIT_KEYS: Dict[str, ActionKind] = {
    Keys.Left.value: ActionKind.CURSOR_LEFT,
    Keys.Right.value: ActionKind.CURSOR_RIGHT,
    Keys.Home.value: ActionKind.CURSOR_HOME,
    Keys.End.value: ActionKind.CURSOR_END,
    Keys.Backspace.value: ActionKind.DELETE_BACK,
    Keys.Delete.value: ActionKind.DELETE_FORWARD,
    Keys.Enter.value: ActionKind.CONFIRM_EDIT,
    Keys.Escape.value: ActionKind.CANCEL_EDIT,
    Keys.ControlC.value: ActionKind.QUIT,
    Keys.SIGINT.value: ActionKind.QUIT,
}


def key_name(key: KeyName) -> str:
    return key.value if isinstance(key, Keys) else key


def is_printable(key: KeyName) -> bool:
    """Single literal characters only; named keys are never text."""
    if isinstance(key, Keys) or len(key) != 1:
        return False
    return key.isprintable()


def interpret(mode: Mode, focused: Panel, key: KeyName, data: str = "") -> Optional[Action]:
    """Classify ``key``; ``None`` for keys without a binding in ``mode``.

    ``data`` carries pasted text for ``Keys.BracketedPaste``. ``focused`` is
    accepted for panel-specific bindings; the keymap is currently the same
    for both panels.
    """
    name = key_name(key)
    if mode is Mode.NAVIGATION:
        kind = NAVIGATION_KEYS.get(name)
        return Action(kind) if kind else None
    if mode is Mode.INSERT or mode is Mode.RENAME:
        kind = EDIT_KEYS.get(name)
        if kind:
            return Action(kind)
        if name == Keys.BracketedPaste.value:
            return Action(ActionKind.INSERT_CHAR, data) if data else None
        if is_printable(key):
            return Action(ActionKind.INSERT_CHAR, name)
        return None
    raise ValueError(f"Unknown mode: {mode!r}")


__all__ = ["EDIT_KEYS", "NAVIGATION_KEYS", "interpret", "is_printable", "key_name"]
