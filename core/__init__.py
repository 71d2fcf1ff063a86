from .item_list import ItemList
from .board import Board, Panel
from .edit_state import EditKind, EditState, Mode, mode_of
from .actions import Action, ActionKind, MUTATING_KINDS
from .errors import BoardError, MalformedFileError, SaveError, StartupError

__all__ = [
    "ItemList",
    "Board",
    "Panel",
    # Edit mode
    "EditKind",
    "EditState",
    "Mode",
    "mode_of",
    # Actions
    "Action",
    "ActionKind",
    "MUTATING_KINDS",
    # Errors
    "BoardError",
    "MalformedFileError",
    "SaveError",
    "StartupError",
]
