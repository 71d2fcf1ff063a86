"""Edit mode: the draft buffer behind inline insert/rename.

The session mode is a tagged value: ``None`` means navigation, an
``EditState`` means editing and its ``kind`` says which edit is in progress.
``mode_of`` collapses that pair into a single ``Mode`` for exhaustive dispatch.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board, Panel


class Mode(Enum):
    NAVIGATION = "navigation"
    INSERT = "insert"
    RENAME = "rename"


class EditKind(Enum):
    INSERT = "insert"
    RENAME = "rename"


@dataclass
class EditState:
    """In-progress text entry.

    Fields:
        kind: INSERT (new item) or RENAME (selected item).
        panel: Panel the edit applies to.
        index: Row the draft occupies: insert target or renamed item.
        draft: Text typed so far.
        cursor: Offset into ``draft``, kept within ``[0, len(draft)]``.
    """

    kind: EditKind
    panel: Panel
    index: int
    draft: str = ""
    cursor: int = 0

    def __post_init__(self) -> None:
        self.cursor = self._clamp(self.cursor)

    @classmethod
    def begin_insert(cls, board: Board) -> "EditState":
        target = board.focused_list.insert_position()
        return cls(EditKind.INSERT, board.focused, target)

    @classmethod
    def begin_rename(cls, board: Board) -> Optional["EditState"]:
        items = board.focused_list
        if items.selected is None:
            return None
        text = items.items[items.selected]
        return cls(EditKind.RENAME, board.focused, items.selected, text, len(text))

    @property
    def mode(self) -> Mode:
        return Mode.INSERT if self.kind is EditKind.INSERT else Mode.RENAME

    def _clamp(self, value: int) -> int:
        return max(0, min(value, len(self.draft)))

    # -------------------- draft editing --------------------
    def insert_text(self, text: str) -> None:
        # Printable text only; lone surrogates from undecodable input are dropped too.
        text = "".join(ch for ch in text if ch.isprintable())
        if not text:
            return
        self.draft = self.draft[: self.cursor] + text + self.draft[self.cursor :]
        self.cursor += len(text)

    def delete_back(self) -> None:
        if self.cursor == 0:
            return
        self.draft = self.draft[: self.cursor - 1] + self.draft[self.cursor :]
        self.cursor -= 1

    def delete_forward(self) -> None:
        if self.cursor >= len(self.draft):
            return
        self.draft = self.draft[: self.cursor] + self.draft[self.cursor + 1 :]

    def move_cursor(self, delta: int) -> None:
        self.cursor = self._clamp(self.cursor + delta)

    def cursor_home(self) -> None:
        self.cursor = 0

    def cursor_end(self) -> None:
        self.cursor = len(self.draft)

    # -------------------- commit --------------------
    def commit(self, board: Board) -> None:
        """Write the draft into the board. Empty drafts are committed as-is."""
        items = board.list_for(self.panel)
        if self.kind is EditKind.INSERT:
            items.insert(self.draft, at=self.index)
            return
        if not items.items:
            return
        items.selected = max(0, min(self.index, len(items.items) - 1))
        items.rename(self.draft)


def mode_of(edit: Optional[EditState]) -> Mode:
    return Mode.NAVIGATION if edit is None else edit.mode


__all__ = ["EditKind", "EditState", "Mode", "mode_of"]
