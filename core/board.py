"""Two-panel board: TODO and DONE lists plus the focused panel."""

from enum import Enum
from typing import Iterable, List, Optional

from .item_list import ItemList


class Panel(Enum):
    TODO = ("TODO", "[ ]")
    DONE = ("DONE", "[x]")

    @property
    def title(self) -> str:
        return self.value[0]

    @property
    def mark(self) -> str:
        return self.value[1]

    def other(self) -> "Panel":
        return Panel.DONE if self is Panel.TODO else Panel.TODO


class Board:
    """Owns both item lists and routes commands to the focused one.

    Switching focus never touches either list's selection: each panel keeps
    its own cursor for the whole session.
    """

    def __init__(
        self,
        todo: Optional[Iterable[str]] = None,
        done: Optional[Iterable[str]] = None,
        focused: Panel = Panel.TODO,
    ):
        self.todo = ItemList(todo)
        self.done = ItemList(done)
        self.focused = focused

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Board(todo={self.todo.items!r}, done={self.done.items!r}, focused={self.focused.name})"

    # -------------------- queries --------------------
    def list_for(self, panel: Panel) -> ItemList:
        return self.todo if panel is Panel.TODO else self.done

    @property
    def focused_list(self) -> ItemList:
        return self.list_for(self.focused)

    @property
    def other_list(self) -> ItemList:
        return self.list_for(self.focused.other())

    def total_items(self) -> int:
        return len(self.todo) + len(self.done)

    def same_items(self, other: "Board") -> bool:
        """Compare list membership and order, ignoring selection and focus."""
        return self.todo.items == other.todo.items and self.done.items == other.done.items

    def snapshot(self) -> List[List[str]]:
        return [list(self.todo.items), list(self.done.items)]

    # -------------------- cross-list --------------------
    def toggle_focus(self) -> None:
        self.focused = self.focused.other()

    def move_item_to_other_list(self) -> Optional[str]:
        """Move the selected item to the end of the other list.

        The moved item becomes selected in the destination; focus stays on the
        source panel.
        """
        text = self.focused_list.delete()
        if text is None:
            return None
        target = self.other_list
        target.selected = target.append(text)
        return text

    # -------------------- delegation to the focused list --------------------
    def move_selection(self, delta: int) -> None:
        self.focused_list.move_selection(delta)

    def drag(self, delta: int) -> None:
        self.focused_list.drag(delta)

    def insert(self, text: str, at: Optional[int] = None) -> int:
        return self.focused_list.insert(text, at)

    def rename(self, text: str) -> None:
        self.focused_list.rename(text)

    def delete(self) -> Optional[str]:
        return self.focused_list.delete()

    def jump_start(self) -> None:
        self.focused_list.jump_start()

    def jump_end(self) -> None:
        self.focused_list.jump_end()


__all__ = ["Board", "Panel"]
