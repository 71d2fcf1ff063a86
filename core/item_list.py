"""Ordered item list with a saturating selection cursor.

Pure domain logic: no I/O, no terminal. Every operation clamps out-of-range
requests instead of raising, so a key press can never be rejected.
"""

from typing import Iterable, Iterator, List, Optional


class ItemList:
    """Items of one panel plus the selected index (``None`` when empty)."""

    def __init__(self, items: Optional[Iterable[str]] = None, selected: Optional[int] = None):
        self.items: List[str] = list(items or [])
        self.selected: Optional[int] = None
        if self.items:
            self.selected = self._clamp(0 if selected is None else selected)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"ItemList(items={self.items!r}, selected={self.selected!r})"

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self.items) - 1))

    @property
    def current(self) -> Optional[str]:
        if self.selected is None:
            return None
        return self.items[self.selected]

    def move_selection(self, delta: int) -> None:
        if self.selected is None:
            return
        self.selected = self._clamp(self.selected + delta)

    def drag(self, delta: int) -> None:
        """Swap the selected item with its neighbour at ``selected + delta``."""
        if self.selected is None:
            return
        target = self.selected + delta
        if target < 0 or target >= len(self.items):
            return
        src = self.selected
        self.items[src], self.items[target] = self.items[target], self.items[src]
        self.selected = target

    def insert_position(self) -> int:
        """Index a new item lands on by default: right after the selection."""
        if self.selected is None:
            return 0
        return self.selected + 1

    def insert(self, text: str, at: Optional[int] = None) -> int:
        index = self.insert_position() if at is None else max(0, min(at, len(self.items)))
        self.items.insert(index, text)
        self.selected = index
        return index

    def append(self, text: str) -> int:
        self.items.append(text)
        if self.selected is None:
            self.selected = 0
        return len(self.items) - 1

    def rename(self, text: str) -> None:
        if self.selected is None:
            return
        self.items[self.selected] = text

    def delete(self) -> Optional[str]:
        if self.selected is None:
            return None
        removed = self.items.pop(self.selected)
        if not self.items:
            self.selected = None
        else:
            self.selected = min(self.selected, len(self.items) - 1)
        return removed

    def jump_start(self) -> None:
        if self.items:
            self.selected = 0

    def jump_end(self) -> None:
        if self.items:
            self.selected = len(self.items) - 1


__all__ = ["ItemList"]
