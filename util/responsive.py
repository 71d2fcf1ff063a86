from dataclasses import dataclass

SIDE_BY_SIDE_MIN_WIDTH = 40
FOOTER_HEIGHT = 1


@dataclass(frozen=True)
class PanelBox:
    """Cell rectangle reserved for one panel."""
    width: int
    height: int


@dataclass(frozen=True)
class BoardLayout:
    """Panel geometry for a single frame."""
    side_by_side: bool
    todo: PanelBox
    done: PanelBox
    body_height: int
    footer_height: int

    @property
    def separator_width(self) -> int:
        return 1 if self.side_by_side else 0


def board_layout(term_width: int, term_height: int, footer_height: int = FOOTER_HEIGHT) -> BoardLayout:
    """Split the terminal into TODO/DONE panels plus the footer.

    Wide terminals put the panels next to each other with a one-cell divider;
    narrow ones stack TODO above DONE with a one-row rule between them.
    """
    width = max(0, term_width)
    height = max(0, term_height)
    footer = min(footer_height, height)
    body = height - footer

    if width >= SIDE_BY_SIDE_MIN_WIDTH:
        left = (width - 1) // 2
        right = width - 1 - left
        return BoardLayout(True, PanelBox(left, body), PanelBox(right, body), body, footer)

    top = body // 2
    bottom = max(0, body - top - 1)
    return BoardLayout(False, PanelBox(width, top), PanelBox(width, bottom), body, footer)


__all__ = ["BoardLayout", "PanelBox", "SIDE_BY_SIDE_MIN_WIDTH", "FOOTER_HEIGHT", "board_layout"]
