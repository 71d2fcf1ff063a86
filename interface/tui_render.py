"""Immediate-mode frame renderer.

``render_frame`` turns (board, edit state, terminal size) into prompt_toolkit
formatted text. Nothing is cached between calls: each frame is rebuilt from
the current model, including the scroll position of each panel.
"""

from typing import List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import Board, EditKind, EditState, Panel, mode_of
from interface.tui_footer import build_footer_line
from util.display import Fragment, Line, char_width, display_width, fit_line
from util.responsive import BoardLayout, board_layout

EMPTY_LABEL = "(empty)"
PANEL_HEADER_ROWS = 2


def _item_prefix(panel: Panel) -> str:
    return f"- {panel.mark} "


def _header_line(board: Board, panel: Panel, width: int) -> Line:
    count = len(board.list_for(panel))
    if board.focused is panel:
        return fit_line([("class:header.focused", f"[{panel.title}]"), ("class:text.dim", f" {count}")], width)
    return fit_line([("class:header", f" {panel.title} "), ("class:text.dim", f" {count}")], width)


def _draft_fragments(edit: EditState, prefix: str, width: int) -> Line:
    """Draft text with the cursor cell highlighted, scrolled to keep it visible."""
    available = max(1, width - display_width(prefix))
    draft = edit.draft
    cursor = edit.cursor
    start = 0
    cursor_char = draft[cursor] if cursor < len(draft) else " "
    while start < cursor and display_width(draft[start:cursor]) + char_width(cursor_char) > available:
        start += 1
    before = draft[start:cursor]
    after = draft[cursor + 1 :] if cursor < len(draft) else ""
    line: Line = [("class:edit", prefix), ("class:edit", before), ("class:cursor", cursor_char), ("class:edit", after)]
    return fit_line(line, width, "class:edit")


def _rows(board: Board, panel: Panel, edit: Optional[EditState], width: int) -> Tuple[List[Line], Optional[int]]:
    """Item rows for one panel plus the index of the row to keep in view."""
    items = board.list_for(panel)
    focused = board.focused is panel
    prefix = _item_prefix(panel)
    editing_here = edit is not None and edit.panel is panel
    inserting_here = editing_here and edit.kind is EditKind.INSERT
    rows: List[Line] = []
    active: Optional[int] = items.selected

    for index, text in enumerate(items):
        if editing_here and edit.kind is EditKind.RENAME and index == edit.index:
            rows.append(_draft_fragments(edit, prefix, width))
            continue
        if index == items.selected and not inserting_here:
            style = "class:selected" if focused else "class:selected.inactive"
        else:
            style = "class:item.done" if panel is Panel.DONE else "class:item.todo"
        rows.append(fit_line([(style, prefix + text)], width, style))

    if inserting_here:
        at = max(0, min(edit.index, len(rows)))
        rows.insert(at, _draft_fragments(edit, prefix, width))
        active = at
    elif editing_here:
        active = edit.index

    if not rows:
        rows.append(fit_line([("class:text.dim", EMPTY_LABEL)], width))
        active = None
    return rows, active


def render_panel(board: Board, panel: Panel, edit: Optional[EditState], width: int, height: int) -> List[Line]:
    """Exactly ``height`` lines of exactly ``width`` cells for one panel."""
    if height <= 0:
        return []
    lines: List[Line] = [_header_line(board, panel, width), [("class:border", "─" * max(0, width))]]
    rows, active = _rows(board, panel, edit, width)
    visible = max(0, height - PANEL_HEADER_ROWS)
    offset = 0
    if active is not None and visible > 0:
        offset = max(0, active - visible + 1)
    lines.extend(rows[offset : offset + visible])
    while len(lines) < height:
        lines.append([("", " " * max(0, width))])
    return lines[:height]


def _body_lines(board: Board, edit: Optional[EditState], layout: BoardLayout, width: int) -> List[Line]:
    todo = render_panel(board, Panel.TODO, edit, layout.todo.width, layout.todo.height)
    done = render_panel(board, Panel.DONE, edit, layout.done.width, layout.done.height)
    if layout.side_by_side:
        return [left + [("class:border", "│")] + right for left, right in zip(todo, done)]
    return todo + [[("class:border", "─" * width)]] + done


def render_lines(
    board: Board,
    edit: Optional[EditState],
    width: int,
    height: int,
    status: str = "",
) -> List[Line]:
    """Frame as a list of fragment lines (``height`` lines, ``width`` cells each)."""
    if width <= 0 or height <= 0:
        return []
    layout = board_layout(width, height)
    body = _body_lines(board, edit, layout, width)[: layout.body_height]
    while len(body) < layout.body_height:
        body.append([("", " " * width)])
    footer = [build_footer_line(mode_of(edit), status, width)] if layout.footer_height else []
    return body + footer


def render_frame(
    board: Board,
    edit: Optional[EditState],
    width: int,
    height: int,
    status: str = "",
) -> FormattedText:
    fragments: List[Fragment] = []
    for idx, line in enumerate(render_lines(board, edit, width, height, status)):
        if idx:
            fragments.append(("", "\n"))
        fragments.extend(line)
    return FormattedText(fragments)


def fragments_to_lines(fragments: List[Fragment]) -> List[str]:
    """Plain text of a rendered frame, one string per screen row."""
    return "".join(text for _, text in fragments).split("\n")


__all__ = ["EMPTY_LABEL", "fragments_to_lines", "render_frame", "render_lines", "render_panel"]
