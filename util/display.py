"""Terminal cell-width helpers shared by the renderer and footer."""

from typing import List, Tuple

from prompt_toolkit.layout.screen import Char
from wcwidth import wcwidth

Fragment = Tuple[str, str]
Line = List[Fragment]


def char_width(ch: str) -> int:
    # Control characters are drawn as ^I, <9f> etc.
    shown = Char.display_mappings.get(ch)
    if shown is not None:
        return len(shown)
    return max(0, wcwidth(ch))


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def trim_display(text: str, width: int) -> str:
    """Cut ``text`` so it occupies at most ``width`` terminal cells."""
    if width <= 0:
        return ""
    used = 0
    out = []
    for ch in text:
        w = char_width(ch)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out)


def line_width(line: Line) -> int:
    return sum(display_width(text) for _, text in line)


def fit_line(line: Line, width: int, fill_style: str = "") -> Line:
    """Trim/pad fragments to exactly ``width`` cells."""
    out: Line = []
    remaining = width
    for style, text in line:
        piece = trim_display(text, remaining)
        if piece:
            out.append((style, piece))
            remaining -= display_width(piece)
        if piece != text:
            break
    if remaining > 0:
        out.append((fill_style, " " * remaining))
    return out


__all__ = ["Fragment", "Line", "char_width", "display_width", "fit_line", "line_width", "trim_display"]
