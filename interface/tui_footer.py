"""Footer line: transient status message or key hints for the current mode."""

from typing import Dict, List, Tuple

from core import Mode
from util.display import Line, fit_line

HINTS: Dict[Mode, List[Tuple[str, str]]] = {
    Mode.NAVIGATION: [
        ("↑↓", "move"),
        ("J/K", "drag"),
        ("g/G", "top/bottom"),
        ("Tab", "panel"),
        ("i", "insert"),
        ("r", "rename"),
        ("d", "delete"),
        ("Enter", "move to other list"),
        ("q", "quit"),
    ],
    Mode.INSERT: [("Enter", "add"), ("Esc", "cancel"), ("←→", "cursor"), ("Bksp/Del", "erase")],
    Mode.RENAME: [("Enter", "save"), ("Esc", "cancel"), ("←→", "cursor"), ("Bksp/Del", "erase")],
}


def build_footer_line(mode: Mode, status: str, width: int) -> Line:
    if status:
        return fit_line([("class:status", f" {status}")], width, "class:status")
    parts: Line = []
    for key, label in HINTS[mode]:
        parts.append(("class:footer.key", f" {key}"))
        parts.append(("class:footer", f" {label} "))
    return fit_line(parts, width, "class:footer")


__all__ = ["HINTS", "build_footer_line"]
