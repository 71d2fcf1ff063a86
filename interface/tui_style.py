#!/usr/bin/env python3
"""Board palette and prompt_toolkit style."""

from typing import Dict

from prompt_toolkit.styles import Style


PALETTE: Dict[str, str] = {
    "": "#d7dfe6",  # no forced background
    "text.dim": "#97a0a9",
    "item.todo": "#d7dfe6",
    "item.done": "#8d95a0",
    "selected": "bg:#d7dfe6 #1c1f24 bold",
    "selected.inactive": "bg:#3b3b3b #d7dfe6",
    "header": "#97a0a9",
    "header.focused": "#ffb347 bold",
    "border": "#4b525a",
    "edit": "bg:#2a2e35 #e8eaec",
    "cursor": "reverse",
    "footer": "#6d717a",
    "footer.key": "#ffb347",
    "status": "#e5c07b bold",
}


def get_palette() -> Dict[str, str]:
    return dict(PALETTE)


def build_style() -> Style:
    return Style.from_dict(get_palette())


__all__ = ["PALETTE", "build_style", "get_palette"]
