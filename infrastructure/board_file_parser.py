"""Line-oriented board file format.

    [TODO]
    first todo
    [DONE]
    finished thing

Every line between markers is one item's literal text. Items that would read
back as a marker, or that start with the escape character, get one extra
leading backslash on disk.
"""

from pathlib import Path
from typing import List, Union

from core import Board, MalformedFileError

TODO_MARKER = "[TODO]"
DONE_MARKER = "[DONE]"
ESCAPE = "\\"
MARKERS = (TODO_MARKER, DONE_MARKER)


class BoardFileParser:
    @staticmethod
    def escape(text: str) -> str:
        if text in MARKERS or text.startswith(ESCAPE):
            return ESCAPE + text
        return text

    @staticmethod
    def unescape(line: str) -> str:
        if line.startswith(ESCAPE):
            return line[1:]
        return line

    @staticmethod
    def _split_lines(content: str) -> List[str]:
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]

    @classmethod
    def parse(cls, content: str, path: Union[str, Path] = "<board>") -> Board:
        """Build a Board from file content; an empty file is an empty board."""
        if content == "":
            return Board()
        lines = cls._split_lines(content)
        if not lines or lines[0] != TODO_MARKER:
            raise MalformedFileError(path, 1, f"expected {TODO_MARKER} on the first line")

        todo: List[str] = []
        done: List[str] = []
        target = todo
        for number, line in enumerate(lines[1:], start=2):
            if line == TODO_MARKER:
                raise MalformedFileError(path, number, f"duplicate {TODO_MARKER} marker")
            if line == DONE_MARKER:
                if target is done:
                    raise MalformedFileError(path, number, f"duplicate {DONE_MARKER} marker")
                target = done
                continue
            target.append(cls.unescape(line))

        if target is not done:
            raise MalformedFileError(path, len(lines) + 1, f"missing {DONE_MARKER} marker")
        return Board(todo, done)

    @classmethod
    def serialize(cls, board: Board) -> str:
        out = [TODO_MARKER]
        out.extend(cls.escape(item) for item in board.todo)
        out.append(DONE_MARKER)
        out.extend(cls.escape(item) for item in board.done)
        return "\n".join(out) + "\n"


__all__ = ["BoardFileParser", "TODO_MARKER", "DONE_MARKER"]
