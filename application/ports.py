from pathlib import Path
from typing import Protocol

from core import Board


class BoardRepository(Protocol):
    path: Path

    def load(self) -> Board:
        ...

    def save(self, board: Board) -> None:
        ...
