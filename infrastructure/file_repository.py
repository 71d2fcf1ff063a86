import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from core import Board, SaveError
from application.ports import BoardRepository
from infrastructure.board_file_parser import BoardFileParser

logger = logging.getLogger("todo_board.persistence")


class FileBoardRepository(BoardRepository):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> Board:
        """Load the board; a missing file yields an empty board."""
        if not self.path.exists():
            logger.info("Board file %s not found, starting empty", self.path)
            return Board()
        content = self.path.read_text(encoding="utf-8-sig")
        return BoardFileParser.parse(content, self.path)

    def save(self, board: Board) -> None:
        """Rewrite the file atomically: temp file in the same dir, then replace."""
        data = BoardFileParser.serialize(board)
        target = self.path.resolve()
        tmp_path: Optional[Path] = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="\n",
                delete=False,
                dir=str(target.parent),
                prefix=f".{target.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(str(tmp_path), str(target))
        except (OSError, ValueError) as exc:
            raise SaveError(self.path, exc) from exc
        finally:
            if tmp_path and tmp_path.exists() and tmp_path != target:
                try:
                    tmp_path.unlink()
                except OSError:
                    pass
