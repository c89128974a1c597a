from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Union


class FileSystemAdapter(Protocol):
    def write_text(self, path: Path, content: str) -> None: ...
    def exists(self, path: Path) -> bool: ...
    def read_text(self, path: Path) -> str: ...


class RealFileSystem:
    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")


class WriteAction(str, Enum):
    CREATE = "CREATE"
    OVERWRITE = "OVERWRITE"
    UNCHANGED = "UNCHANGED"


@dataclass
class WriteFileOp:
    path: Path
    content: str

    def action(self, fs: FileSystemAdapter, root: Path) -> WriteAction:
        target = root / self.path
        if not fs.exists(target):
            return WriteAction.CREATE
        if fs.read_text(target) == self.content:
            return WriteAction.UNCHANGED
        return WriteAction.OVERWRITE

    def describe(self, action: WriteAction) -> str:
        return f"[{action.value}] {self.path.as_posix()}"


class TransactionManager:
    """
    Plans generated files and writes them in one pass on commit.

    Planning the same path twice keeps the last content. Files whose content
    is already on disk are left untouched.
    """

    def __init__(self, root_path: Path, fs: Optional[FileSystemAdapter] = None):
        self.root_path = root_path
        self.fs = fs or RealFileSystem()
        self._ops: Dict[Path, WriteFileOp] = {}

    def add_write(self, path: Union[str, Path], content: str) -> None:
        op = WriteFileOp(Path(path), content)
        self._ops[op.path] = op

    def preview(self) -> List[str]:
        return [
            op.describe(op.action(self.fs, self.root_path))
            for op in self._ops.values()
        ]

    def commit(self) -> List[Path]:
        written: List[Path] = []
        for op in self._ops.values():
            if op.action(self.fs, self.root_path) == WriteAction.UNCHANGED:
                continue
            self.fs.write_text(self.root_path / op.path, op.content)
            written.append(self.root_path / op.path)
        self._ops.clear()
        return written

    @property
    def pending_count(self) -> int:
        return len(self._ops)
