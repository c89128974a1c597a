import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

log = logging.getLogger(__name__)


class FileHandler(Protocol):
    suffixes: Tuple[str, ...]

    def load(self, path: Path) -> Any: ...


class JsonHandler:
    suffixes = (".json",)

    def load(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)


def flatten_catalog(data: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Nested sections become dotted ids: {"a": {"b": "x"}} -> {"a.b": "x"}."""
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_catalog(value, full_key))
        else:
            flat[full_key] = str(value)
    return flat


class Loader:
    def __init__(self, handlers: Optional[List[FileHandler]] = None):
        self._handlers: Dict[str, FileHandler] = {}
        for handler in handlers or [JsonHandler()]:
            for suffix in handler.suffixes:
                self._handlers[suffix] = handler

    def load_file(self, path: Path) -> Dict[str, str]:
        handler = self._handlers.get(path.suffix.lower())
        if handler is None:
            return {}

        try:
            data = handler.load(path)
        except (OSError, ValueError) as e:
            log.warning(f"Ignoring malformed message catalog {path}: {e}")
            return {}

        if not isinstance(data, Mapping):
            log.warning(f"Ignoring message catalog {path}: expected an object")
            return {}
        return flatten_catalog(data)

    def load_directory(self, directory: Path) -> Dict[str, str]:
        # Files merge in path order, so later files override earlier ones.
        messages: Dict[str, str] = {}
        if directory.is_dir():
            for path in sorted(directory.rglob("*")):
                if path.is_file():
                    messages.update(self.load_file(path))
        return messages
