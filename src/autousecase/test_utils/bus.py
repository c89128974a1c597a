from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import autousecase.common
from autousecase.common.messaging import MessageId


class SpyBus:
    """
    Records what the application sends through `autousecase.common.bus`.

    The singleton is patched in place since modules hold on to it through
    `from autousecase.common import bus`.
    """

    def __init__(self):
        self._messages: List[Dict[str, Any]] = []

    def _record(self, level: str, msg_id: MessageId, **kwargs: Any) -> None:
        self._messages.append({"level": level, "id": str(msg_id), "params": kwargs})

    @contextmanager
    def patch(self, monkeypatch: Any) -> Iterator["SpyBus"]:
        real_bus = autousecase.common.bus
        monkeypatch.setattr(real_bus, "_render", self._record)
        # Restored afterwards even if the CLI installs its own renderer
        monkeypatch.setattr(real_bus, "_renderer", None)
        yield self

    def get_messages(self) -> List[Dict[str, Any]]:
        return list(self._messages)

    def ids(self, level: Optional[str] = None) -> List[str]:
        return [
            m["id"] for m in self._messages if level is None or m["level"] == level
        ]

    def assert_id_called(self, msg_id: MessageId, level: Optional[str] = None):
        if str(msg_id) not in self.ids(level):
            at_level = f" at level '{level}'" if level else ""
            raise AssertionError(
                f"Message with ID '{msg_id}' was not sent{at_level}.\n"
                f"Captured IDs: {self.ids()}"
            )

    def assert_id_not_called(self, msg_id: MessageId):
        if str(msg_id) in self.ids():
            raise AssertionError(f"Message with ID '{msg_id}' was unexpectedly sent.")
