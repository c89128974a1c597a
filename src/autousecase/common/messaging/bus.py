from typing import Any, Optional, Union

from autousecase.common.needle import Needle, SemanticPointer, needle
from .protocols import Renderer

MessageId = Union[str, SemanticPointer]


class MessageBus:
    """
    Routes user-facing messages by id to the installed renderer.

    Without a renderer (library use, most tests) messages are dropped.
    """

    def __init__(self, catalog: Optional[Needle] = None):
        self._renderer: Optional[Renderer] = None
        self._catalog = catalog or needle

    def set_renderer(self, renderer: Optional[Renderer]):
        self._renderer = renderer

    def format(self, msg_id: MessageId, **kwargs: Any) -> str:
        template = self._catalog.get(msg_id)
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError):
            return f"<formatting_error for '{msg_id}'>"

    def _render(self, level: str, msg_id: MessageId, **kwargs: Any) -> None:
        if self._renderer is not None:
            self._renderer.render(self.format(msg_id, **kwargs), level)

    def debug(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("debug", msg_id, **kwargs)

    def info(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("info", msg_id, **kwargs)

    def success(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("success", msg_id, **kwargs)

    def warning(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("warning", msg_id, **kwargs)

    def error(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("error", msg_id, **kwargs)


bus = MessageBus()
