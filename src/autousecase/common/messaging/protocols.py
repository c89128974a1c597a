from typing import Protocol


class Renderer(Protocol):
    """Receives fully formatted bus messages and shows them somewhere."""

    def render(self, message: str, level: str) -> None:
        """`level` is one of debug, info, success, warning or error."""
        ...
