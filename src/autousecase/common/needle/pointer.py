from typing import Any


class SemanticPointer:
    """
    Attribute chain naming a message id: `L.generate.file.success` points at
    the "generate.file.success" template.
    """

    __slots__ = ("_parts",)

    def __init__(self, path: str = ""):
        self._parts = tuple(part for part in path.split(".") if part)

    def __getattr__(self, name: str) -> "SemanticPointer":
        if name.startswith("__"):
            raise AttributeError(name)
        return SemanticPointer(".".join(self._parts + (name,)))

    def __str__(self) -> str:
        return ".".join(self._parts)

    def __repr__(self) -> str:
        return f"L.{self}" if self._parts else "L"

    def __eq__(self, other: Any) -> bool:
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


L = SemanticPointer()
