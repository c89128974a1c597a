from .pointer import L, SemanticPointer
from .runtime import ASSETS_ROOT, Needle, needle
from .loader import FileHandler, JsonHandler, Loader, flatten_catalog

__all__ = [
    "L",
    "SemanticPointer",
    "Needle",
    "needle",
    "ASSETS_ROOT",
    "Loader",
    "FileHandler",
    "JsonHandler",
    "flatten_catalog",
]
