from .core import AutoUseCaseApp, GenerationResult
from .runners import GenerateRunner, ImplRunner

__all__ = ["AutoUseCaseApp", "GenerationResult", "GenerateRunner", "ImplRunner"]
