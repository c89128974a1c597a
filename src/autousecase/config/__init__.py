from .loader import (
    DEFAULT_OUTPUT,
    DEFAULT_PROJECT_NAME,
    GeneratorConfig,
    load_config_from_path,
)

__all__ = [
    "GeneratorConfig",
    "load_config_from_path",
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_OUTPUT",
]
