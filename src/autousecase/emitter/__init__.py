from .naming import (
    camel_case,
    file_name_for,
    package_import_path,
    params_name,
    pascal_case,
    snake_case,
    use_case_name,
)
from .use_case import UseCaseGenerator, render_units
from .repository_impl import RepositoryImplGenerator, default_data_source_name

__all__ = [
    "UseCaseGenerator",
    "RepositoryImplGenerator",
    "render_units",
    "default_data_source_name",
    "camel_case",
    "file_name_for",
    "package_import_path",
    "params_name",
    "pascal_case",
    "snake_case",
    "use_case_name",
]
