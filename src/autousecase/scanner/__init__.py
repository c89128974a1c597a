from .parser import (
    DartDeclarationParser,
    extract_descriptors,
    parse_declaration_line,
    parse_parameters,
    split_top_level,
    strip_comments,
)
from .inspector import find_repository_name, repository_name_from_path

__all__ = [
    "DartDeclarationParser",
    "extract_descriptors",
    "parse_declaration_line",
    "parse_parameters",
    "split_top_level",
    "strip_comments",
    "find_repository_name",
    "repository_name_from_path",
]
