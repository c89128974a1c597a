import re
from pathlib import PurePosixPath, PureWindowsPath

from autousecase.spec import ImportContext

USE_CASE_SUFFIX = "UseCase"
PARAMS_SUFFIX = "Params"

_LOWER_UPPER_BOUNDARY = re.compile(r"(?<=[a-z])([A-Z])")


def pascal_case(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def camel_case(text: str) -> str:
    if not text:
        return text
    return text[0].lower() + text[1:]


def snake_case(text: str) -> str:
    return _LOWER_UPPER_BOUNDARY.sub(r"_\1", text).lower()


def use_case_name(method_name: str) -> str:
    return f"{pascal_case(method_name)}{USE_CASE_SUFFIX}"


def params_name(type_name: str) -> str:
    return f"{type_name}{PARAMS_SUFFIX}"


def file_name_for(type_name: str, extension: str = ".dart") -> str:
    return f"{snake_case(type_name)}{extension}"


def package_import_path(ctx: ImportContext) -> str:
    """
    Turns the declaration path into a `package:` import.

    Everything up to and including the first library root segment is dropped:
    `lib/feature/user_repository.dart` becomes
    `package:<project>/feature/user_repository.dart`.
    """
    parts = PurePosixPath(PureWindowsPath(ctx.declaration_path).as_posix()).parts
    if ctx.library_root in parts:
        parts = parts[parts.index(ctx.library_root) + 1 :]
    relative = "/".join(p for p in parts if p not in ("/", "."))

    if not relative.endswith(ctx.extension):
        relative = f"{relative}{ctx.extension}"
    return f"package:{ctx.project_name}/{relative}"
