import re
from pathlib import Path
from typing import Optional, Union

from .parser import strip_comments

_REPOSITORY_CLASS_PATTERN = re.compile(
    r"class\s+(\w+Repository)\s*(?:<[^>]*>)?\s*(?:extends|implements|\{)"
)


def find_repository_name(source_text: str) -> Optional[str]:
    match = _REPOSITORY_CLASS_PATTERN.search(strip_comments(source_text))
    return match.group(1) if match else None


def repository_name_from_path(path: Union[str, Path]) -> str:
    # e.g. lib/feature/test_repository.dart -> TestRepository
    stem = Path(path).stem
    return "".join(part[:1].upper() + part[1:] for part in stem.split("_") if part)
