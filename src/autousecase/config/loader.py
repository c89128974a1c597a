import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from autousecase.spec import GenerationMode

log = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "app"
DEFAULT_OUTPUT = "lib/domain/usecases"
CONFIG_SECTION = "auto_use_case"

MODE_ALIASES = {"professional": GenerationMode.PRO}


@dataclass
class GeneratorConfig:
    project_name: str = DEFAULT_PROJECT_NAME
    project_name_is_fallback: bool = True
    mode: GenerationMode = GenerationMode.SIMPLE
    output: str = DEFAULT_OUTPUT
    library_root: str = "lib"
    root_path: Optional[Path] = None


def _find_pubspec(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while True:
        pubspec_path = current_dir / "pubspec.yaml"
        if pubspec_path.is_file():
            return pubspec_path
        if current_dir.parent == current_dir:
            break
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pubspec.yaml in any parent directory.")


def _parse_mode(value: Any) -> GenerationMode:
    name = str(value).strip().lower()
    if name in MODE_ALIASES:
        return MODE_ALIASES[name]
    try:
        return GenerationMode(name)
    except ValueError:
        log.warning(f"Unknown generation mode {value!r}, using 'simple'.")
        return GenerationMode.SIMPLE


def load_config_from_path(
    search_path: Path, fallback_project_name: str = DEFAULT_PROJECT_NAME
) -> GeneratorConfig:
    try:
        pubspec_path = _find_pubspec(search_path)
    except FileNotFoundError:
        return GeneratorConfig(project_name=fallback_project_name)

    try:
        with open(pubspec_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        log.warning(f"Could not process {pubspec_path}: {e}")
        return GeneratorConfig(
            project_name=fallback_project_name, root_path=pubspec_path.parent
        )

    if not isinstance(data, dict):
        data = {}

    name = data.get("name")
    section: Dict[str, Any] = data.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        section = {}

    has_name = isinstance(name, str) and bool(name.strip())
    return GeneratorConfig(
        project_name=name.strip() if has_name else fallback_project_name,
        project_name_is_fallback=not has_name,
        mode=_parse_mode(section.get("mode", GenerationMode.SIMPLE.value)),
        output=str(section.get("output", DEFAULT_OUTPUT)),
        library_root=str(section.get("library_root", "lib")),
        root_path=pubspec_path.parent,
    )
