from pathlib import Path
from textwrap import dedent
from typing import Any, Dict, List

import yaml


class WorkspaceFactory:
    """Builds a throwaway Flutter-style project tree for tests."""

    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._pubspec_data: Dict[str, Any] = {}

    def with_project_name(self, name: str) -> "WorkspaceFactory":
        self._pubspec_data["name"] = name
        return self

    def with_config(self, generator_config: Dict[str, Any]) -> "WorkspaceFactory":
        self._pubspec_data["auto_use_case"] = generator_config
        return self

    def with_source(self, path: str, content: str) -> "WorkspaceFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def build(self) -> Path:
        if self._pubspec_data:
            self._files_to_create.append(
                {
                    "path": "pubspec.yaml",
                    "content": self._pubspec_data,
                    "format": "yaml",
                }
            )

        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)

            content = file_spec["content"]
            if file_spec["format"] == "yaml":
                content = yaml.dump(content, indent=2)
            output_path.write_text(content, encoding="utf-8")

        return self.root_path
