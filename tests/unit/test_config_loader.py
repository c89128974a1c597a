from pathlib import Path

import pytest

from autousecase.config import load_config_from_path
from autousecase.spec import GenerationMode
from autousecase.test_utils import WorkspaceFactory


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    return (
        WorkspaceFactory(tmp_path)
        .with_project_name("shop_app")
        .with_config(
            {"mode": "pro", "output": "lib/app/usecases", "library_root": "lib"}
        )
        .with_source("lib/features/cart/cart_repository.dart", "")
        .build()
    )


def test_load_config_reads_pubspec(workspace: Path):
    config = load_config_from_path(workspace)

    assert config.project_name == "shop_app"
    assert config.project_name_is_fallback is False
    assert config.mode == GenerationMode.PRO
    assert config.output == "lib/app/usecases"
    assert config.library_root == "lib"
    assert config.root_path == workspace.resolve()


def test_load_config_walks_up_from_subdirectory(workspace: Path):
    config = load_config_from_path(workspace / "lib" / "features" / "cart")

    assert config.project_name == "shop_app"
    assert config.root_path == workspace.resolve()


def test_missing_pubspec_uses_fallback(tmp_path: Path):
    config = load_config_from_path(tmp_path, fallback_project_name="fallback_app")

    assert config.project_name == "fallback_app"
    assert config.project_name_is_fallback is True
    assert config.mode == GenerationMode.SIMPLE
    assert config.output == "lib/domain/usecases"
    assert config.root_path is None


def test_unparsable_pubspec_uses_fallback(tmp_path: Path, caplog):
    (tmp_path / "pubspec.yaml").write_text("name: [unclosed\n", encoding="utf-8")

    config = load_config_from_path(tmp_path)

    assert config.project_name == "app"
    assert config.project_name_is_fallback is True
    assert config.root_path == tmp_path.resolve()
    assert "Could not process" in caplog.text


def test_pubspec_without_name_uses_fallback(tmp_path: Path):
    (tmp_path / "pubspec.yaml").write_text(
        "description: no name here\n", encoding="utf-8"
    )

    config = load_config_from_path(tmp_path, fallback_project_name="demo")

    assert config.project_name == "demo"
    assert config.project_name_is_fallback is True


def test_unknown_mode_falls_back_to_simple(tmp_path: Path):
    WorkspaceFactory(tmp_path).with_project_name("x").with_config(
        {"mode": "turbo"}
    ).build()

    config = load_config_from_path(tmp_path)

    assert config.project_name == "x"
    assert config.mode == GenerationMode.SIMPLE


def test_professional_is_accepted_as_pro_mode(tmp_path: Path):
    WorkspaceFactory(tmp_path).with_project_name("x").with_config(
        {"mode": "Professional"}
    ).build()

    config = load_config_from_path(tmp_path)

    assert config.mode == GenerationMode.PRO
