import pytest
from autousecase.common import needle
from autousecase.test_utils.workspace import WorkspaceFactory


@pytest.fixture(autouse=True)
def isolated_message_catalog(monkeypatch):
    # `make_app` adds the working directory as a catalog root
    monkeypatch.setattr(needle, "roots", list(needle.roots))
    monkeypatch.setattr(needle, "_catalogs", {})


@pytest.fixture
def workspace_factory(tmp_path, monkeypatch):
    # The CLI resolves paths against the working directory
    monkeypatch.chdir(tmp_path)
    return WorkspaceFactory(tmp_path)
