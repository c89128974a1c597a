from pathlib import Path

from autousecase.app import AutoUseCaseApp
from autousecase.common import needle
from autousecase.emitter import RepositoryImplGenerator, UseCaseGenerator
from autousecase.scanner import DartDeclarationParser


def get_project_root() -> Path:
    return Path.cwd()


def make_app() -> AutoUseCaseApp:
    root = get_project_root()
    # Messages in <root>/.autousecase/needle/<lang>/ override the shipped ones
    needle.add_root(root)
    return AutoUseCaseApp(
        root_path=root,
        parser=DartDeclarationParser(),
        use_case_renderer=UseCaseGenerator(),
        impl_renderer=RepositoryImplGenerator(),
    )
