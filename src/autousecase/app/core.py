from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from autousecase.common import L, TransactionManager, bus
from autousecase.common.transaction import FileSystemAdapter
from autousecase.config import GeneratorConfig, load_config_from_path
from autousecase.emitter import (
    RepositoryImplGenerator,
    UseCaseGenerator,
    default_data_source_name,
)
from autousecase.scanner import (
    DartDeclarationParser,
    find_repository_name,
    repository_name_from_path,
)
from autousecase.spec import (
    DeclarationParserProtocol,
    GenerationMode,
    ImplRendererProtocol,
    ImportContext,
    MethodDescriptor,
    UnitRendererProtocol,
)
from .runners import GenerateRunner, ImplRunner


@dataclass
class GenerationResult:
    success: bool
    method_count: int = 0
    generated_files: List[Path] = field(default_factory=list)
    dry_run: bool = False


class AutoUseCaseApp:
    def __init__(
        self,
        root_path: Path,
        parser: Optional[DeclarationParserProtocol] = None,
        use_case_renderer: Optional[UnitRendererProtocol] = None,
        impl_renderer: Optional[ImplRendererProtocol] = None,
        fs: Optional[FileSystemAdapter] = None,
    ):
        self.root_path = root_path
        self.parser = parser or DartDeclarationParser()
        self.fs = fs
        self.generate_runner = GenerateRunner(use_case_renderer or UseCaseGenerator())
        self.impl_runner = ImplRunner(impl_renderer or RepositoryImplGenerator())

    def _resolve_file(self, path: Path) -> Path:
        return path if path.is_absolute() else self.root_path / path

    def _load_declaration(
        self, repository_file: Path
    ) -> Optional[Tuple[str, List[MethodDescriptor]]]:
        abs_path = self._resolve_file(repository_file)
        if not abs_path.is_file():
            bus.error(L.error.file_not_found, path=repository_file)
            return None
        try:
            source = abs_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            bus.error(L.error.read_failed, path=repository_file, error=e)
            return None
        return source, self.parser.parse(source)

    def _load_config(self, project_name: Optional[str]) -> GeneratorConfig:
        config = load_config_from_path(self.root_path)
        if project_name:
            config.project_name = project_name
            config.project_name_is_fallback = False
        elif config.project_name_is_fallback:
            bus.warning(L.generate.warning.project_fallback, name=config.project_name)
        return config

    def _import_context(
        self, repository_file: Path, config: GeneratorConfig
    ) -> ImportContext:
        abs_path = self._resolve_file(repository_file).resolve()
        declaration_path = repository_file.as_posix()
        base = config.root_path or self.root_path
        try:
            declaration_path = abs_path.relative_to(base.resolve()).as_posix()
        except ValueError:
            pass
        return ImportContext(
            project_name=config.project_name,
            declaration_path=declaration_path,
            library_root=config.library_root,
        )

    def _finish(self, tm: TransactionManager, dry_run: bool) -> List[Path]:
        if dry_run:
            for op in tm.preview():
                bus.info(L.generate.file.preview, op=op)
            bus.info(L.generate.run.dry_run)
            return []

        written = tm.commit()
        for path in written:
            bus.success(L.generate.file.success, path=self._display(path))
        return written

    def _display(self, path: Path) -> str:
        if not path.is_absolute():
            return path.as_posix()
        try:
            return path.relative_to(self.root_path.resolve()).as_posix()
        except ValueError:
            return str(path)

    def run_generate(
        self,
        repository_file: Path,
        output_dir: Optional[Path] = None,
        repository_name: Optional[str] = None,
        mode: Optional[GenerationMode] = None,
        project_name: Optional[str] = None,
        dry_run: bool = False,
    ) -> GenerationResult:
        bus.info(L.generate.run.start, path=repository_file)
        loaded = self._load_declaration(repository_file)
        if loaded is None:
            return GenerationResult(success=False)
        source, descriptors = loaded

        config = self._load_config(project_name)
        mode = mode or config.mode
        repository_name = (
            repository_name
            or find_repository_name(source)
            or repository_name_from_path(repository_file)
        )
        # The configured output is relative to the pubspec, not the cwd
        output_dir = output_dir or (config.root_path or self.root_path) / config.output

        bus.info(L.generate.run.repository, name=repository_name)
        bus.info(L.generate.run.project, name=config.project_name)
        bus.info(L.generate.run.mode, mode=mode.value.upper())
        bus.info(L.generate.run.output, path=self._display(output_dir))

        if not descriptors:
            bus.warning(L.generate.warning.no_methods, path=repository_file)
            return GenerationResult(success=True, dry_run=dry_run)

        tm = TransactionManager(self.root_path, fs=self.fs)
        self.generate_runner.run_batch(
            descriptors,
            repository_name,
            mode,
            self._import_context(repository_file, config),
            output_dir,
            tm,
        )
        file_count = tm.pending_count
        written = self._finish(tm, dry_run)

        bus.success(
            L.generate.run.complete, count=file_count, methods=len(descriptors)
        )
        return GenerationResult(
            success=True,
            method_count=len(descriptors),
            generated_files=written,
            dry_run=dry_run,
        )

    def run_impl(
        self,
        repository_file: Path,
        output_dir: Optional[Path] = None,
        repository_name: Optional[str] = None,
        data_source_name: Optional[str] = None,
        project_name: Optional[str] = None,
        dry_run: bool = False,
    ) -> GenerationResult:
        bus.info(L.impl.run.start, path=repository_file)
        loaded = self._load_declaration(repository_file)
        if loaded is None:
            return GenerationResult(success=False)
        source, descriptors = loaded

        config = self._load_config(project_name)
        repository_name = (
            repository_name
            or find_repository_name(source)
            or repository_name_from_path(repository_file)
        )
        data_source_name = data_source_name or default_data_source_name(
            repository_name
        )

        bus.info(L.generate.run.repository, name=repository_name)
        bus.info(L.impl.run.data_source, name=data_source_name)

        if not descriptors:
            bus.warning(L.generate.warning.no_methods, path=repository_file)
            return GenerationResult(success=True, dry_run=dry_run)

        tm = TransactionManager(self.root_path, fs=self.fs)
        target = self.impl_runner.run(
            descriptors,
            repository_name,
            data_source_name,
            self._import_context(repository_file, config),
            output_dir or repository_file.parent,
            tm,
        )
        written = self._finish(tm, dry_run)

        bus.success(
            L.impl.run.complete, methods=len(descriptors), path=target.as_posix()
        )
        return GenerationResult(
            success=True,
            method_count=len(descriptors),
            generated_files=written,
            dry_run=dry_run,
        )
