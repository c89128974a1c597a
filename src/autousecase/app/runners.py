from pathlib import Path
from typing import List, Sequence

from autousecase.common import L, TransactionManager, bus
from autousecase.emitter import use_case_name
from autousecase.spec import (
    GenerationMode,
    ImplRendererProtocol,
    ImportContext,
    MethodDescriptor,
    UnitRendererProtocol,
)


class GenerateRunner:
    def __init__(self, renderer: UnitRendererProtocol):
        self.renderer = renderer

    def run_batch(
        self,
        descriptors: Sequence[MethodDescriptor],
        repository_name: str,
        mode: GenerationMode,
        import_context: ImportContext,
        output_dir: Path,
        tm: TransactionManager,
    ) -> List[Path]:
        planned: List[Path] = []
        for descriptor in descriptors:
            bus.debug(
                L.generate.method.found,
                shape=descriptor.shape.value,
                name=descriptor.name,
                params=len(descriptor.parameters),
            )
            units = self.renderer.render_units(
                descriptor,
                use_case_name(descriptor.name),
                repository_name,
                mode,
                import_context,
            )
            for unit in units:
                target = output_dir / unit.file_name
                tm.add_write(target, unit.content)
                planned.append(target)
        return planned


class ImplRunner:
    def __init__(self, renderer: ImplRendererProtocol):
        self.renderer = renderer

    def run(
        self,
        descriptors: Sequence[MethodDescriptor],
        repository_name: str,
        data_source_name: str,
        import_context: ImportContext,
        output_dir: Path,
        tm: TransactionManager,
    ) -> Path:
        unit = self.renderer.render(
            descriptors, repository_name, data_source_name, import_context
        )
        target = output_dir / unit.file_name
        tm.add_write(target, unit.content)
        return target
