from typing import List

from autousecase.spec import (
    GenerationMode,
    ImportContext,
    MethodDescriptor,
    RenderedUnit,
    ReturnShape,
)
from .naming import camel_case, file_name_for, package_import_path, params_name
from .signature import render_arguments, render_parameter_list, render_return_type

DARTZ_IMPORT = "package:dartz/dartz.dart"
EQUATABLE_IMPORT = "package:equatable/equatable.dart"


class UseCaseGenerator:
    def __init__(self, indent_spaces: int = 2):
        self._indent_str = " " * indent_spaces

    def render_units(
        self,
        descriptor: MethodDescriptor,
        use_case_name: str,
        repository_name: str,
        mode: GenerationMode,
        import_context: ImportContext,
    ) -> List[RenderedUnit]:
        if mode == GenerationMode.PRO:
            holder_name = params_name(use_case_name)
            return [
                RenderedUnit(
                    file_name=file_name_for(use_case_name),
                    content=self._generate_pro_use_case(
                        descriptor,
                        use_case_name,
                        holder_name,
                        repository_name,
                        import_context,
                    ),
                ),
                RenderedUnit(
                    file_name=file_name_for(holder_name),
                    content=self._generate_params(
                        descriptor, holder_name, import_context
                    ),
                ),
            ]

        return [
            RenderedUnit(
                file_name=file_name_for(use_case_name),
                content=self._generate_simple_use_case(
                    descriptor, use_case_name, repository_name, import_context
                ),
            )
        ]

    def _indent(self, level: int) -> str:
        return self._indent_str * level

    def _format_imports(self, imports: List[str]) -> List[str]:
        lines = [f"import '{imp}';" for imp in imports if imp.startswith("package:")]
        relative = [f"import '{imp}';" for imp in imports if not imp.startswith("package:")]
        if relative:
            lines.append("")
            lines.extend(relative)
        return lines

    def _wrapper_imports(
        self, descriptor: MethodDescriptor, ctx: ImportContext, pro: bool
    ) -> List[str]:
        imports = []
        if descriptor.shape == ReturnShape.ERROR_UNION_FUTURE:
            imports.append(DARTZ_IMPORT)
            imports.append(f"package:{ctx.project_name}/core/errors/failures.dart")
        if pro:
            imports.append(f"package:{ctx.project_name}/core/usecases/usecase.dart")
        imports.append(package_import_path(ctx))
        return imports

    def _generate_collaborator(
        self, use_case_name: str, repository_name: str
    ) -> List[str]:
        field_name = camel_case(repository_name)
        return [
            f"{self._indent(1)}final {repository_name} {field_name};",
            "",
            f"{self._indent(1)}{use_case_name}(this.{field_name});",
            "",
        ]

    def _generate_simple_use_case(
        self,
        descriptor: MethodDescriptor,
        use_case_name: str,
        repository_name: str,
        ctx: ImportContext,
    ) -> str:
        collaborator = camel_case(repository_name)
        params = render_parameter_list(descriptor.parameters)
        args = render_arguments(descriptor.parameters)

        lines = self._format_imports(self._wrapper_imports(descriptor, ctx, pro=False))
        lines.append("")
        lines.append(f"class {use_case_name} {{")
        lines.extend(self._generate_collaborator(use_case_name, repository_name))
        lines.append(
            f"{self._indent(1)}{render_return_type(descriptor)} call({params}) {{"
        )
        lines.append(
            f"{self._indent(2)}return {collaborator}.{descriptor.name}({args});"
        )
        lines.append(f"{self._indent(1)}}}")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _generate_pro_use_case(
        self,
        descriptor: MethodDescriptor,
        use_case_name: str,
        holder_name: str,
        repository_name: str,
        ctx: ImportContext,
    ) -> str:
        collaborator = camel_case(repository_name)
        args = render_arguments(descriptor.parameters, receiver="params")
        base = "StreamUseCase" if descriptor.shape == ReturnShape.STREAM else "UseCase"

        imports = self._wrapper_imports(descriptor, ctx, pro=True)
        imports.append(file_name_for(holder_name))

        lines = self._format_imports(imports)
        lines.append("")
        lines.append(
            f"class {use_case_name} extends "
            f"{base}<{descriptor.return_type}, {holder_name}> {{"
        )
        lines.extend(self._generate_collaborator(use_case_name, repository_name))
        lines.append(f"{self._indent(1)}@override")
        lines.append(
            f"{self._indent(1)}{render_return_type(descriptor)} "
            f"call({holder_name} params) {{"
        )
        lines.append(
            f"{self._indent(2)}return {collaborator}.{descriptor.name}({args});"
        )
        lines.append(f"{self._indent(1)}}}")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _generate_params(
        self, descriptor: MethodDescriptor, holder_name: str, ctx: ImportContext
    ) -> str:
        imports = [EQUATABLE_IMPORT]
        if descriptor.parameters:
            # Parameter types are usually declared next to the repository
            imports.append(package_import_path(ctx))

        lines = self._format_imports(imports)
        lines.append("")
        lines.append(f"class {holder_name} extends Equatable {{")

        for param in descriptor.parameters:
            lines.append(f"{self._indent(1)}final {param.type} {param.name};")
        if descriptor.parameters:
            lines.append("")

        fields = ", ".join(f"this.{p.name}" for p in descriptor.parameters)
        props = ", ".join(p.name for p in descriptor.parameters)
        lines.append(f"{self._indent(1)}const {holder_name}({fields});")
        lines.append("")
        lines.append(f"{self._indent(1)}@override")
        lines.append(f"{self._indent(1)}List<Object?> get props => [{props}];")
        lines.append("}")
        return "\n".join(lines) + "\n"


def render_units(
    descriptor: MethodDescriptor,
    use_case_name: str,
    repository_name: str,
    mode: GenerationMode,
    import_context: ImportContext,
) -> List[RenderedUnit]:
    return UseCaseGenerator().render_units(
        descriptor, use_case_name, repository_name, mode, import_context
    )
