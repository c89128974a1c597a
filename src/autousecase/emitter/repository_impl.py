from typing import List, Sequence

from autousecase.spec import ImportContext, MethodDescriptor, RenderedUnit, ReturnShape
from .naming import camel_case, file_name_for, package_import_path, snake_case
from .signature import render_arguments, render_parameter_list, render_return_type
from .use_case import DARTZ_IMPORT

IMPL_SUFFIX = "Impl"
DATA_SOURCE_SUFFIX = "RemoteDataSource"


def default_data_source_name(repository_name: str) -> str:
    # AuthRepository -> AuthRemoteDataSource
    return f"{repository_name.replace('Repository', '')}{DATA_SOURCE_SUFFIX}"


class RepositoryImplGenerator:
    def __init__(self, indent_spaces: int = 2):
        self._indent_str = " " * indent_spaces

    def _indent(self, level: int) -> str:
        return self._indent_str * level

    def render(
        self,
        descriptors: Sequence[MethodDescriptor],
        repository_name: str,
        data_source_name: str,
        import_context: ImportContext,
    ) -> RenderedUnit:
        impl_name = f"{repository_name}{IMPL_SUFFIX}"
        field_name = camel_case(data_source_name)
        project = import_context.project_name

        has_error_union = any(
            d.shape == ReturnShape.ERROR_UNION_FUTURE for d in descriptors
        )
        lines = []
        if has_error_union:
            lines.append(f"import '{DARTZ_IMPORT}';")
            lines.append(f"import 'package:{project}/core/errors/error_mapper.dart';")
            lines.append(f"import 'package:{project}/core/errors/failures.dart';")
        lines.append(f"import '{package_import_path(import_context)}';")
        lines.append("")
        lines.append(f"import '../datasources/{snake_case(data_source_name)}.dart';")
        lines.append("")
        lines.append(f"class {impl_name} implements {repository_name} {{")
        lines.append(f"{self._indent(1)}final {data_source_name} {field_name};")
        lines.append("")
        lines.append(f"{self._indent(1)}{impl_name}(this.{field_name});")

        for descriptor in descriptors:
            lines.append("")
            lines.extend(self._generate_method(descriptor, field_name))

        lines.append("}")
        return RenderedUnit(
            file_name=file_name_for(impl_name),
            content="\n".join(lines) + "\n",
        )

    def _generate_method(self, descriptor: MethodDescriptor, field_name: str) -> List[str]:
        signature = (
            f"{render_return_type(descriptor)} {descriptor.name}"
            f"({render_parameter_list(descriptor.parameters)})"
        )
        call = f"{field_name}.{descriptor.name}({render_arguments(descriptor.parameters)})"

        lines = [f"{self._indent(1)}@override"]
        if descriptor.shape != ReturnShape.ERROR_UNION_FUTURE:
            lines.append(f"{self._indent(1)}{signature} {{")
            lines.append(f"{self._indent(2)}return {call};")
            lines.append(f"{self._indent(1)}}}")
            return lines

        lines.append(f"{self._indent(1)}{signature} async {{")
        lines.append(f"{self._indent(2)}try {{")
        if descriptor.is_void_return:
            lines.append(f"{self._indent(3)}await {call};")
            lines.append(f"{self._indent(3)}return const Right(null);")
        else:
            lines.append(f"{self._indent(3)}final result = await {call};")
            lines.append(f"{self._indent(3)}return Right(result);")
        lines.append(f"{self._indent(2)}}} catch (e) {{")
        lines.append(f"{self._indent(3)}return Left(ErrorMapper.mapException(e));")
        lines.append(f"{self._indent(2)}}}")
        lines.append(f"{self._indent(1)}}}")
        return lines
