from typing import List, Sequence

from autousecase.spec import MethodDescriptor, Parameter, ParameterKind, ReturnShape


def _declare(param: Parameter) -> str:
    decl = f"{param.type} {param.name}"
    if param.is_required_named:
        decl = f"required {decl}"
    if param.default is not None:
        decl = f"{decl} = {param.default}"
    return decl


def render_parameter_list(parameters: Sequence[Parameter]) -> str:
    """Re-emits a parameter list with its `[...]`/`{...}` groups intact."""
    positional: List[str] = []
    optional: List[str] = []
    named: List[str] = []
    for param in parameters:
        if param.kind == ParameterKind.POSITIONAL:
            positional.append(_declare(param))
        elif param.kind == ParameterKind.OPTIONAL_POSITIONAL:
            optional.append(_declare(param))
        else:
            named.append(_declare(param))

    parts = list(positional)
    if optional:
        parts.append(f"[{', '.join(optional)}]")
    if named:
        parts.append(f"{{{', '.join(named)}}}")
    return ", ".join(parts)


def render_arguments(parameters: Sequence[Parameter], receiver: str = "") -> str:
    prefix = f"{receiver}." if receiver else ""
    args = []
    for param in parameters:
        if param.is_named:
            args.append(f"{param.name}: {prefix}{param.name}")
        else:
            args.append(f"{prefix}{param.name}")
    return ", ".join(args)


def render_return_type(descriptor: MethodDescriptor) -> str:
    payload = descriptor.return_type
    if descriptor.shape == ReturnShape.ERROR_UNION_FUTURE:
        return f"Future<Either<Failure, {payload}>>"
    if descriptor.shape == ReturnShape.STREAM:
        return f"Stream<{payload}>"
    return f"Future<{payload}>"
