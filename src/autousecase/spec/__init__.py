from .models import (
    GenerationMode,
    ImportContext,
    MethodDescriptor,
    Parameter,
    ParameterKind,
    RenderedUnit,
    ReturnShape,
)
from .protocols import (
    DeclarationParserProtocol,
    ImplRendererProtocol,
    UnitRendererProtocol,
)

__all__ = [
    "DeclarationParserProtocol",
    "UnitRendererProtocol",
    "ImplRendererProtocol",
    "GenerationMode",
    "ImportContext",
    "MethodDescriptor",
    "Parameter",
    "ParameterKind",
    "RenderedUnit",
    "ReturnShape",
]
