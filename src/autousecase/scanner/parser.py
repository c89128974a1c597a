import logging
import re
from typing import List, Optional, Tuple

from autousecase.spec import MethodDescriptor, Parameter, ParameterKind, ReturnShape

log = logging.getLogger(__name__)

ERROR_UNION_MARKER = "Future<Either<Failure,"
FUTURE_MARKER = "Future<"
STREAM_MARKER = "Stream<"

# A wrapper payload: plain characters or a single <...> group without further
# nesting. `List<User>` and `Map<String, int>` pass, `Map<String, List<int>>`
# does not and the whole line is dropped.
_PAYLOAD = r"(?P<payload>(?:[^<>]|<[^<>]*>)+)"
_NAME = r"\s+(?P<name>\w+)\s*\("

_SHAPE_PATTERNS = {
    ReturnShape.ERROR_UNION_FUTURE: re.compile(
        r"Future<Either<Failure,\s*" + _PAYLOAD + r">>" + _NAME
    ),
    ReturnShape.PLAIN_FUTURE: re.compile(r"^Future<" + _PAYLOAD + r">" + _NAME),
    ReturnShape.STREAM: re.compile(r"^Stream<" + _PAYLOAD + r">" + _NAME),
}

# `<type> <name>`, the type allowing a dotted prefix, generic arguments with
# one inner level of nesting and a trailing `?`.
_ENTRY_PATTERN = re.compile(
    r"^(?:(?:final|covariant)\s+)?"
    r"(?P<type>[\w.]+(?:\s*<(?:[^<>]|<[^<>]*>)*>)?\??)"
    r"\s+(?P<name>\w+)$"
)
_REQUIRED_PATTERN = re.compile(r"^required\s+(?P<rest>.+)$", re.DOTALL)

_OPENERS = "<([{"
_CLOSERS = ">)]}"


def strip_comments(source: str) -> str:
    """
    Removes `//` line comments and `/* */` block comments.

    String literals are copied untouched, and newlines inside block comments
    are kept so the line structure of the source survives.
    """
    out: List[str] = []
    i, n = 0, len(source)
    quote: Optional[str] = None

    while i < n:
        ch = source[i]

        if quote:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(source[i + 1])
                i += 2
                continue
            if ch == quote or ch == "\n":
                quote = None
            i += 1
            continue

        if source.startswith("//", i):
            end = source.find("\n", i)
            i = n if end == -1 else end
            continue

        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            comment = source[i:] if end == -1 else source[i : end + 2]
            out.append("\n" * comment.count("\n"))
            i = n if end == -1 else end + 2
            continue

        if ch in ("'", '"'):
            quote = ch
        out.append(ch)
        i += 1

    return "".join(out)


def split_top_level(text: str, separator: str = ",", maxsplit: int = -1) -> List[str]:
    """
    Splits `text` on `separator`, ignoring separators nested inside brackets
    or string literals. Empty trailing entries are discarded.
    """
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    quote: Optional[str] = None

    for ch in text:
        if quote:
            current.append(ch)
            if ch == quote:
                quote = None
            continue

        if ch in ("'", '"'):
            quote = ch
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth = max(0, depth - 1)
        elif ch == separator and depth == 0 and maxsplit != len(parts):
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)

    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return parts


def _find_closing(text: str, open_index: int, opener: str, closer: str) -> int:
    depth = 0
    quote: Optional[str] = None
    for i in range(open_index, len(text)):
        ch = text[i]
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return i
    return -1


def _split_regions(params_text: str) -> Tuple[str, str, Optional[ParameterKind]]:
    # Returns (positional text, grouped text, kind of the grouped entries).
    depth = 0
    for i, ch in enumerate(params_text):
        if ch in "<(":
            depth += 1
        elif ch in ">)":
            depth = max(0, depth - 1)
        elif ch in "{[" and depth == 0:
            # `= const []` is a default value, not an optional group
            prefix = params_text[:i].rstrip()
            if prefix and not prefix.endswith(","):
                continue
            closer = "}" if ch == "{" else "]"
            end = params_text.rfind(closer)
            group = params_text[i + 1 :] if end < i else params_text[i + 1 : end]
            kind = ParameterKind.NAMED if ch == "{" else ParameterKind.OPTIONAL_POSITIONAL
            return params_text[:i], group, kind
    return params_text, "", None


def _parse_entry(entry: str, kind: ParameterKind) -> Optional[Parameter]:
    if kind == ParameterKind.NAMED:
        required_match = _REQUIRED_PATTERN.match(entry)
        if required_match:
            kind = ParameterKind.REQUIRED_NAMED
            entry = required_match.group("rest").strip()

    default: Optional[str] = None
    pieces = split_top_level(entry, separator="=", maxsplit=1)
    if len(pieces) == 2:
        entry, default = pieces

    match = _ENTRY_PATTERN.match(entry.strip())
    if not match:
        log.debug(f"Dropping unrecognised parameter entry: {entry!r}")
        return None

    return Parameter(
        type=match.group("type"),
        name=match.group("name"),
        kind=kind,
        default=default,
    )


def parse_parameters(params_text: str) -> Tuple[Parameter, ...]:
    positional_text, group_text, group_kind = _split_regions(params_text.strip())

    parameters: List[Parameter] = []
    for entry in split_top_level(positional_text):
        param = _parse_entry(entry, ParameterKind.POSITIONAL)
        if param:
            parameters.append(param)

    if group_kind:
        for entry in split_top_level(group_text):
            param = _parse_entry(entry, group_kind)
            if param:
                parameters.append(param)

    return tuple(parameters)


def _classify(line: str) -> Optional[ReturnShape]:
    if ERROR_UNION_MARKER in line:
        return ReturnShape.ERROR_UNION_FUTURE
    if line.startswith(FUTURE_MARKER):
        return ReturnShape.PLAIN_FUTURE
    if line.startswith(STREAM_MARKER):
        return ReturnShape.STREAM
    return None


def parse_declaration_line(line: str) -> Optional[MethodDescriptor]:
    """Parses a single trimmed line, returning None when it is not a method."""
    shape = _classify(line)
    if shape is None:
        return None

    match = _SHAPE_PATTERNS[shape].search(line)
    if not match:
        log.debug(f"Skipping unrecognised {shape.value} declaration: {line}")
        return None

    open_index = match.end() - 1
    close_index = _find_closing(line, open_index, "(", ")")
    if close_index == -1:
        log.debug(f"Skipping declaration without a closed parameter list: {line}")
        return None

    return MethodDescriptor(
        name=match.group("name"),
        return_type=match.group("payload").strip(),
        shape=shape,
        parameters=parse_parameters(line[open_index + 1 : close_index]),
    )


def extract_descriptors(source_text: str) -> List[MethodDescriptor]:
    descriptors: List[MethodDescriptor] = []
    for raw_line in strip_comments(source_text).splitlines():
        line = raw_line.strip()
        if not line:
            continue
        descriptor = parse_declaration_line(line)
        if descriptor:
            descriptors.append(descriptor)
    return descriptors


class DartDeclarationParser:
    def parse(self, source_text: str) -> List[MethodDescriptor]:
        return extract_descriptors(source_text)
