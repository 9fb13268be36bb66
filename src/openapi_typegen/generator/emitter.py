"""Type emitter — serializes schema trees into TypeScript declarations.

Each call to :meth:`TypeEmitter.build` writes one complete ``interface``
(or ``type`` alias) into the shared buffer. Nesting state lives in an
:class:`EmissionScope` that is created per declaration and threaded
through the recursion, so nothing carries over between declarations.
"""

from dataclasses import dataclass, field
from enum import Enum

from openapi_typegen.parser.base import GenerateOptions
from openapi_typegen.parser.refs import ref_tail

from .naming import pascal_case

PASSTHROUGH_TYPES = {"string", "number", "boolean", "object", "array"}
STRUCTURAL_TYPES = {"object", "array"}


class ScopeKind(str, Enum):
    OBJECT = "object"
    ARRAY_OF_OBJECT = "array-of-object"


@dataclass
class ScopeFrame:
    kind: ScopeKind
    dimensions: int = 0  # number of [] after the closing brace


@dataclass
class EmissionScope:
    """Open blocks of the declaration being emitted, innermost last."""

    frames: list[ScopeFrame] = field(default_factory=list)
    depth: int = 0

    def enter(self, kind: ScopeKind, dimensions: int = 0) -> None:
        self.frames.append(ScopeFrame(kind, dimensions))
        self.depth += 1

    def exit(self) -> ScopeFrame:
        self.depth -= 1
        return self.frames.pop()


def resolve_type(schema) -> str:
    """Resolve a schema node to the type name used in the output.

    Precedence: declared ``type`` → ``properties`` (object) → ``items``
    (array) → ``$ref`` (last pointer segment) → ``any``.
    """
    if not isinstance(schema, dict):
        return "any"
    declared = schema.get("type")
    if declared == "integer":
        return "number"
    if isinstance(declared, str) and declared in PASSTHROUGH_TYPES:
        return declared
    if isinstance(schema.get("properties"), dict):
        return "object"
    if schema.get("items") is not None:
        return "array"
    if schema.get("$ref"):
        return ref_tail(schema["$ref"])
    return "any"


def is_scalar(type_name: str) -> bool:
    return type_name not in STRUCTURAL_TYPES


def unwrap_array(schema: dict) -> tuple[dict, str, int]:
    """Follow ``items`` through nested arrays.

    Returns the innermost element schema, its resolved type and how many
    array levels were unwrapped.
    """
    element, element_type, dimensions = schema, "array", 0
    while element_type == "array":
        element = element.get("items") or {}
        element_type = resolve_type(element)
        dimensions += 1
    return element, element_type, dimensions


class TypeEmitter:
    """Accumulates TypeScript declarations into :attr:`buffer`."""

    def __init__(self, options: GenerateOptions | None = None):
        self.options = options or GenerateOptions()
        self.buffer = ""

    def build(self, name: str, schema) -> EmissionScope:
        """Emit one declaration for ``schema`` under ``name``.

        Only references (as a type alias) and object schemas (as an
        interface) are emitted; other shapes produce no output. Returns the
        finished scope, which is always back at depth 0.
        """
        scope = EmissionScope()
        if not isinstance(schema, dict):
            return scope

        type_name = pascal_case(name)
        if schema.get("$ref"):
            self._writeln(scope, f"export type {type_name} = {ref_tail(schema['$ref'])}")
        elif resolve_type(schema) == "object":
            self._writeln(scope, f"export interface {type_name} {{")
            scope.enter(ScopeKind.OBJECT)
            self._build_properties(scope, schema)
            self._exit_scope(scope, root=True)
            self.buffer += "\n"
        return scope

    def _build_properties(self, scope: EmissionScope, schema: dict) -> None:
        properties = schema.get("properties")
        if not isinstance(properties, dict):
            properties = {}
        required = schema.get("required")
        if not isinstance(required, list):
            required = []

        for name, prop in properties.items():
            optional = "" if name in required else "?"
            prop_type = resolve_type(prop)

            if is_scalar(prop_type):
                self._writeln(scope, f"{name}{optional}: {prop_type};")
            elif prop_type == "array":
                element, element_type, dimensions = unwrap_array(prop)
                suffix = "[]" * dimensions
                if is_scalar(element_type):
                    self._writeln(scope, f"{name}{optional}: {element_type}{suffix};")
                else:
                    self._writeln(scope, f"{name}{optional}: {{")
                    scope.enter(ScopeKind.ARRAY_OF_OBJECT, dimensions)
                    self._build_properties(scope, element)
                    self._exit_scope(scope)
            else:
                self._writeln(scope, f"{name}{optional}: {{")
                scope.enter(ScopeKind.OBJECT)
                self._build_properties(scope, prop)
                self._exit_scope(scope)

    def _exit_scope(self, scope: EmissionScope, root: bool = False) -> None:
        frame = scope.exit()
        semi = "" if root else ";"
        if frame.kind is ScopeKind.OBJECT:
            self._writeln(scope, f"}}{semi}")
        else:
            self._writeln(scope, "}" + "[]" * frame.dimensions + semi)

    def _writeln(self, scope: EmissionScope, line: str) -> None:
        self.buffer += " " * (scope.depth * self.options.indent) + line + "\n"
