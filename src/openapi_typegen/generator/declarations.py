"""Generate TypeScript declarations for a whole API document."""

from openapi_typegen.config import merge_options
from openapi_typegen.parser.base import ExtractedSchemas, GenerateOptions
from openapi_typegen.parser.extractor import extract_schemas

from .emitter import TypeEmitter

REQUEST_SUFFIX = "Req"


def emit_declarations(extracted: ExtractedSchemas, options: GenerateOptions | dict | None = None) -> str:
    """Render already-extracted schemas: operation request types first, then components."""
    emitter = TypeEmitter(merge_options(options))
    for operation_id, schema in extracted.operations.items():
        emitter.build(operation_id + REQUEST_SUFFIX, schema)
    for name, schema in extracted.components.items():
        emitter.build(name, schema)
    return emitter.buffer


def generate(doc: dict, options: GenerateOptions | dict | None = None) -> str:
    """Return the declarations for ``doc`` as one string.

    Operation request types come first, in document order, named
    ``<OperationId>Req``; component schemas follow under their own names.
    """
    opts = merge_options(options)
    return emit_declarations(extract_schemas(doc), opts)
