"""OpenAPI schema extractor.

Turns every operation of an OpenAPI 3.x document into one synthetic object
schema (headers / query / params / body) and passes the document's
component schemas through untouched.
"""

from openapi_typegen.errors import MissingOperationIdError

from .base import (
    HTTP_METHODS,
    PARAMETER_GROUPS,
    ExtractedSchemas,
    default_schema,
)
from .refs import get_path, ref_to_path

JSON_CONTENT_TYPE = "application/json"


def extract_schemas(doc: dict) -> ExtractedSchemas:
    """Collect operation request schemas and component schemas from ``doc``.

    Raises MissingOperationIdError as soon as an operation has no
    operationId; nothing is returned in that case.
    """
    operations: dict[str, dict] = {}
    paths = doc.get("paths") or {}

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if operation is None:
                continue
            operation_id = operation.get("operationId") if isinstance(operation, dict) else None
            if not operation_id:
                raise MissingOperationIdError(method, path)
            operations[str(operation_id)] = _build_operation_schema(doc, path_item, operation)

    components = get_path(doc, ["components", "schemas"]) or {}
    return ExtractedSchemas(operations=operations, components=components)


def _build_operation_schema(doc: dict, path_item: dict, operation: dict) -> dict:
    schema = default_schema()

    # operation-level entries come last so they overwrite path-level ones
    parameters = list(path_item.get("parameters") or []) + list(operation.get("parameters") or [])
    for parameter in parameters:
        _add_parameter(doc, schema, parameter)

    body = get_path(operation, ["requestBody", "content", JSON_CONTENT_TYPE, "schema"])
    if body is not None:
        schema["properties"]["body"] = body

    return schema


def _add_parameter(doc: dict, schema: dict, parameter: dict) -> None:
    resolved = {}
    if "$ref" in parameter:
        segments = ref_to_path(parameter["$ref"])
        target = get_path(doc, segments) if segments else None
        if isinstance(target, dict):
            resolved = target

    location = parameter.get("in", resolved.get("in"))
    group_name = PARAMETER_GROUPS.get(location)
    if not group_name:
        return

    name = parameter.get("name", resolved.get("name"))
    if name is None:
        return

    group = schema["properties"].get(group_name)
    if group is None:
        group = schema["properties"][group_name] = default_schema()

    if "$ref" in parameter:
        group["properties"][name] = resolved.get("schema") or {}
    else:
        group["properties"][name] = parameter.get("schema") or {}

    if parameter.get("required", resolved.get("required")) and name not in group["required"]:
        group["required"].append(name)
