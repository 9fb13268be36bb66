"""Data models shared by the extractor and the emitter.

Schema nodes themselves stay plain dicts taken from the document, so
property order is the document's own order.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, PositiveInt

HTTP_METHODS = ("get", "put", "delete", "post", "options")

# parameter location -> property name on the operation schema
PARAMETER_GROUPS = {"header": "headers", "query": "query", "path": "params"}


def default_schema() -> dict:
    """An empty object schema: no properties, nothing required."""
    return {"type": "object", "properties": {}, "required": []}


class GenerateOptions(BaseModel):
    """Options for a generation run. Unknown keys are kept as given."""

    model_config = ConfigDict(extra="allow")

    indent: PositiveInt = 2  # spaces per nesting level


class ExtractedSchemas(BaseModel):
    """Declarations pulled out of one API document."""

    operations: dict[str, dict] = {}  # operationId -> synthesized request schema
    components: dict[str, Any] = {}  # component name -> schema, verbatim
