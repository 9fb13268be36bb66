"""Exceptions raised while generating type declarations."""


class TypegenError(Exception):
    """Base class for all openapi-typegen failures."""


class MissingOperationIdError(TypegenError):
    """An operation in the document has no operationId."""

    def __init__(self, method: str, path: str):
        self.method = method.upper()
        self.path = path
        super().__init__(f"endpoint {self.method} {path} miss operationId")


class DocumentError(TypegenError):
    """The API document could not be read as a mapping."""


class ConfigError(TypegenError):
    """A configuration file is not a valid options mapping."""
