"""Internal JSON pointer helpers for ``$ref`` strings."""

from typing import Any

POINTER_PREFIX = "#/"


def ref_to_path(ref: str) -> list[str] | None:
    """Split an internal pointer like ``#/components/schemas/Pet`` into segments.

    Returns None for the root pointer ``#`` and for anything that is not an
    internal pointer (other files, URLs).
    """
    if not isinstance(ref, str) or ref == "#":
        return None
    if not ref.startswith(POINTER_PREFIX):
        return None
    return ref[len(POINTER_PREFIX):].split("/")


def ref_tail(ref: str) -> str:
    """Type name a reference points at, or ``any`` when it can't be resolved."""
    segments = ref_to_path(ref)
    if segments and segments[-1]:
        return segments[-1]
    return "any"


def get_path(document: Any, segments: list[str]) -> Any:
    """Walk ``segments`` down from ``document``; None if any step is missing."""
    node = document
    for segment in segments:
        if isinstance(node, dict):
            node = node.get(segment)
        elif isinstance(node, list) and segment.isdigit() and int(segment) < len(node):
            node = node[int(segment)]
        else:
            return None
        if node is None:
            return None
    return node
