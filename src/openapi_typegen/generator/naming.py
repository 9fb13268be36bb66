"""Identifier casing for emitted declaration names."""

import re

_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+|[A-Z]")


def pascal_case(text: str) -> str:
    """Convert ``listPets_req``, ``list-pets req`` or ``HTTPError`` style text to PascalCase.

    Words break on any non-alphanumeric character and on case changes;
    an all-caps run keeps only its first letter upper-case.
    """
    words = _WORD.findall(str(text))
    return "".join(word[0].upper() + word[1:].lower() for word in words)
