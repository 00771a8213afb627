"""Field-name conventions applied to catalogued keys."""

import re

from draft.config import NameConvention

_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[\s\-.]+")


def snake_case(name: str) -> str:
    """``UserID`` -> ``user_id``, ``Content-Type`` -> ``content_type``."""
    s = _ACRONYM.sub(r"\1_\2", name)
    s = _WORD_BOUNDARY.sub(r"\1_\2", s)
    s = _SEPARATORS.sub("_", s)
    return s.lower()


def camel_case(name: str) -> str:
    """``user_id`` -> ``userId``."""
    head, *rest = snake_case(name).split("_")
    return head + "".join(part.capitalize() for part in rest)


def convert(name: str, convention: NameConvention) -> str:
    if convention == NameConvention.SNAKE_CASE:
        return snake_case(name)
    if convention == NameConvention.CAMEL_CASE:
        return camel_case(name)
    return name
