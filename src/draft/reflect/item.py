"""Reflective cataloguing of example values.

Turns an arbitrary example (dicts, pydantic models, dataclasses, plain
objects, sequences and scalars) into a tree of named ``Item`` descriptors.

The tree mirrors the value:
  - objects  -> ``type="object"``, one nested item per field
  - arrays   -> ``type="array"``, a single nested item describing the elements
  - scalars  -> ``string`` / ``integer`` / ``number`` / ``boolean`` / ``null``,
    with the observed value kept in ``example``
"""

import dataclasses
import datetime
import inspect
import uuid
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

from draft.config import MockStrategy, NameConvention, settings
from draft.errors import CycleError, UnsupportedValueError
from draft.reflect.naming import convert

ItemType = Literal["object", "array", "string", "integer", "number", "boolean", "null", "any"]


class Item(BaseModel):
    """A named field descriptor, possibly with nested children."""

    name: str = ""
    type: ItemType
    nested: list["Item"] = []
    example: Any = None
    required: bool = True
    description: str = ""

    def child(self, name: str) -> "Item | None":
        for item in self.nested:
            if item.name == name:
                return item
        return None


class Options(BaseModel):
    """How values are catalogued and how mocks are rebuilt from them."""

    name_convention: NameConvention = NameConvention.SNAKE_CASE
    mock_strategy: MockStrategy = MockStrategy.EXAMPLE
    mock_seed: int = 0

    @classmethod
    def from_settings(cls) -> "Options":
        return cls(
            name_convention=settings.name_convention,
            mock_strategy=settings.mock_strategy,
            mock_seed=settings.mock_seed,
        )


def get(value: Any, options: Options | None = None) -> Item:
    """Catalogue ``value`` into an ``Item`` tree.

    Raises CycleError if the value refers back to itself and
    UnsupportedValueError for callables, classes and modules.
    """
    return _Walker(options or Options.from_settings()).walk("", value, "$")


class _Walker:
    def __init__(self, options: Options):
        self.options = options
        self._active: set[int] = set()

    def walk(self, name: str, value: Any, path: str, description: str = "", required: bool = True) -> Item:
        if value is None:
            return Item(name=name, type="null", required=False, description=description)

        if isinstance(value, Enum):
            value = value.value

        scalar = _scalar(value)
        if scalar is not None:
            item_type, example = scalar
            return Item(name=name, type=item_type, example=example, required=required, description=description)

        if inspect.isroutine(value) or inspect.isclass(value) or inspect.ismodule(value):
            raise UnsupportedValueError(path, value)

        if id(value) in self._active:
            raise CycleError(path)
        self._active.add(id(value))
        try:
            if isinstance(value, (list, tuple, set, frozenset)):
                nested = self._elements(value, path)
                return Item(name=name, type="array", nested=nested, required=required, description=description)

            nested = [
                self.walk(
                    convert(key, self.options.name_convention),
                    child,
                    f"{path}.{key}",
                    description=child_description,
                    required=child_required,
                )
                for key, child, child_description, child_required in _fields(value, path)
            ]
            return Item(name=name, type="object", nested=nested, required=required, description=description)
        finally:
            self._active.discard(id(value))

    def _elements(self, values, path: str) -> list[Item]:
        merged = None
        for i, element in enumerate(values):
            item = self.walk("", element, f"{path}[{i}]")
            merged = item if merged is None else merge(merged, item)
        return [merged] if merged is not None else []


def merge(a: Item, b: Item) -> Item:
    """Combine two descriptors of the same slot into one.

    Objects union their fields by name, later fields replacing earlier
    ones. A null on either side makes the other side optional.
    """
    if a.type == "null":
        return b.model_copy(update={"required": False})
    if b.type == "null":
        return a.model_copy(update={"required": False})
    if a.type != b.type:
        return Item(name=a.name, type="any", required=a.required and b.required, description=a.description)

    if a.type == "object":
        fields = {item.name: item for item in a.nested}
        for item in b.nested:
            fields[item.name] = merge(fields[item.name], item) if item.name in fields else item
        return a.model_copy(update={"nested": list(fields.values())})

    if a.type == "array":
        if not a.nested:
            return b
        if not b.nested:
            return a
        return a.model_copy(update={"nested": [merge(a.nested[0], b.nested[0])]})

    return a


def _scalar(value: Any) -> tuple[str, Any] | None:
    # bool before int, it is a subclass
    if isinstance(value, bool):
        return "boolean", value
    if isinstance(value, int):
        return "integer", value
    if isinstance(value, float):
        return "number", value
    if isinstance(value, Decimal):
        return "number", float(value)
    if isinstance(value, str):
        return "string", value
    if isinstance(value, (bytes, bytearray)):
        return "string", bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return "string", value.isoformat()
    if isinstance(value, datetime.timedelta):
        return "number", value.total_seconds()
    if isinstance(value, uuid.UUID):
        return "string", str(value)
    return None


def _fields(value: Any, path: str):
    """Yield ``(key, value, description, required)`` for an object-like value."""
    if isinstance(value, Mapping):
        for key, child in value.items():
            yield str(key), child, "", True
        return

    if isinstance(value, BaseModel):
        for name, info in type(value).model_fields.items():
            yield info.alias or name, getattr(value, name), info.description or "", info.is_required()
        return

    if dataclasses.is_dataclass(value):
        for field in dataclasses.fields(value):
            required = field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING
            yield field.name, getattr(value, field.name), "", required
        return

    attrs = getattr(value, "__dict__", None)
    if attrs is None:
        raise UnsupportedValueError(path, value)
    for key, child in attrs.items():
        if not key.startswith("_"):
            yield key, child, "", True
