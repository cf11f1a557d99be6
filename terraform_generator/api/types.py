"""
API description types.

This module defines the in-memory graph the generator works on: a product,
its resources and their property trees. Properties of a resource live in a
``PropertyArena``; parent links are arena indices so a nested property never
owns its parent.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

_QUALIFIED_PREFIX: Final = "Api::Type::"


class PropertyType(str, Enum):
    """The closed set of abstract property types."""

    BOOLEAN = "Boolean"
    DOUBLE = "Double"
    INTEGER = "Integer"
    STRING = "String"
    TIME = "Time"
    ENUM = "Enum"
    RESOURCE_REF = "ResourceRef"
    NESTED_OBJECT = "NestedObject"
    ARRAY = "Array"
    NAME_VALUES = "NameValues"

    @classmethod
    def from_name(cls, name: str) -> PropertyType:
        """Look up a type by name, accepting the ``Api::Type::`` qualified form.

        Raises:
            ValueError: If the name is not one of the known types.
        """
        return cls(name.removeprefix(_QUALIFIED_PREFIX))


@dataclass(frozen=True)
class Product:
    """A named API surface."""

    name: str
    base_url: str
    display_name: str | None = None
    description: str = ""

    @property
    def title(self) -> str:
        return self.display_name or self.name


@dataclass(eq=False)
class Property:
    """A named, typed field on a resource or on a nested object.

    ``type`` is normally a ``PropertyType``; a type name the loader could not
    recognise is kept as a plain string so the type mapper can reject it.
    """

    name: str
    type: PropertyType | str
    description: str = ""
    required: bool = False
    output: bool = False
    input: bool = False
    update_url: str | None = None
    values: list[str] = field(default_factory=list)
    resource: str | None = None
    item_type: PropertyType | str | None = None
    index: int = field(default=-1, init=False)
    parent_index: int | None = field(default=None, init=False)
    _arena: PropertyArena | None = field(default=None, init=False, repr=False)

    def is_a(self, property_type: PropertyType) -> bool:
        return self.type == property_type

    @property
    def parent(self) -> Property | None:
        """The enclosing property, or None for a top-level property."""
        if self._arena is None:
            return None
        return self._arena.parent_of(self)

    @property
    def properties(self) -> list[Property]:
        """Child properties of a NestedObject (empty for any other type)."""
        if self._arena is None or not self.is_a(PropertyType.NESTED_OBJECT):
            return []
        return self._arena.children_of(self)

    @property
    def item_object(self) -> Property | None:
        """The element node of an Array of NestedObject."""
        if self._arena is None or not self.is_a(PropertyType.ARRAY):
            return None
        if self.item_type != PropertyType.NESTED_OBJECT:
            return None
        children = self._arena.children_of(self)
        return children[0] if children else None


class PropertyArena:
    """Owns every property node of one resource.

    Nodes are addressed by their insertion index. A property added with a
    parent records the parent's index; the arena keeps the child lists.
    """

    def __init__(self) -> None:
        self._nodes: list[Property] = []
        self._children: dict[int, list[int]] = {}
        self._roots: list[int] = []

    def add(self, prop: Property, parent: Property | None = None) -> Property:
        """Add a property under ``parent`` (or at the top level) and return it."""
        if prop._arena is not None:  # noqa: SLF001
            msg = f"Property '{prop.name}' already belongs to an arena"
            raise ValueError(msg)
        if parent is not None and parent._arena is not self:  # noqa: SLF001
            msg = f"Parent '{parent.name}' does not belong to this arena"
            raise ValueError(msg)

        prop.index = len(self._nodes)
        prop._arena = self  # noqa: SLF001
        self._nodes.append(prop)

        if parent is None:
            self._roots.append(prop.index)
        else:
            prop.parent_index = parent.index
            self._children.setdefault(parent.index, []).append(prop.index)
        return prop

    def __getitem__(self, index: int) -> Property:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._nodes)

    def parent_of(self, prop: Property) -> Property | None:
        if prop.parent_index is None:
            return None
        return self._nodes[prop.parent_index]

    def children_of(self, prop: Property) -> list[Property]:
        return [self._nodes[i] for i in self._children.get(prop.index, [])]

    def roots(self) -> list[Property]:
        return [self._nodes[i] for i in self._roots]


@dataclass(eq=False)
class Resource:
    """A manageable unit of a product's API."""

    name: str
    product: Product
    base_url: str
    input: bool = False
    description: str = ""
    self_link: str | None = None
    update_url: str | None = None
    arena: PropertyArena = field(default_factory=PropertyArena, repr=False)

    @property
    def properties(self) -> list[Property]:
        """Top-level properties in declaration order."""
        return self.arena.roots()

    def add_property(self, prop: Property, parent: Property | None = None) -> Property:
        return self.arena.add(prop, parent)

    def all_properties(self) -> list[Property]:
        """Every property node of the resource, nested ones included."""
        return list(self.arena)


@dataclass
class ApiDescription:
    """A loaded API description: one product and its resources."""

    product: Product
    resources: list[Resource] = field(default_factory=list)

    def resource(self, name: str) -> Resource:
        for resource in self.resources:
            if resource.name == name:
                return resource
        msg = f"Unknown resource '{name}' in product '{self.product.name}'"
        raise KeyError(msg)
