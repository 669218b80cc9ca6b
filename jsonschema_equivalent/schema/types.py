"""
Primitive type algebra for JSON Schema instances.

Every JSON instance belongs to exactly one of the seven primitive types named
by the ``type`` keyword. The optimizer reasons about which of those types a
schema node can still accept; this module defines that set.

Type Model:
    PrimitiveType: the seven names the ``type`` keyword understands
    TypeSet: an immutable set of primitive types

Number subsumption:
    ``number`` includes ``integer``. Internally a TypeSet stores two numeric
    atoms: ``INTEGER`` (integral numbers) and ``NUMBER`` (numbers with a
    fractional part). The name ``"number"`` maps to both atoms, so
    intersecting ``"number"`` with ``"integer"`` keeps ``INTEGER`` only, and
    rendering drops ``integer`` whenever ``number`` is present.

Usage:
    ```python
    from jsonschema_equivalent.schema.types import TypeSet

    numeric = TypeSet.of("number")
    integral = TypeSet.of("integer", "string")

    (numeric & integral).to_type_keyword()   # "integer"
    (numeric | integral).to_type_keyword()   # ["number", "string"]
    ```
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Iterable, Iterator, List, Optional, Union


class PrimitiveType(str, Enum):
    """The primitive instance types of JSON Schema."""

    ARRAY = "array"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NULL = "null"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"

    @classmethod
    def from_name(cls, name: Any) -> Optional["PrimitiveType"]:
        """Return the matching type, or None for anything that is not a type name."""
        if not isinstance(name, str):
            return None
        try:
            return cls(name)
        except ValueError:
            return None


class IntegerPolicy(str, Enum):
    """
    How numeric literals in ``const``/``enum`` are classified.

    Attributes:
        INTEGRAL: ints and floats without a fractional part are integers
            (Draft 6 and later; what jsonschema's Draft6/7 validators do)
        LITERAL: only int instances are integers (Draft 4). Literals match
            by numeric value, so an integral literal (``1`` or ``1.0``) may
            stand for an integer or a non-integer instance; only fractional
            literals are narrowed
        CONSERVATIVE: every numeric literal may be an integer or not
    """

    INTEGRAL = "integral"
    LITERAL = "literal"
    CONSERVATIVE = "conservative"


_ALL_ATOMS = frozenset(PrimitiveType)


@dataclass(frozen=True)
class TypeSet:
    """
    Immutable set of primitive types a schema node can accept.

    The empty set means the node is unsatisfiable. The full set means the
    node places no restriction on the instance type.

    Attributes:
        atoms: The primitive types in the set, with ``NUMBER`` standing for
            non-integral numbers only (see the module docstring)
    """

    atoms: FrozenSet[PrimitiveType] = field(default_factory=frozenset)

    @classmethod
    def all(cls) -> "TypeSet":
        return cls(_ALL_ATOMS)

    @classmethod
    def empty(cls) -> "TypeSet":
        return cls(frozenset())

    @classmethod
    def of(cls, *names: Union[str, PrimitiveType]) -> "TypeSet":
        """
        Build a TypeSet from type names.

        Args:
            *names: Type names such as ``"string"`` or PrimitiveType members

        Returns:
            TypeSet: The set, with ``"number"`` expanded to include integers

        Raises:
            ValueError: If a name is not one of the seven primitive types
        """
        atoms = set()
        for name in names:
            primitive = PrimitiveType.from_name(name)
            if primitive is None:
                raise ValueError(f"Unknown primitive type: {name!r}")
            atoms.add(primitive)
            if primitive is PrimitiveType.NUMBER:
                atoms.add(PrimitiveType.INTEGER)
        return cls(frozenset(atoms))

    @classmethod
    def from_type_keyword(cls, value: Any) -> Optional["TypeSet"]:
        """
        Read the value of a ``type`` keyword.

        Args:
            value: A type name or a list of type names

        Returns:
            TypeSet for a well-formed value, or None when the value is
            malformed (the caller then treats the keyword as opaque)

        Example:
            ```python
            TypeSet.from_type_keyword("string")            # {string}
            TypeSet.from_type_keyword(["null", "number"])  # {null, integer, number}
            TypeSet.from_type_keyword([])                  # empty set
            TypeSet.from_type_keyword("text")              # None
            ```
        """
        if isinstance(value, str):
            names = [value]
        elif isinstance(value, list):
            names = value
        else:
            return None

        if any(PrimitiveType.from_name(name) is None for name in names):
            return None
        return cls.of(*names)

    @property
    def is_empty(self) -> bool:
        return not self.atoms

    @property
    def is_all(self) -> bool:
        return self.atoms == _ALL_ATOMS

    def intersects(self, other: "TypeSet") -> bool:
        return bool(self.atoms & other.atoms)

    def issubset(self, other: "TypeSet") -> bool:
        return self.atoms <= other.atoms

    def without(self, *names: Union[str, PrimitiveType]) -> "TypeSet":
        """Return the set minus the given types (``"number"`` removes integers too)."""
        return self - TypeSet.of(*names)

    def names(self) -> List[str]:
        """
        Type names as they would be written in a ``type`` keyword.

        Returns:
            Sorted list of names; ``integer`` is omitted when ``number`` is
            present because ``number`` already covers it
        """
        names = []
        for primitive in sorted(self.atoms, key=lambda p: p.value):
            if primitive is PrimitiveType.INTEGER and PrimitiveType.NUMBER in self.atoms:
                continue
            names.append(primitive.value)
        return names

    def to_type_keyword(self) -> Union[None, str, List[str]]:
        """
        Render the set as the value of a ``type`` keyword.

        A set holding only non-integral numbers has no exact rendering and is
        written as ``"number"``, a superset. Callers only write such sets next
        to the ``const``/``enum`` that produced them.

        Returns:
            None when every type is allowed (the keyword should be omitted),
            a single name for one type, otherwise a sorted list of names
        """
        names = self.names()
        if PrimitiveType.NUMBER in self.atoms and len(names) == len(PrimitiveType) - 1:
            # every type name except the redundant "integer"
            return None
        if len(names) == 1:
            return names[0]
        return names

    def __and__(self, other: "TypeSet") -> "TypeSet":
        return TypeSet(self.atoms & other.atoms)

    def __or__(self, other: "TypeSet") -> "TypeSet":
        return TypeSet(self.atoms | other.atoms)

    def __sub__(self, other: "TypeSet") -> "TypeSet":
        return TypeSet(self.atoms - other.atoms)

    def __contains__(self, item: Union[str, PrimitiveType]) -> bool:
        primitive = PrimitiveType.from_name(item)
        return primitive is not None and primitive in self.atoms

    def __iter__(self) -> Iterator[PrimitiveType]:
        return iter(sorted(self.atoms, key=lambda p: p.value))

    def __len__(self) -> int:
        return len(self.atoms)

    def __repr__(self) -> str:
        return f"TypeSet({', '.join(p.value for p in self)})"


def union_all(type_sets: Iterable[TypeSet]) -> TypeSet:
    """Union of any number of TypeSets (empty for no input)."""
    result = TypeSet.empty()
    for type_set in type_sets:
        result = result | type_set
    return result
