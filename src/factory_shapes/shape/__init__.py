"""
The five factory shapes and the structural rules each one demands.

Examples:
    Every shape lists its requirements ...
    >>> print(Shape.BUILDER.describe())
    - static count must be exactly 0
    - create count must be exactly 1
    - non create count must be at least 1

    ... can produce counters that satisfy it exactly ...
    >>> Shape.STATIC.example()
    Counters(create_count=0, non_create_count=0, public_count=0, static_count=1, has_named_static_factory=True)
    >>> Shape.STATIC.violation(Shape.STATIC.example()) is None
    True

    ... and reports the *first* rule a set of counters breaks:
    >>> check = Shape.ABSTRACT.violation(Counters(create_count=0))
    >>> check.error.__name__, check.describe()
    ('CreateMethodCountMismatch', 'create count must be at least 1')

    Declared values are coerced, anything unknown is rejected:
    >>> Shape.coerce(4), Shape.coerce("builder")
    (<Shape.STATIC: 4>, <Shape.BUILDER: 5>)
    >>> Shape.coerce(9, factory="Broken")
    Traceback (most recent call last):
      ...
    factory_shapes.errors.UndefinedShape: Broken: undefined factory shape (required one of SIMPLE, ABSTRACT, METHOD, STATIC, BUILDER, got 9)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from factory_shapes._config import config
from factory_shapes.core.descriptor import MethodDescriptor
from factory_shapes.core.introspect import is_reserved
from factory_shapes.errors import (
    ContractViolation,
    CreateMethodCountMismatch,
    MissingNonCreateMethod,
    NonCreateMethodNotAllowed,
    NonCreateMethodsForbidden,
    StaticFactoryMissingOrMiscounted,
    StaticMethodNotAllowed,
    UndefinedShape,
)
from factory_shapes.rules import Rule
from factory_shapes.rules.predefined import AtLeast, Exactly, IsTrue


# ═════════════════════════════ counters ═════════════════════════════
@dataclass(frozen=True)
class Counters:
    create_count:             int = 0
    non_create_count:         int = 0
    public_count:             int = 0
    static_count:             int = 0
    has_named_static_factory: bool = False

    @property
    def non_static_count(self) -> int:
        return self.create_count + self.non_create_count


def count(descriptors: Iterable[MethodDescriptor],
          prefix: str | None = None,
          static_name: str | None = None) -> Counters:
    """
    Fold descriptors into :class:`Counters`; reserved names are skipped.

    >>> from factory_shapes.core.descriptor import Visibility
    >>> count([
    ...     MethodDescriptor("create_car", "create_car", Visibility.PUBLIC, False),
    ...     MethodDescriptor("paint", "_paint", Visibility.PROTECTED, False),
    ...     MethodDescriptor("factory", "factory", Visibility.PUBLIC, True),
    ...     MethodDescriptor("get", "get", Visibility.PUBLIC, False),
    ... ])
    Counters(create_count=1, non_create_count=1, public_count=1, static_count=1, has_named_static_factory=True)
    """
    prefix = config["create-prefix"] if prefix is None else prefix
    static_name = config["static-factory"] if static_name is None else static_name

    create = non_create = public = static = named = 0
    for d in descriptors:
        if is_reserved(d.attr) or is_reserved(d.name):
            continue
        if d.is_static:
            static += 1
            if d.name == static_name:
                named += 1
        elif d.name.startswith(prefix):
            create += 1
            if d.is_public:
                public += 1
        else:
            non_create += 1
    return Counters(create, non_create, public, static, named == 1)


# ═══════════════════════════ rule table ════════════════════════════
@dataclass(frozen=True)
class Check:
    counter: str
    rule:    type[Rule]
    error:   type[ContractViolation]

    def passes(self, counters: Counters) -> bool:
        return self.rule.validate(getattr(counters, self.counter))

    def describe(self) -> str:
        return f"{self.counter.replace('_', ' ')} must be {self.rule.describe()}"


class Shape(Enum):
    SIMPLE = 1
    ABSTRACT = 2
    METHOD = 3
    STATIC = 4
    BUILDER = 5

    @classmethod
    def coerce(cls, value: Any, factory: str = "<factory>") -> Shape:
        """Shape member, its value or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, bool):
            try:
                return cls(value)
            except (ValueError, TypeError):
                pass
            if isinstance(value, str):
                try:
                    return cls[value.strip().upper()]
                except KeyError:
                    pass
        raise UndefinedShape(factory,
                             expected="one of " + ", ".join(s.name for s in cls),
                             got=value)

    @property
    def checks(self) -> tuple[Check, ...]:
        return SHAPE_RULES[self]

    def describe(self) -> str:
        return "\n".join(f"- {c.describe()}" for c in self.checks)

    def example(self) -> Counters:
        names = {f.name for f in fields(Counters)}
        return Counters(**{c.counter: c.rule.example()
                           for c in self.checks if c.counter in names})

    def violation(self, counters: Counters) -> Check | None:
        for check in self.checks:
            if not check.passes(counters):
                return check
        return None


_NO_STATIC = Check("static_count", Exactly[0], StaticMethodNotAllowed)
_ONE_CREATE = Check("create_count", Exactly[1], CreateMethodCountMismatch)

SHAPE_RULES: Mapping[Shape, tuple[Check, ...]] = MappingProxyType({
    Shape.ABSTRACT: (
        Check("non_create_count", Exactly[0], NonCreateMethodNotAllowed),
        _NO_STATIC,
        Check("create_count", AtLeast[1], CreateMethodCountMismatch),
    ),
    Shape.BUILDER: (
        _NO_STATIC,
        _ONE_CREATE,
        Check("non_create_count", AtLeast[1], MissingNonCreateMethod),
    ),
    Shape.METHOD: (
        _NO_STATIC,
        _ONE_CREATE,
        Check("non_create_count", Exactly[0], NonCreateMethodsForbidden),
    ),
    Shape.SIMPLE: (
        _NO_STATIC,
        _ONE_CREATE,
        Check("non_create_count", Exactly[0], NonCreateMethodsForbidden),
    ),
    Shape.STATIC: (
        Check("static_count", Exactly[1], StaticFactoryMissingOrMiscounted),
        Check("non_static_count", Exactly[0], StaticFactoryMissingOrMiscounted),
        Check("has_named_static_factory", IsTrue, StaticFactoryMissingOrMiscounted),
    ),
})
