"""
Turn a class into the list of :class:`MethodDescriptor` the validator reads.

Examples:
    >>> class Cars:
    ...     def __init__(self): ...
    ...     def _create_car(self): ...
    ...     def __create_wheel(self): ...
    ...     def paint(self, colour): ...
    ...     def get(self): ...
    ...     @staticmethod
    ...     def factory(): ...
    >>> for d in describe(Cars):
    ...     print(d.name, d.attr, d.visibility.value, d.is_static)
    create_car _create_car protected False
    create_wheel _Cars__create_wheel private False
    paint paint public False
    factory factory public True
"""

from __future__ import annotations

import functools
import inspect
import logging

from factory_shapes.core.descriptor import MethodDescriptor, Visibility

logger = logging.getLogger(__name__)

# The product accessor. Never counted, whatever its visibility or kind.
PRODUCT_ACCESSOR = "get"

_RESERVED_PREFIX = "__"
_UNWRAP_LIMIT = 16


def is_reserved(name: str) -> bool:
    """Lifecycle hooks (``__init__``, ``__getattr__`` …) and the accessor."""
    return name.startswith(_RESERVED_PREFIX) or name == PRODUCT_ACCESSOR


def split_name(attr: str, owner: type) -> tuple[str, Visibility]:
    """
    ``'_Owner__x'`` ➜ ``('x', PRIVATE)``  |  ``'_x'`` ➜ ``('x', PROTECTED)``.

    >>> class _Spam: pass
    >>> split_name("_Spam__eggs", _Spam)
    ('eggs', <Visibility.PRIVATE: 'private'>)
    >>> split_name("_eggs", _Spam)
    ('eggs', <Visibility.PROTECTED: 'protected'>)
    >>> split_name("eggs", _Spam)
    ('eggs', <Visibility.PUBLIC: 'public'>)
    """
    stem = owner.__name__.lstrip("_")
    mangled = f"_{stem}__"
    if stem and attr.startswith(mangled) and len(attr) > len(mangled):
        return attr[len(mangled):], Visibility.PRIVATE
    if attr.startswith("_"):
        return attr.lstrip("_"), Visibility.PROTECTED
    return attr, Visibility.PUBLIC


def _staticness(value) -> bool | None:
    """
    True / False for static / instance methods, None for non-methods.

    Decorated methods (``functools.cache``, ``partialmethod``,
    ``singledispatchmethod`` …) are unwrapped down to what they decorate.
    Whatever is left binds to the instance only if it is a descriptor.
    """
    if inspect.isclass(value) or inspect.isdatadescriptor(value):
        return None
    if isinstance(value, functools.cached_property):
        return None
    if not (callable(value) or hasattr(type(value), "__get__")):
        return None

    for _ in range(_UNWRAP_LIMIT):
        if isinstance(value, (staticmethod, classmethod)):
            return True
        inner = getattr(value, "__wrapped__", None) or getattr(value, "func", None)
        if inner is None:
            break
        value = inner
    return not hasattr(type(value), "__get__")


def describe(cls: type) -> list[MethodDescriptor]:
    """
    Every method *cls* defines or inherits, each exactly once.

    The MRO is walked most-derived first, so an override shadows the base
    definition. Order is deterministic: MRO order, then definition order.
    """
    seen: set[str] = set()
    out: list[MethodDescriptor] = []

    for owner in cls.__mro__:
        for attr, value in vars(owner).items():
            if attr in seen:
                continue
            seen.add(attr)

            if attr.startswith(_RESERVED_PREFIX):
                continue
            is_static = _staticness(value)
            if is_static is None:
                continue

            name, visibility = split_name(attr, owner)
            if not name:  # "_" and friends keep their raw name
                name = attr
            if is_reserved(name):
                continue
            out.append(MethodDescriptor(name, attr, visibility, is_static,
                                        owner.__name__))

    logger.debug("described %s: %s", cls.__name__,
                 ", ".join(d.attr for d in out) or "<no methods>")
    return out
