"""
Reach hidden methods through their bare name.

Examples:
    >>> class Cars:
    ...     def _create_car(self, colour):
    ...         return f"{colour} car"
    ...     def __tune(self):
    ...         return "tuned"
    >>> sorted(build_table(Cars).items())
    [('_Cars__tune', '_Cars__tune'), ('_create_car', '_create_car'), ('create_car', '_create_car'), ('tune', '_Cars__tune')]
    >>> invoke(Cars(), "create_car", "red")
    'red car'
    >>> invoke(Cars(), "tune")
    'tuned'
    >>> invoke(Cars(), "create_bus")
    Traceback (most recent call last):
      ...
    factory_shapes.errors.MethodNotFound: Method 'create_bus' does not exist on Cars.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

from factory_shapes.core.introspect import describe
from factory_shapes.errors import MethodNotFound

logger = logging.getLogger(__name__)

TABLE_ATTR = "__dispatch__"


def build_table(cls: type) -> dict[str, str]:
    """
    ``{callable name ➜ attribute}`` for every method of *cls*.

    Real attribute names always map to themselves; hidden methods are also
    reachable through their bare name (first one in MRO order wins).
    """
    descriptors = describe(cls)
    table = {d.attr: d.attr for d in descriptors}
    for d in descriptors:
        if d.is_hidden:
            table.setdefault(d.name, d.attr)
    return table


_MISSING = object()


def _resolve(instance: Any, table: dict[str, str], name: str) -> str | None:
    attr = table.get(name)
    if attr is None or inspect.getattr_static(instance, attr, _MISSING) is _MISSING:
        return None
    return attr


def lookup(instance: Any, name: str):
    """
    Bound hidden method registered under *name* or :class:`MethodNotFound`.

    A miss, or an entry whose attribute is gone, rebuilds the table first:
    the class may have gained or lost methods since it was created.
    """
    cls = type(instance)
    stored = vars(cls).get(TABLE_ATTR)
    attr = _resolve(instance, stored, name) if stored is not None else None
    if attr is None:
        table = build_table(cls)
        if stored is not None:
            setattr(cls, TABLE_ATTR, table)
        attr = _resolve(instance, table, name)
    if attr is None:
        raise MethodNotFound(name, cls.__name__)
    logger.debug("dispatch %s.%s ➜ %s", cls.__name__, name, attr)
    return getattr(instance, attr)


def invoke(instance: Any, name: str, *args) -> Any:
    """
    Call *name* on *instance* with *args* forwarded positionally.

    A public callable member is used as-is; anything else goes through the
    dispatch table.
    """
    if not name.startswith("_"):
        member = inspect.getattr_static(instance, name, None)
        if member is not None and callable(getattr(instance, name)):
            return getattr(instance, name)(*args)
    return lookup(instance, name)(*args)
