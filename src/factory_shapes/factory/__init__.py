"""
The :class:`Factory` base: shape declaration, construction-time contract
check, dispatch to hidden methods and the product accessor.

Examples:
    A builder: one hidden creator plus hidden configuration steps.
    >>> from factory_shapes.shape import Shape
    >>> class CarBuilder(Factory, shape=Shape.BUILDER):
    ...     def _create_car(self):
    ...         self._product = {"wheels": 4}
    ...     def _paint(self, colour):
    ...         self._product["colour"] = colour

    Hidden steps are called by their bare name; ``get()`` returns the result.
    >>> builder = CarBuilder()
    >>> builder.get() is None
    True
    >>> builder.create_car()
    >>> builder.paint("red")
    >>> builder.get()
    {'wheels': 4, 'colour': 'red'}

    A type breaking its shape never produces an instance, and its
    ``__init__`` never runs:
    >>> class Leaky(Factory):
    ...     def __init__(self):
    ...         raise RuntimeError("unreachable")
    ...     def create_car(self): ...
    >>> Leaky()
    Traceback (most recent call last):
      ...
    factory_shapes.errors.PublicMethodNotAllowed: Leaky [SIMPLE]: `create` methods must be protected or private (required 0 public, got 1): create_car
"""

from __future__ import annotations

import logging
import warnings
from typing import Any

from factory_shapes.contract import validate
from factory_shapes.core.introspect import PRODUCT_ACCESSOR
from factory_shapes.dispatch import TABLE_ATTR, build_table, lookup
from factory_shapes.shape import Shape

logger = logging.getLogger(__name__)


class FactoryMeta(type):
    """
    ``Cls()``  ➜  validate ``Cls``  ➜  ``Cls.__init__``.

    Every class built by this metaclass gets its own dispatch table.
    """

    def __init__(cls, name, bases, namespace, **kwargs):
        super().__init__(name, bases, namespace)
        if bases and PRODUCT_ACCESSOR in namespace:
            warnings.warn(
                f"{name}.{PRODUCT_ACCESSOR}() replaces the product accessor "
                "and is never checked by the contract.", stacklevel=2)
        setattr(cls, TABLE_ATTR, build_table(cls))

    def __call__(cls, *args, **kwargs):
        if cls is Factory:  # prevent instantiating the abstract base
            raise TypeError("Cannot instantiate Factory directly")
        validate(cls)
        return super().__call__(*args, **kwargs)


class Factory(metaclass=FactoryMeta):
    """
    Base of every shaped factory.

    Subclasses declare ``shape`` (class attribute or class keyword) and keep
    their ``create*`` methods protected (``_create_x``) or private
    (``__create_x``). Hidden methods write ``self._product``; callers read it
    with :meth:`get`.
    """
    shape: Shape = Shape.SIMPLE
    _product: Any = None

    def __init_subclass__(cls, shape: Any = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if shape is not None:
            cls.shape = shape

    def __init__(self):
        self._product = None

    def __getattr__(self, name: str):
        # only reached when normal lookup failed
        return lookup(self, name)

    def get(self) -> Any:
        return self._product
