"""
The contract gate: introspect a class, count, evaluate its shape's rules.

Examples:
    A simple factory with a single hidden creator passes silently ...
    >>> from factory_shapes.shape import Shape
    >>> class Cars:
    ...     shape = Shape.SIMPLE
    ...     def _create_car(self): ...
    >>> validate(Cars)

    ... a public creator is always rejected, whatever the shape ...
    >>> class OpenCars:
    ...     shape = Shape.BUILDER
    ...     def create_car(self): ...
    >>> validate(OpenCars)
    Traceback (most recent call last):
      ...
    factory_shapes.errors.PublicMethodNotAllowed: OpenCars [BUILDER]: `create` methods must be protected or private (required 0 public, got 1): create_car

    ... and the non-raising variant reports the first violation:
    >>> class Helpers:
    ...     shape = Shape.SIMPLE
    ...     def _create_car(self): ...
    ...     def _paint(self): ...
    >>> ok, err = validate_with_error(Helpers)
    >>> ok, type(err).__name__, err.expected, err.got
    (False, 'NonCreateMethodsForbidden', 'non create count exactly 0', 1)
    >>> validate_with_error(Cars)
    (True,)
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from factory_shapes._config import config
from factory_shapes.core.descriptor import MethodDescriptor
from factory_shapes.core.introspect import describe, is_reserved
from factory_shapes.errors import ContractViolation, PublicMethodNotAllowed
from factory_shapes.shape import Shape, count

logger = logging.getLogger(__name__)


def _fail(err: ContractViolation) -> None:
    logger.info("contract violation: %s", err)
    raise err


def check_descriptors(shape: Any,
                      descriptors: Iterable[MethodDescriptor],
                      factory: str = "<factory>") -> None:
    """
    Raise the first violation *descriptors* commit against *shape*.

    Order: public creators, then the shape value itself, then the shape's
    own checks in table order.
    """
    descriptors = list(descriptors)
    counters = count(descriptors)
    logger.debug("%s counters: %s", factory, counters)

    if counters.public_count > 0:
        prefix = config["create-prefix"]
        offenders = [d.attr for d in descriptors
                     if d.is_public and not d.is_static
                     and d.name.startswith(prefix) and not is_reserved(d.name)]
        _fail(PublicMethodNotAllowed(factory, shape=shape,
                                     expected="0 public", got=counters.public_count,
                                     methods=offenders))

    resolved = Shape.coerce(shape, factory=factory)
    check = resolved.violation(counters)
    if check is not None:
        _fail(check.error(factory, shape=resolved,
                          expected=check.rule.requirement(check.counter),
                          got=getattr(counters, check.counter)))

    logger.debug("%s satisfies %s", factory, resolved.name)


def validate(cls: type) -> None:
    """Validate *cls* against its declared ``shape`` attribute."""
    check_descriptors(getattr(cls, "shape", None), describe(cls),
                      factory=cls.__name__)


def validate_with_error(cls: type) -> tuple:
    """``(True,)`` when *cls* is valid, else ``(False, violation)``."""
    try:
        validate(cls)
    except ContractViolation as err:
        return False, err
    return (True,)
