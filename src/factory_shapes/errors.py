"""Exception hierarchy for factory_shapes.

Every contract failure is a :class:`ContractViolation` (also a ``TypeError``:
the *type definition* is wrong, not a value). The failed dispatch is a
:class:`MethodNotFound` (also an ``AttributeError`` so ``hasattr`` and
``getattr(obj, name, default)`` keep behaving).
"""

from __future__ import annotations

from typing import Any, Iterable


# ═════════════════════════════ base ═════════════════════════════════
class FactoryShapeError(Exception):
    """Root of every factory_shapes error."""


# ═══════════════════════ contract violations ═══════════════════════
class ContractViolation(FactoryShapeError, TypeError):
    """
    Raised while constructing a factory whose methods break its shape.

    Examples
    --------
    >>> err = CreateMethodCountMismatch("Parts", shape="ABSTRACT",
    ...                                 expected="at least 1", got=0)
    >>> print(err)
    Parts [ABSTRACT]: wrong number of `create` methods (required at least 1, got 0)
    >>> err.expected, err.got
    ('at least 1', 0)
    """
    summary = "factory contract violated"

    def __init__(self,
                 factory: str,
                 shape: Any = None,
                 expected: str | None = None,
                 got: Any = None,
                 methods: Iterable[str] = ()):
        self.factory = factory
        self.shape = shape
        self.expected = expected
        self.got = got
        self.methods = tuple(methods)
        super().__init__(self._message())

    def _message(self) -> str:
        head = self.factory
        if self.shape is not None:
            head += f" [{getattr(self.shape, 'name', self.shape)}]"
        msg = f"{head}: {self.summary}"
        if self.expected is not None:
            msg += f" (required {self.expected}, got {self.got!r})"
        if self.methods:
            msg += ": " + ", ".join(self.methods)
        return msg


class PublicMethodNotAllowed(ContractViolation):
    summary = "`create` methods must be protected or private"


class NonCreateMethodNotAllowed(ContractViolation):
    summary = "non `create` methods are not allowed"


class StaticMethodNotAllowed(ContractViolation):
    summary = "`static` methods are not allowed"


class CreateMethodCountMismatch(ContractViolation):
    summary = "wrong number of `create` methods"


class MissingNonCreateMethod(ContractViolation):
    summary = "at least one non `create` (configuration) method is required"


class NonCreateMethodsForbidden(ContractViolation):
    summary = "must not have non `create` methods"


class StaticFactoryMissingOrMiscounted(ContractViolation):
    summary = "must have exactly one `static` method named `factory` and nothing else"


class UndefinedShape(ContractViolation):
    summary = "undefined factory shape"


# ═══════════════════════════ dispatch ══════════════════════════════
class MethodNotFound(FactoryShapeError, AttributeError):
    """
    Raised when dynamic dispatch cannot locate *name*.

    >>> isinstance(MethodNotFound("create_car"), AttributeError)
    True
    >>> print(MethodNotFound("create_car", "CarFactory"))
    Method 'create_car' does not exist on CarFactory.
    """

    def __init__(self, name: str, factory: str | None = None):
        msg = f"Method '{name}' does not exist"
        msg += f" on {factory}." if factory else "."
        super().__init__(msg)
        self.name = name
        self.factory = factory
