"""
Rules over the validator's counters.

``Exactly[1]`` binds a rule family to its bound and hands back a class, one
per (family, bound) pair, so checks built from the same rule compare equal.

    >>> from factory_shapes.rules.predefined import Exactly
    >>> Exactly[1] is Exactly[1], Exactly[1]
    (True, Exactly[1])
    >>> Exactly[1].requirement("create_count")
    'create count exactly 1'
"""

_BOUND: dict[tuple, "RuleMeta"] = {}


class RuleMeta(type):
    """Parameterise a rule family: ``AtLeast[1]`` ➜ bound subclass of ``AtLeast``."""

    def __getitem__(cls, params):
        if not isinstance(params, tuple):
            params = (params,)
        key = (cls, params)
        if key not in _BOUND:
            label = ", ".join(map(repr, params))
            _BOUND[key] = RuleMeta(f"{cls.__name__}[{label}]", (cls,),
                                   {"__rule_params__": params})
        return _BOUND[key]

    def __repr__(cls):
        return cls.__name__

    def __call__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is used as a class, not instantiated")


class Rule(metaclass=RuleMeta):
    """
    A predicate over one counter. Families implement ``describe``,
    ``example`` and ``validate``; the bound comes from ``__rule_params__``.
    """

    __rule_params__: tuple = ()

    @classmethod
    def describe(cls) -> str: ...  # "exactly 1", "at least 1" …

    @classmethod
    def example(cls):  ...  # a counter value that passes

    @classmethod
    def validate(cls, v) -> bool: ...

    @classmethod
    def requirement(cls, counter: str) -> str:
        """What *counter* must be, phrased for error messages."""
        return f"{counter.replace('_', ' ')} {cls.describe()}"
