"""
Rules over the validator's counters.

    >>> Exactly[1].describe(), Exactly[1].validate(1), Exactly[1].validate(2)
    ('exactly 1', True, False)
    >>> AtLeast[1].describe(), AtLeast[1].example(), AtLeast[1].validate(0)
    ('at least 1', 1, False)
    >>> IsTrue.validate(True), IsTrue.validate(1)
    (True, False)
"""
from factory_shapes.rules import Rule


class Exactly(Rule):
    @classmethod
    def describe(cls):
        n, = cls.__rule_params__
        return f"exactly {n}"

    @classmethod
    def example(cls):
        n, = cls.__rule_params__
        return n

    @classmethod
    def validate(cls, v):
        n, = cls.__rule_params__
        return v == n


class AtLeast(Rule):
    @classmethod
    def describe(cls):
        lo, = cls.__rule_params__
        return f"at least {lo}"

    @classmethod
    def example(cls):
        lo, = cls.__rule_params__
        return lo

    @classmethod
    def validate(cls, v):
        lo, = cls.__rule_params__
        return v >= lo


class IsTrue(Rule):
    @classmethod
    def describe(cls):
        return "true"

    @classmethod
    def example(cls):
        return True

    @classmethod
    def validate(cls, v):
        return v is True
