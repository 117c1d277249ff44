"""
Construction-time contracts for creational factories.

Public objects
==============
    • Factory          – base class; validated on every construction
    • Shape            – SIMPLE | ABSTRACT | METHOD | STATIC | BUILDER
    • validate         – check a class against its declared shape
    • invoke           – call a (possibly hidden) method by name
    • describe         – the method descriptors the contract is checked on
"""
import logging

from factory_shapes._config import config
from factory_shapes.contract import check_descriptors, validate, validate_with_error
from factory_shapes.core.descriptor import MethodDescriptor, Visibility
from factory_shapes.core.introspect import PRODUCT_ACCESSOR, describe
from factory_shapes.dispatch import invoke
from factory_shapes.errors import (
    ContractViolation,
    CreateMethodCountMismatch,
    FactoryShapeError,
    MethodNotFound,
    MissingNonCreateMethod,
    NonCreateMethodNotAllowed,
    NonCreateMethodsForbidden,
    PublicMethodNotAllowed,
    StaticFactoryMissingOrMiscounted,
    StaticMethodNotAllowed,
    UndefinedShape,
)
from factory_shapes.factory import Factory, FactoryMeta
from factory_shapes.shape import SHAPE_RULES, Counters, Shape

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(config["log-level"].upper())

__all__ = [
    "Factory", "FactoryMeta", "Shape", "SHAPE_RULES", "Counters",
    "MethodDescriptor", "Visibility", "PRODUCT_ACCESSOR",
    "describe", "validate", "validate_with_error", "check_descriptors", "invoke",
    "FactoryShapeError", "ContractViolation", "PublicMethodNotAllowed",
    "NonCreateMethodNotAllowed", "StaticMethodNotAllowed",
    "CreateMethodCountMismatch", "MissingNonCreateMethod",
    "NonCreateMethodsForbidden", "StaticFactoryMissingOrMiscounted",
    "UndefinedShape", "MethodNotFound",
]
