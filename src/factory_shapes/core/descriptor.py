from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Visibility(Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


@dataclass(frozen=True)
class MethodDescriptor:
    """
    One method as seen by the validator.

    ``name`` is the *bare* name (leading underscores / private mangling
    removed), ``attr`` the attribute that actually holds the callable.

    Example:
        >>> d = MethodDescriptor("create_car", "_create_car", Visibility.PROTECTED, False)
        >>> d.is_public, d.is_hidden
        (False, True)
    """
    name:       str
    attr:       str
    visibility: Visibility
    is_static:  bool
    owner:      str = ""

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC

    @property
    def is_hidden(self) -> bool:
        return not self.is_public
