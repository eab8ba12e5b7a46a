"""Helpers, utilities, and other miscellaneous functions and classes."""

from __future__ import annotations

import functools
import re
import sys
import types
from abc import ABC
from dataclasses import dataclass as _dtcls
from inspect import isabstract
from typing import (
    Any,
    Callable,
    Generic,
    MutableMapping,
    Pattern,
    TypeVar,
    cast,
)

from typing_extensions import TypeAlias, dataclass_transform


_dT = TypeVar("_dT")


@functools.wraps(_dtcls)
@dataclass_transform()
def slots_dataclass(*args: Any, **kwargs: Any) -> Callable[[_dT], _dT]:
    """Wrapper for dataclass decorator that adds slots if supported (py3.10+)."""
    if sys.version_info < (3, 10):
        kwargs.pop("slots", None)
    else:
        kwargs.setdefault("slots", True)
    return cast(Callable[[_dT], _dT], _dtcls(*args, **kwargs))


class _DefaultType:
    """Comparable and hashable sentinel for DEFAULT values."""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _DefaultType)

    def __hash__(self) -> int:
        return hash(self.__class__)

    def __repr__(self) -> str:
        return "DEFAULT"


DEFAULT = _DefaultType()
DefaultType: TypeAlias = _DefaultType


_ID = TypeVar("_ID")
_RT = TypeVar("_RT", bound="Registry")


class Registry(ABC, Generic[_ID, _RT]):
    """
    Abstract base class for registries of subclasses of a given class.

    A class declared with ``registry=True`` becomes the root of a new registry,
    keyed by the value of the class attribute named by ``registry_attr``.
    Concrete subclasses are registered automatically under that value,
    abstract ones (with ABC in their bases, or abstract methods) are skipped.
    """

    __registry__: MutableMapping[_ID, type[_RT]]
    __registry_attr_name__: str
    __registry_root__: type[Registry]

    @classmethod
    def is_abstract(cls) -> bool:
        """Check if the class is defined as abstract."""
        return isabstract(cls) or ABC in cls.__bases__

    def __init_subclass__(
        cls,
        *,
        registry: bool = False,
        registry_attr: str | None = None,
        **kwargs: Any,
    ):
        super().__init_subclass__(**kwargs)

        if registry:
            if not registry_attr:
                raise AttributeError(
                    f"No registry_attr specified for registry class {cls.__name__}"
                )
            cls.__registry__ = {}
            cls.__registry_attr_name__ = registry_attr
            cls.__registry_root__ = cls
            return

        registry_id: _ID | None = getattr(cls, cls.__registry_attr_name__, None)
        if registry_id is None:
            if cls.is_abstract():
                return
            raise ValueError(
                f"Cannot register {cls.__name__} in {cls.__registry_root__.__name__}, "
                f"no {cls.__registry_attr_name__} defined in the class body"
            )

        conflict_cls: type[_RT] | None = cls.__registry__.get(registry_id)
        if conflict_cls is not None:
            cls_fullname = (cls.__module__, cls.__qualname__)
            conflict_fullname = (conflict_cls.__module__, conflict_cls.__qualname__)
            # slots dataclasses are re-created, so the same class is seen twice
            if cls_fullname != conflict_fullname:
                raise NameError(
                    f"More than one {cls.__registry_root__.__name__} subclass with "
                    f'the same {cls.__registry_attr_name__} "{registry_id}" defined: '
                    f"{conflict_cls.__name__} and {cls.__name__}"
                )
        cls.__registry__[registry_id] = cast("type[_RT]", cls)

    @classmethod
    def get_registry(cls) -> types.MappingProxyType[_ID, type[_RT]]:
        """Get a read-only view of the registry mapping."""
        return types.MappingProxyType(cls.__registry__)

    @classmethod
    def __registry_get_class_for__(cls, registry_id: _ID) -> type[_RT]:
        registered_cls: type[_RT] | None = cls.__registry__.get(registry_id)
        if registered_cls is None:
            raise KeyError(
                f"No registered {cls.__registry_root__.__name__} subclass found "
                f'for {cls.__registry_attr_name__} == "{registry_id}"'
            )
        return registered_cls


# numeric scanners, mirroring the prefix-matching behavior of the C strto* family
_UINT_PAT: Pattern[str] = re.compile(r"[0-9]+")
_INT_PAT: Pattern[str] = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_PAT: Pattern[str] = re.compile(
    r"[ \t\n\v\f\r]*("
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?i:inf(?:inity)?|nan)"
    r")"
)


def scan_uint(value: str, pos: int = 0) -> tuple[int, int] | None:
    """
    Scan an unsigned decimal integer starting exactly at ``pos``.

    :return: a tuple of the integer and the position right after the last digit,
        or ``None`` if no digit is found at ``pos``.
    """
    match = _UINT_PAT.match(value, pos)
    if match is None:
        return None
    return int(match.group()), match.end()


def scan_float(value: str, pos: int = 0) -> tuple[float, int] | None:
    """
    Scan a decimal floating point number starting at ``pos``, skipping leading whitespace.

    :return: a tuple of the float and the position right after it,
        or ``None`` if no number can be read.
    """
    match = _FLOAT_PAT.match(value, pos)
    if match is None:
        return None
    return float(match.group(1)), match.end()


def atoi(value: str) -> int:
    """Convert the leading integer of a string, or return 0 when there's none."""
    match = _INT_PAT.match(value)
    return int(match.group(1)) if match else 0
