"""Plain data types describing the components of a parsed recipe."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

__all__ = [
    "Number",
    "Range",
    "Text",
    "Empty",
    "Value",
    "Amount",
    "Ingredient",
    "Cookware",
    "Timer",
    "TextItem",
    "IngredientRef",
    "CookwareRef",
    "TimerRef",
    "Item",
    "QuantityType",
    "GroupedQuantityKey",
]


@dataclass(frozen=True)
class Number:
    """A single numeric quantity."""

    value: float


@dataclass(frozen=True)
class Range:
    """A numeric range of quantities, such as ``2-3``."""

    start: float
    end: float


@dataclass(frozen=True)
class Text:
    """A quantity that is free text, such as ``a pinch``."""

    value: str


@dataclass(frozen=True)
class Empty:
    """The absence of a quantity value."""


Value = Union[Number, Range, Text, Empty]


@dataclass(frozen=True)
class Amount:
    """A quantity value with optional units."""

    quantity: Value
    units: Optional[str] = None


@dataclass(frozen=True)
class Ingredient:
    """An ingredient used in a recipe."""

    name: str
    amount: Optional[Amount] = None
    descriptor: Optional[str] = None


@dataclass(frozen=True)
class Cookware:
    """A piece of cookware used in a recipe."""

    name: str
    amount: Optional[Amount] = None


@dataclass(frozen=True)
class Timer:
    """A timer in a recipe."""

    name: Optional[str] = None
    amount: Optional[Amount] = None


@dataclass(frozen=True)
class TextItem:
    """Plain text inside a step."""

    value: str


@dataclass(frozen=True)
class _Ref:
    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"index must be an int, not {type(self.index).__name__}")
        if self.index < 0:
            raise ValueError(f"index must not be negative: {self.index}")


@dataclass(frozen=True)
class IngredientRef(_Ref):
    """A reference, by position, to one of the recipe's ingredients."""


@dataclass(frozen=True)
class CookwareRef(_Ref):
    """A reference, by position, to one of the recipe's cookware."""


@dataclass(frozen=True)
class TimerRef(_Ref):
    """A reference, by position, to one of the recipe's timers."""


Item = Union[TextItem, IngredientRef, CookwareRef, TimerRef]


class QuantityType(enum.Enum):
    """The kind of value held in a grouped quantity."""

    NUMBER = "number"
    RANGE = "range"
    TEXT = "text"
    EMPTY = "empty"


@dataclass(frozen=True)
class GroupedQuantityKey:
    """Key grouping quantities by unit name and value kind."""

    name: str
    unit_type: QuantityType