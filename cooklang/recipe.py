"""A simplified recipe made of sections, steps and notes, with lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, TypeVar, Union

from cooklang.model import (
    Cookware,
    CookwareRef,
    Ingredient,
    IngredientRef,
    Item,
    TextItem,
    Timer,
    TimerRef,
)

__all__ = [
    "Step",
    "Note",
    "Block",
    "Section",
    "CooklangRecipe",
    "Component",
    "deref_component",
    "deref_ingredient",
    "deref_cookware",
    "deref_timer",
]

_T = TypeVar("_T")


@dataclass
class Step:
    """A cooking instruction; the reference lists are taken from its items."""

    items: list[Item] = field(default_factory=list)
    ingredient_refs: list[int] = field(init=False)
    cookware_refs: list[int] = field(init=False)
    timer_refs: list[int] = field(init=False)

    def __post_init__(self) -> None:
        self.ingredient_refs = [i.index for i in self.items if isinstance(i, IngredientRef)]
        self.cookware_refs = [i.index for i in self.items if isinstance(i, CookwareRef)]
        self.timer_refs = [i.index for i in self.items if isinstance(i, TimerRef)]


@dataclass
class Note:
    """A text note within the recipe."""

    text: str


Block = Union[Step, Note]


@dataclass
class Section:
    """A part of a recipe, optionally titled.

    Its reference lists gather those of its steps, in order.
    """

    title: Optional[str] = None
    blocks: list[Block] = field(default_factory=list)
    ingredient_refs: list[int] = field(init=False)
    cookware_refs: list[int] = field(init=False)
    timer_refs: list[int] = field(init=False)

    def __post_init__(self) -> None:
        steps = [block for block in self.blocks if isinstance(block, Step)]
        self.ingredient_refs = [ref for step in steps for ref in step.ingredient_refs]
        self.cookware_refs = [ref for step in steps for ref in step.cookware_refs]
        self.timer_refs = [ref for step in steps for ref in step.timer_refs]


@dataclass
class CooklangRecipe:
    """A recipe with its metadata, sections and components."""

    metadata: dict[str, Any] = field(default_factory=dict)
    sections: list[Section] = field(default_factory=list)
    ingredients: list[Ingredient] = field(default_factory=list)
    cookware: list[Cookware] = field(default_factory=list)
    timers: list[Timer] = field(default_factory=list)


Component = Union[Ingredient, Cookware, Timer, str]


def _lookup(items: Sequence[_T], index: int, what: str) -> _T:
    if index < 0 or index >= len(items):
        raise IndexError(f"{what} index out of range: {index}")
    return items[index]


def deref_ingredient(recipe: CooklangRecipe, index: int) -> Ingredient:
    """Return the ingredient at ``index``."""
    return _lookup(recipe.ingredients, index, "ingredient")


def deref_cookware(recipe: CooklangRecipe, index: int) -> Cookware:
    """Return the cookware at ``index``."""
    return _lookup(recipe.cookware, index, "cookware")


def deref_timer(recipe: CooklangRecipe, index: int) -> Timer:
    """Return the timer at ``index``."""
    return _lookup(recipe.timers, index, "timer")


def deref_component(recipe: CooklangRecipe, item: Item) -> Component:
    """Resolve a step item to the component it refers to, or its text."""
    match item:
        case IngredientRef(index=index):
            return deref_ingredient(recipe, index)
        case CookwareRef(index=index):
            return deref_cookware(recipe, index)
        case TimerRef(index=index):
            return deref_timer(recipe, index)
        case TextItem(value=value):
            return value
    raise TypeError(f"not a step item: {item!r}")