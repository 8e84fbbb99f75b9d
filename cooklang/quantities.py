"""Grouping and summing of ingredient quantities for shopping lists.

A grouped quantity maps a :class:`GroupedQuantityKey` (unit name and value
kind) to a value. Quantities with the same key are added together. Those
with different units or value kinds are kept apart.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from cooklang.model import (
    Amount,
    Empty,
    GroupedQuantityKey,
    Ingredient,
    Number,
    QuantityType,
    Range,
    Text,
    Value,
)

__all__ = [
    "GroupedQuantity",
    "IngredientList",
    "into_group_quantity",
    "merge_grouped_quantities",
    "add_to_ingredient_list",
    "merge_ingredient_lists",
    "expand_with_ingredients",
    "combine_ingredients",
    "combine_ingredients_selected",
]

GroupedQuantity = dict[GroupedQuantityKey, Value]
IngredientList = dict[str, GroupedQuantity]

_KIND_OF = {
    Number: QuantityType.NUMBER,
    Range: QuantityType.RANGE,
    Text: QuantityType.TEXT,
    Empty: QuantityType.EMPTY,
}

_TYPE_OF = {kind: cls for cls, kind in _KIND_OF.items()}


def into_group_quantity(amount: Optional[Amount]) -> GroupedQuantity:
    """Return a one-entry grouped quantity for ``amount``.

    A missing amount, or missing units, groups under the empty unit name.
    """
    if amount is None:
        return {GroupedQuantityKey("", QuantityType.EMPTY): Empty()}
    try:
        kind = _KIND_OF[type(amount.quantity)]
    except KeyError:
        raise TypeError(f"not a quantity value: {amount.quantity!r}") from None
    key = GroupedQuantityKey(amount.units or "", kind)
    return {key: amount.quantity}


def _check(key: GroupedQuantityKey, value: Value) -> None:
    expected = _TYPE_OF[key.unit_type]
    if not isinstance(value, expected):
        raise TypeError(
            f"value {value!r} does not match quantity type {key.unit_type.name}"
        )


def _add(key: GroupedQuantityKey, stored: Value, extra: Value) -> Value:
    _check(key, stored)
    _check(key, extra)
    if isinstance(stored, Number) and isinstance(extra, Number):
        return Number(stored.value + extra.value)
    if isinstance(stored, Range) and isinstance(extra, Range):
        return Range(stored.start + extra.start, stored.end + extra.end)
    if isinstance(stored, Text) and isinstance(extra, Text):
        return Text(stored.value + extra.value)
    return stored


def merge_grouped_quantities(
    left: GroupedQuantity, right: Mapping[GroupedQuantityKey, Value]
) -> None:
    """Add every entry of ``right`` into ``left`` in place.

    Numbers are summed, ranges are summed bound by bound, texts are joined
    and empty values stay empty. A value whose kind does not match its key
    raises :class:`TypeError`.
    """
    for key, value in right.items():
        if key in left:
            left[key] = _add(key, left[key], value)
        else:
            left[key] = value


def add_to_ingredient_list(
    ingredient_list: IngredientList,
    name: str,
    quantity: Mapping[GroupedQuantityKey, Value],
) -> None:
    """Add ``quantity`` of ingredient ``name`` to ``ingredient_list`` in place."""
    if name in ingredient_list:
        merge_grouped_quantities(ingredient_list[name], quantity)
    else:
        ingredient_list[name] = dict(quantity)


def merge_ingredient_lists(
    left: IngredientList, right: Mapping[str, Mapping[GroupedQuantityKey, Value]]
) -> None:
    """Add every ingredient of ``right`` into ``left`` in place."""
    for name, grouped in right.items():
        merge_grouped_quantities(left.setdefault(name, {}), grouped)


def expand_with_ingredients(
    ingredients: Sequence[Ingredient],
    base: IngredientList,
    addition: Iterable[int],
) -> None:
    """Add the ingredients at the positions in ``addition`` to ``base``."""
    for index in addition:
        if index < 0 or index >= len(ingredients):
            raise IndexError(f"ingredient index out of range: {index}")
        ingredient = ingredients[index]
        add_to_ingredient_list(
            base, ingredient.name, into_group_quantity(ingredient.amount)
        )


def combine_ingredients_selected(
    ingredients: Sequence[Ingredient], indices: Iterable[int]
) -> IngredientList:
    """Combine the ingredients at ``indices``, grouped by name."""
    combined: IngredientList = {}
    expand_with_ingredients(ingredients, combined, indices)
    return combined


def combine_ingredients(ingredients: Sequence[Ingredient]) -> IngredientList:
    """Combine all ``ingredients``, grouped by name and summed by unit."""
    return combine_ingredients_selected(ingredients, range(len(ingredients)))