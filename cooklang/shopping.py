"""Shopping aisle lookup built on the aisle configuration parser."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from cooklang import aisle

__all__ = [
    "AisleIngredient",
    "AisleCategory",
    "AisleConfig",
    "into_category",
    "parse_aisle_config",
]

_log = logging.getLogger(__name__)


@dataclass
class AisleIngredient:
    """An ingredient with its name and aliases."""

    name: str
    aliases: list[str] = field(default_factory=list)


@dataclass
class AisleCategory:
    """A shopping aisle category and its ingredients."""

    name: str
    ingredients: list[AisleIngredient] = field(default_factory=list)


@dataclass
class AisleConfig:
    """Aisle categories with a lookup from ingredient name to category."""

    categories: list[AisleCategory] = field(default_factory=list)
    cache: dict[str, str] = field(default_factory=dict)

    def category_for(self, ingredient_name: str) -> Optional[str]:
        """Return the category of an ingredient, or ``None`` if unknown."""
        return self.cache.get(ingredient_name)


def into_category(category: aisle.Category) -> AisleCategory:
    """Convert a parsed category; the first name of each ingredient is its name."""
    ingredients = []
    for ingredient in category.ingredients:
        if not ingredient.names:
            raise ValueError(f"ingredient without names in category {category.name!r}")
        name, *aliases = ingredient.names
        ingredients.append(AisleIngredient(name, aliases))
    return AisleCategory(category.name, ingredients)


def parse_aisle_config(text: str) -> AisleConfig:
    """Parse an aisle configuration leniently, logging any warnings."""
    parsed, diagnostics = aisle.parse_lenient(text)
    for diagnostic in diagnostics:
        _log.warning("Warning: %s", diagnostic)

    categories = []
    cache: dict[str, str] = {}
    for parsed_category in parsed.categories:
        category = into_category(parsed_category)
        for ingredient in category.ingredients:
            cache[ingredient.name] = category.name
            for alias in ingredient.aliases:
                cache[alias] = category.name
        categories.append(category)

    return AisleConfig(categories, cache)