# cooklang

Helpers for Cooklang shopping lists and recipe data in Python. The package
parses and writes aisle configurations, models recipe components, combines
ingredient quantities and formats quantity values. It has no dependencies
beyond the standard library.

## Aisle configuration (`cooklang.aisle`)

An aisle configuration groups ingredients into shop categories. Each
category name goes in square brackets. Synonyms for one ingredient share a
line and are separated by `|`. Text after `//` is a comment.

```
[produce]
potatoes
apple gala | apples   // the first name is the common name

[dairy]
milk
butter
```

```python
from cooklang import aisle

conf = aisle.parse(text)
for category in conf.categories:
    print(category.name, [i.names for i in category.ingredients])

info = conf.ingredients_info()
info["apples"].common_name   # "apple gala"
info["apples"].category      # "produce"

text_again = aisle.dumps(conf)     # or aisle.write(conf, stream)
```

`aisle.parse` raises an `AisleConfError` when the input is bad:

- `AisleParseError`: a category name contains `|`, or an ingredient comes
  before any category.
- `DuplicateCategoryError`: a category appears twice.
- `DuplicateIngredientError`: an ingredient name appears twice.

Each error has `labels()`, which gives `(Span, label)` pairs pointing into
the input, and `hints()`. The duplicate errors also have `name`,
`first_span` and `second_span`.

`aisle.parse_lenient(text)` does not raise. It skips the offending entries
and returns `(conf, diagnostics)`. Each diagnostic is a `Diagnostic` with
`Severity.WARNING`.

`AisleConf.reverse()` is deprecated in favour of `ingredients_info()`.

## Aisle lookup (`cooklang.shopping`)

```python
from cooklang.shopping import parse_aisle_config

config = parse_aisle_config(text)
config.category_for("eggs")          # category name, or None
config.categories[0].ingredients[0]  # AisleIngredient(name=..., aliases=[...])
```

`parse_aisle_config` parses leniently. Any warnings go to the
`cooklang.shopping` logger.

## Recipe model (`cooklang.model`, `cooklang.recipe`)

`cooklang.model` defines the following types:

- Quantity values: `Number`, `Range`, `Text` and `Empty`.
- `Amount`, which is a value with optional units.
- The components `Ingredient`, `Cookware` and `Timer`.
- The step items `TextItem`, `IngredientRef`, `CookwareRef` and `TimerRef`.

`cooklang.recipe` builds on these:

- `Step`, `Note`, `Section` and `CooklangRecipe`. A step collects the
  reference indices found in its items. A section collects those of its
  steps.
- `deref_component`, `deref_ingredient`, `deref_cookware` and `deref_timer`
  resolve references. They raise `IndexError` when an index is out of range.

## Combining quantities (`cooklang.quantities`)

`combine_ingredients(ingredients)` groups ingredients by name. Within each
name, it keys quantities by `GroupedQuantityKey(unit name, QuantityType)`
and combines the values as follows:

- Numbers are summed.
- Ranges are summed bound by bound.
- Texts are joined.
- Empty values stay empty.

`combine_ingredients_selected` does the same for chosen indices.
`merge_ingredient_lists` and `merge_grouped_quantities` merge in place.

## Formatting values (`cooklang.formatting`)

```python
from cooklang.formatting import format_value, format_amount, parse_value
from cooklang.model import Amount, Number

format_value(Number(1.5))                  # "1 1/2"
format_value(Number(0.89999999999))        # "0.9"
format_amount(Amount(Number(0.666667), "cups"))  # "2/3 cups"
parse_value("1/2 - 3/4")                   # Range(start=0.5, end=0.75)
parse_value("pinch")                       # Text(value="pinch")
```

## What this package does not do

This package does not parse Cooklang recipe text. You build `CooklangRecipe`
values and their components yourself. The package also does not convert
units, scale recipes, interpret recipe metadata or provide a command-line
tool.