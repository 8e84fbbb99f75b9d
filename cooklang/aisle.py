"""Parser and writer for the shopping list aisle configuration format.

The format groups ingredients into categories (aisles)::

    [produce]
    potatoes
    tuna|chicken of the sea   // synonyms share a line

Lines may carry ``//`` comments. The first name on an ingredient line is its
common name; the rest are synonyms.
"""

from __future__ import annotations

import enum
import io
import warnings
from dataclasses import dataclass, field
from typing import Iterator, Optional, TextIO

__all__ = [
    "Span",
    "Severity",
    "Diagnostic",
    "AisleConfError",
    "AisleParseError",
    "DuplicateCategoryError",
    "DuplicateIngredientError",
    "Ingredient",
    "Category",
    "IngredientInfo",
    "AisleConf",
    "parse",
    "parse_lenient",
    "write",
    "dumps",
]

# Characters removed by an ASCII-only trim of a line.
_ASCII_WHITESPACE = " \t\n\r\x0c"


@dataclass(frozen=True)
class Span:
    """A half-open range ``[start, end)`` of character offsets into the input."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


class Severity(enum.Enum):
    """How serious a diagnostic is."""

    ERROR = "error"
    WARNING = "warning"


Label = tuple[Span, Optional[str]]


@dataclass(frozen=True)
class Diagnostic:
    """A message about a location in the input."""

    severity: Severity
    message: str
    labels: tuple[Label, ...] = ()
    hints: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.message


class AisleConfError(Exception):
    """Base class of the errors raised by :func:`parse`."""

    severity = Severity.ERROR

    def labels(self) -> list[Label]:
        """Locations in the input relevant to this error."""
        return []

    def hints(self) -> list[str]:
        """Suggestions to fix the error."""
        return []


class AisleParseError(AisleConfError):
    """The input is not valid aisle configuration."""

    def __init__(self, span: Span, message: str) -> None:
        super().__init__(f"Error parsing input: {message}")
        self.span = span
        self.message = message

    def labels(self) -> list[Label]:
        return [(self.span, None)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AisleParseError):
            return NotImplemented
        return (self.span, self.message) == (other.span, other.message)

    __hash__ = None  # type: ignore[assignment]


class _DuplicateError(AisleConfError):
    _what = ""

    def __init__(self, name: str, first_span: Span, second_span: Span) -> None:
        super().__init__(f"Duplicate {self._what}: '{name}'")
        self.name = name
        self.first_span = first_span
        self.second_span = second_span

    def labels(self) -> list[Label]:
        return [
            (self.second_span, f"this {self._what}"),
            (self.first_span, "was first defined here"),
        ]

    def hints(self) -> list[str]:
        return [f"Remove the duplicate {self._what}"]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.name, self.first_span, self.second_span) == (
            other.name,  # type: ignore[attr-defined]
            other.first_span,  # type: ignore[attr-defined]
            other.second_span,  # type: ignore[attr-defined]
        )

    __hash__ = None  # type: ignore[assignment]


class DuplicateCategoryError(_DuplicateError):
    """A category name appears twice."""

    _what = "category"


class DuplicateIngredientError(_DuplicateError):
    """An ingredient name appears twice."""

    _what = "ingredient"


@dataclass
class Ingredient:
    """An ingredient entry: its common name followed by synonyms."""

    names: list[str] = field(default_factory=list)


@dataclass
class Category:
    """A category, or aisle, with its ingredients."""

    name: str
    ingredients: list[Ingredient] = field(default_factory=list)


@dataclass(frozen=True)
class IngredientInfo:
    """Where an ingredient name belongs in an aisle configuration."""

    name: str
    common_name: str
    category: str


@dataclass
class AisleConf:
    """A parsed aisle configuration."""

    categories: list[Category] = field(default_factory=list)

    def ingredients_info(self) -> dict[str, IngredientInfo]:
        """Map every ingredient name, synonyms included, to its info."""
        info: dict[str, IngredientInfo] = {}
        for category in self.categories:
            for ingredient in category.ingredients:
                if not ingredient.names:
                    continue
                common_name = ingredient.names[0]
                for name in ingredient.names:
                    info[name] = IngredientInfo(name, common_name, category.name)
        return info

    def reverse(self) -> dict[str, str]:
        """Deprecated: map each ingredient name to the name of its info entry.

        Use :meth:`ingredients_info` instead.
        """
        warnings.warn(
            "reverse() is deprecated, use ingredients_info() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return {name: info.name for name, info in self.ingredients_info().items()}


def _lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, line)`` for each line, without line terminators."""
    offset = 0
    for raw in text.split("\n"):
        line = raw[:-1] if raw.endswith("\r") else raw
        yield offset, line
        offset += len(raw) + 1


def _parse(text: str, diagnostics: Optional[list[Diagnostic]]) -> AisleConf:
    """Parse ``text``; with ``diagnostics`` given, problems become warnings."""
    lenient = diagnostics is not None

    def warn(message: str, span: Span, label: str) -> None:
        assert diagnostics is not None
        diagnostics.append(
            Diagnostic(Severity.WARNING, message, ((span, label),))
        )

    categories: list[Category] = []
    current: Optional[Category] = None
    used_categories: dict[str, Span] = {}
    used_names: dict[str, Span] = {}

    for line_start, line in _lines(text):
        comment = line.find("//")
        if comment != -1:
            line = line[:comment]
        stripped = line.lstrip(_ASCII_WHITESPACE)
        start = line_start + len(line) - len(stripped)
        line = stripped.rstrip(_ASCII_WHITESPACE)
        line_span = Span(start, start + len(line))

        if line.startswith("[") and line.endswith("]"):
            name = line[1:-1]
            span = Span(start + 1, start + 1 + len(name))
            if "|" in name:
                if lenient:
                    warn(
                        "Invalid category name: contains '|' character",
                        span,
                        "category names cannot contain '|'",
                    )
                    continue
                raise AisleParseError(span, "Invalid category name")
            if name in used_categories:
                if lenient:
                    warn(
                        f"Duplicate category: '{name}'",
                        span,
                        "duplicate found here",
                    )
                    continue
                raise DuplicateCategoryError(name, used_categories[name], span)
            used_categories[name] = span
            if current is not None:
                categories.append(current)
            current = Category(name)
        elif line:
            names: list[str] = []
            pos = 0
            for piece in line.split("|"):
                piece_start = start + pos
                pos += len(piece) + 1
                name = piece.strip()
                name_start = piece_start + len(piece) - len(piece.lstrip())
                span = Span(name_start, name_start + len(name))
                if name in used_names:
                    if lenient:
                        warn(
                            f"Duplicate ingredient: '{name}'",
                            span,
                            "duplicate found here",
                        )
                        continue
                    raise DuplicateIngredientError(name, used_names[name], span)
                used_names[name] = span
                names.append(name)

            if not names:
                continue
            if current is not None:
                current.ingredients.append(Ingredient(names))
            elif lenient:
                warn(
                    "Ingredient found before any category",
                    line_span,
                    "add a category before listing ingredients",
                )
            else:
                raise AisleParseError(line_span, "Expected category")

    if current is not None:
        categories.append(current)
    return AisleConf(categories)


def parse(text: str) -> AisleConf:
    """Parse an aisle configuration, raising :class:`AisleConfError` on problems."""
    return _parse(text, None)


def parse_lenient(text: str) -> tuple[AisleConf, list[Diagnostic]]:
    """Parse an aisle configuration, turning problems into warnings.

    Offending entries are skipped. Returns the configuration and the warnings.
    """
    diagnostics: list[Diagnostic] = []
    conf = _parse(text, diagnostics)
    return conf, diagnostics


def write(conf: AisleConf, stream: TextIO) -> None:
    """Write ``conf`` to ``stream`` in the aisle configuration format."""
    for category in conf.categories:
        stream.write(f"[{category.name}]\n")
        for ingredient in category.ingredients:
            if ingredient.names:
                stream.write("|".join(ingredient.names) + "\n")
        stream.write("\n")


def dumps(conf: AisleConf) -> str:
    """Return ``conf`` in the aisle configuration format."""
    buffer = io.StringIO()
    write(conf, buffer)
    return buffer.getvalue()