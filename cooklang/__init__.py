"""Cooklang aisle configuration parsing, recipe model types, quantity combining and formatting."""

__version__ = "0.17.11"

__all__ = ["aisle", "formatting", "model", "quantities", "recipe", "shopping"]