"""Schema definition and DDL compilation."""

from .blueprint import Blueprint, BlueprintIndex, BlueprintOptions
from .field import BlueprintField
from .schema import Schema

__all__ = [
    "Blueprint",
    "BlueprintField",
    "BlueprintIndex",
    "BlueprintOptions",
    "Schema",
]
