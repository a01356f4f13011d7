"""Enums for model fields."""

from enum import Enum


class GenderFilter(str, Enum):
    """Which sneaker lines a user wants to see in search results."""

    MEN = "men"
    WOMEN = "women"
    BOTH = "both"

    def excludes(self, other: "GenderFilter") -> bool:
        """Check if results targeted at ``other`` should be hidden."""
        return self != GenderFilter.BOTH and other not in (self, GenderFilter.BOTH)
