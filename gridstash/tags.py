"""Hierarchical gameplay tags and the tags the inventory defines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameplayTag:
    """A dotted tag name such as ``Fragments.Grid``; the empty name is no tag."""

    name: str = ""

    def is_valid(self) -> bool:
        return bool(self.name)

    def matches_exact(self, other: GameplayTag) -> bool:
        """True when ``other`` is a valid tag with exactly the same name."""
        return other.is_valid() and self.name == other.name

    def __str__(self) -> str:
        return self.name


EMPTY_TAG = GameplayTag()

ZOOM_SHOES = GameplayTag("GameItems.Equippable.ZoomShoes")

GRID_FRAGMENT = GameplayTag("Fragments.Grid")
IMAGE_FRAGMENT = GameplayTag("Fragments.Image")
STACKABLE_FRAGMENT = GameplayTag("Fragments.Stackable")