import pytest

from gridstash.tags import (
    EMPTY_TAG,
    GRID_FRAGMENT,
    IMAGE_FRAGMENT,
    STACKABLE_FRAGMENT,
    ZOOM_SHOES,
    GameplayTag,
)


@pytest.mark.parametrize(
    ("defined", "name"),
    [
        (ZOOM_SHOES, "GameItems.Equippable.ZoomShoes"),
        (GRID_FRAGMENT, "Fragments.Grid"),
        (IMAGE_FRAGMENT, "Fragments.Image"),
        (STACKABLE_FRAGMENT, "Fragments.Stackable"),
    ],
)
def test_defined_tag_names(defined, name):
    assert defined.name == name
    assert GameplayTag(name).matches_exact(defined) is True
    assert defined.is_valid() is True


def test_empty_tag_is_invalid():
    assert not EMPTY_TAG.is_valid()
    assert GRID_FRAGMENT.is_valid()


def test_matches_exact_same_name():
    assert GameplayTag("Fragments.Grid").matches_exact(GRID_FRAGMENT)
    assert not GRID_FRAGMENT.matches_exact(IMAGE_FRAGMENT)


def test_matches_exact_rejects_parent_tag():
    assert not GameplayTag("Fragments").matches_exact(GRID_FRAGMENT)
    assert not GRID_FRAGMENT.matches_exact(GameplayTag("Fragments"))


def test_empty_tags_never_match():
    assert not EMPTY_TAG.matches_exact(EMPTY_TAG)
    assert not GRID_FRAGMENT.matches_exact(EMPTY_TAG)
    assert not EMPTY_TAG.matches_exact(GRID_FRAGMENT)


def test_str_is_name():
    tag = GameplayTag("Fragments.Grid")
    assert str(tag) == "Fragments.Grid"
    assert tag.matches_exact(GRID_FRAGMENT) is True
    assert str(ZOOM_SHOES) == "GameItems.Equippable.ZoomShoes"