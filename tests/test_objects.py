import pytest

from questkit.objects import BaseObject, Component, GameObject, Tag


class Health(Component):
    def __init__(self):
        super().__init__()
        self.points = 10


class Shield(Component):
    pass


class BigHealth(Health):
    pass


def test_unnamed_object_is_inactive():
    obj = BaseObject()
    assert not obj
    assert str(obj) == ""


def test_named_object_is_active_and_prints_name():
    obj = BaseObject("Slime")
    assert bool(obj) is True
    assert str(obj) == "Slime"


def test_objects_compare_by_identity():
    a = BaseObject("A")
    b = BaseObject("A")
    assert a == a
    assert not (a == b)


def test_game_object_default_tag():
    obj = GameObject("Hero")
    assert obj.tag is Tag.UNTAGGED
    assert obj.active_self is True


def test_game_object_tag_kept():
    obj = GameObject("Hero", Tag.PLAYER)
    assert obj.tag is Tag.PLAYER


def test_add_component_attaches_parent():
    obj = GameObject("Hero")
    health = obj.add_component(Health)
    assert health.parent is obj
    assert obj.get_component(Health) is health


def test_get_component_matches_exact_type_only():
    obj = GameObject("Hero")
    obj.add_component(BigHealth)
    assert obj.get_component(Health) is None
    assert isinstance(obj.get_component(BigHealth), BigHealth)


def test_get_component_missing_returns_none():
    assert GameObject("Hero").get_component(Shield) is None


def test_remove_component():
    obj = GameObject("Hero")
    health = obj.add_component(Health)
    shield = obj.add_component(Shield)
    assert obj.remove_component(Health) is True
    assert obj.components() == [shield]
    assert health.parent is None
    assert obj.remove_component(Health) is False


def test_components_returns_copy():
    obj = GameObject("Hero")
    obj.add_component(Health)
    listing = obj.components()
    listing.clear()
    assert len(obj.components()) == 1


def test_clone_duplicates_components():
    obj = GameObject("Hero", Tag.PLAYER)
    original = obj.add_component(Health)
    duplicate = obj.clone()
    copied = duplicate.get_component(Health)
    assert copied is not original
    assert copied.parent is duplicate
    assert original.parent is obj
    assert duplicate.name == obj.name
    assert duplicate.tag is Tag.PLAYER
    copied.points = 1
    assert original.points == 10


def test_component_clone_keeps_parent():
    obj = GameObject("Hero")
    health = obj.add_component(Health)
    twin = health.clone()
    assert twin is not health
    assert twin.parent is obj