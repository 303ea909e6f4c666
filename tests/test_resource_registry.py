import pytest

from sowa.resource import Resource
from sowa.resource_registry import ResourceRegistry


class Dummy(Resource):
    pass


class Other(Resource):
    pass


@pytest.fixture
def registry():
    reg = ResourceRegistry()
    reg.add_resource_type(Dummy, "Dummy")
    return reg


def test_create_by_name_and_type(registry):
    by_name = registry.create_resource("Dummy")
    by_type = registry.create_resource(Dummy)
    assert type(by_name) is Dummy
    assert type(by_type) is Dummy
    assert by_name.rid == 0
    assert registry.get_type_name(type(by_name)) == "Dummy"
    assert registry.create_resource("Dummy") is not registry.create_resource("Dummy")


def test_create_unknown(registry):
    assert registry.create_resource("Nope") is None
    assert registry.create_resource(Other) is None


def test_new_resource(registry):
    assert isinstance(registry.new_resource(Dummy), Dummy)
    assert registry.new_resource(Other) is None


def test_type_name(registry):
    assert registry.get_type_name(Dummy) == "Dummy"
    assert registry.get_type_name(Other) == ""


def test_add_resource_assigns_id(registry):
    res = Dummy()
    registry.add_resource(res)
    assert res.rid != 0
    assert registry.get_resource(res.rid) is res


def test_add_resource_with_explicit_id(registry):
    res = Dummy(3)
    registry.add_resource(res, 42)
    assert res.rid == 42
    assert registry.get_resource(42) is res


def test_add_resource_keeps_existing_id(registry):
    res = Dummy(7)
    registry.add_resource(res)
    assert registry.get_resource(7) is res


def test_get_missing_resource(registry):
    assert registry.get_resource(12345) is None


def test_get_resources_is_a_copy(registry):
    res = Dummy()
    registry.add_resource(res, 5)
    copy = registry.get_resources()
    copy.clear()
    assert registry.get_resources() == {5: res}


def test_remove_resource(registry):
    first, second = Dummy(), Dummy()
    registry.add_resource(first, 1)
    registry.add_resource(second, 2)
    registry.remove_resource(first)
    registry.remove_resource_by_id(2)
    assert registry.get_resources() == {}


def test_remove_resource_ignores_other_object_with_same_id(registry):
    kept = Dummy()
    registry.add_resource(kept, 9)
    registry.remove_resource(Dummy(9))
    assert registry.get_resource(9) is kept