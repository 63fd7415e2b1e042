import pytest

from noname_engine.node import Node, NodeHandle, System


def test_empty_handle_is_invalid():
    handle = NodeHandle()
    assert handle.is_valid() is False
    assert handle.get() is None


def test_handle_refers_to_node():
    node = Node()
    handle = NodeHandle(node)
    assert handle.is_valid() is True
    assert handle.get() is node


def test_handles_compare_by_node_identity():
    a, b = Node(), Node()
    assert NodeHandle(a) == NodeHandle(a)
    assert not (NodeHandle(a) == NodeHandle(b))
    assert NodeHandle(a) != NodeHandle(b)
    assert NodeHandle() == NodeHandle()


def test_handles_usable_as_keys():
    node = Node()
    mapping = {NodeHandle(node): "value"}
    assert mapping[NodeHandle(node)] == "value"


def test_distinct_nodes_are_distinct():
    a, b = Node(), Node()
    assert a == a
    assert len({a, b, a}) == 2
    assert NodeHandle(a).get() is a
    assert NodeHandle(b).get() is b


def test_system_is_abstract():
    with pytest.raises(TypeError):
        System(object())


def test_system_subclass_keeps_scene_and_updates():
    class Recorder(System):
        def __init__(self, scene):
            super().__init__(scene)
            self.steps = []

        def on_update(self, dt):
            self.steps.append(dt)

    scene = Node()
    system = Recorder(scene)
    system.on_update(0.5)
    system.on_update(0.25)
    assert system.scene is scene
    assert NodeHandle(system.scene) == NodeHandle(scene)
    assert system.steps == [0.5, 0.25]