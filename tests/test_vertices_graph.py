import pytest

from etudes.poetic.vertices_graph import ConcreteVerticesGraph, Vertex


@pytest.fixture
def vertices():
    return Vertex(1), Vertex(2), Vertex(3)


@pytest.fixture
def graph():
    return ConcreteVerticesGraph()


def test_vertex_constructor_keeps_label():
    vertex = Vertex(1)
    assert vertex.label == 1
    assert vertex.get_targets() == {}


def test_vertex_set_target(vertices):
    v1, v2, v3 = vertices

    assert v1.set_target(v2, 10) == 0
    assert len(v1.get_targets()) == 1
    assert len(v2.get_sources()) == 1
    assert v1.get_targets()[2] == 10
    assert v2.get_sources()[1] == 10

    assert v1.set_target(v2, 0) == 10
    assert len(v1.get_targets()) == 0
    assert len(v2.get_sources()) == 0

    assert v1.set_target(v3, 3) == 0
    assert v1.set_target(v3, 5) == 3
    assert len(v1.get_targets()) == 1
    assert len(v3.get_sources()) == 1
    assert v1.get_targets()[3] == 5
    assert v3.get_sources()[1] == 5

    with pytest.raises(ValueError):
        v3.set_target(v1, -1)


def test_vertex_set_target_zero_on_missing_edge(vertices):
    v1, v2, _ = vertices
    assert v1.set_target(v2, 0) == 0
    assert v1.get_targets() == {}
    assert v2.get_sources() == {}


def test_vertex_get_sources(vertices):
    v1, v2, v3 = vertices

    assert len(v1.get_sources()) == 0
    assert len(v2.get_sources()) == 0
    assert len(v3.get_sources()) == 0

    assert v1.set_target(v2, 10) == 0
    assert v1.set_target(v3, 5) == 0
    assert len(v2.get_sources()) == 1
    assert len(v3.get_sources()) == 1
    assert v2.get_sources()[1] == 10
    assert v3.get_sources()[1] == 5

    assert v1.set_target(v2, 0) == 10
    assert len(v2.get_sources()) == 0
    assert len(v3.get_sources()) == 1
    assert v3.get_sources()[1] == 5


def test_empty_graph_has_no_vertices():
    assert len(ConcreteVerticesGraph().vertices()) == 0


def test_add(graph):
    assert graph.add(1) is True
    assert graph.add(1) is False


def test_set(graph):
    assert graph.set(1, 2, 3) == 0
    assert graph.targets(1)[2] == 3
    assert len(graph.vertices()) == 2

    assert graph.set(1, 2, 10) == 3
    assert graph.targets(1)[2] == 10
    assert len(graph.vertices()) == 2

    assert graph.set(1, 2, 0) == 10
    assert len(graph.targets(1)) == 0

    with pytest.raises(ValueError):
        graph.set(1, 2, -1)


def test_remove(graph):
    assert graph.remove(1) is False

    graph.set(1, 2, 10)
    assert graph.remove(2) is True
    assert len(graph.vertices()) == 1
    assert len(graph.targets(1)) == 0


def test_remove_drops_incoming_and_outgoing_edges(graph):
    graph.set(1, 2, 1)
    graph.set(2, 3, 2)
    graph.set(3, 1, 3)
    assert graph.remove(2) is True
    assert graph.targets(1) == {}
    assert graph.sources(3) == {}
    assert graph.targets(3) == {1: 3}
    assert graph.vertices() == {1, 3}


def test_vertices(graph):
    assert len(graph.vertices()) == 0

    for v in range(1, 6):
        graph.add(v)
    graph.remove(2)
    assert graph.vertices() == {1, 3, 4, 5}


def test_sources(graph):
    assert len(graph.sources(1)) == 0

    graph.add(1)
    assert len(graph.sources(1)) == 0

    for i in range(2, 10):
        graph.set(i, 1, i)
    assert graph.sources(1) == {i: i for i in range(2, 10)}

    graph.set(3, 1, 0)
    graph.set(9, 1, 0)
    assert graph.sources(1) == {i: i for i in range(2, 10) if i not in (3, 9)}


def test_targets(graph):
    assert len(graph.targets(1)) == 0

    graph.add(1)
    assert len(graph.targets(1)) == 0

    for i in range(2, 10):
        graph.set(1, i, i)
    assert graph.targets(1) == {i: i for i in range(2, 10)}

    graph.set(1, 3, 0)
    graph.set(1, 9, 0)
    assert graph.targets(1) == {i: i for i in range(2, 10) if i not in (3, 9)}