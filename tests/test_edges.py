import pytest

from ioplace.edges import Edges


@pytest.mark.parametrize("edge,opposite", [(Edges.bottom, Edges.top),
                                           (Edges.top, Edges.bottom),
                                           (Edges.left, Edges.right),
                                           (Edges.right, Edges.left)])
def test_opposite(edge, opposite):
    assert edge.opposite is opposite


def test_is_horizontal():
    assert Edges.bottom.is_horizontal
    assert Edges.top.is_horizontal
    assert not Edges.left.is_horizontal
    assert not Edges.right.is_horizontal


def test_reverses_group_order():
    # Only edges whose slots run in decreasing coordinate order
    assert Edges.top.reverses_group_order
    assert Edges.left.reverses_group_order
    assert not Edges.bottom.reverses_group_order
    assert not Edges.right.reverses_group_order
