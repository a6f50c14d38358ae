import pytest

from ioplace.edges import Edges
from ioplace.geometry import Core, hpwl


@pytest.mark.parametrize("positions,expected",
                         [([], 0),
                          ([(5, 5)], 0),
                          ([(0, 0), (3, 4)], 7),
                          ([(3, 4), (0, 0)], 7),
                          ([(0, 10), (10, 0), (5, 5)], 20),
                          ([(-5, 0), (5, 0)], 10)])
def test_hpwl(positions, expected):
    assert hpwl(positions) == expected


def test_hpwl_accepts_iterators():
    assert hpwl(iter([(0, 0), (1, 1)])) == 2


def test_core_extent():
    core = Core(-100, -50, 100, 50)
    assert core.width == 200
    assert core.height == 100


def test_core_invalid():
    with pytest.raises(ValueError):
        Core(10, 0, 0, 10)
    with pytest.raises(ValueError):
        Core(0, 10, 10, 0)


@pytest.mark.parametrize("position,edge",
                         [((50, 0), Edges.bottom),
                          ((50, 100), Edges.top),
                          ((0, 50), Edges.left),
                          ((100, 50), Edges.right),
                          # Corners belong to the horizontal edges
                          ((0, 0), Edges.bottom),
                          ((100, 100), Edges.top),
                          # Not on the boundary
                          ((50, 50), None),
                          ((150, 0), None),
                          ((-1, 50), None)])
def test_edge_of(position, edge):
    assert Core(0, 0, 100, 100).edge_of(position) is edge


@pytest.mark.parametrize("position,mirrored",
                         [((30, 0), (30, 100)),
                          ((30, 100), (30, 0)),
                          ((0, 70), (100, 70)),
                          ((100, 70), (0, 70))])
def test_mirrored_position(position, mirrored):
    core = Core(0, 0, 100, 100)
    assert core.mirrored_position(position) == mirrored
    assert core.mirrored_position(mirrored) == position


def test_mirrored_position_centred_die():
    # A pin on the right edge of a die centred on the origin is reflected
    # through the y axis.
    core = Core(-100, -50, 100, 50)
    assert core.mirrored_position((100, 0)) == (-100, 0)


def test_mirrored_position_off_boundary():
    with pytest.raises(ValueError):
        Core(0, 0, 100, 100).mirrored_position((50, 50))
