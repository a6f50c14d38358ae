"""Geometry of the die boundary on which I/O pins are placed.
"""

from .edges import Edges


def hpwl(positions):
    """Get the half-perimeter wire length of the bounding box of a set of
    points.

    Parameters
    ----------
    positions : iterable([(x, y), ...])

    Returns
    -------
    int
        Zero if fewer than two points are given.
    """
    positions = iter(positions)
    try:
        x1, y1 = x2, y2 = next(positions)
    except StopIteration:
        return 0

    for x, y in positions:
        x1 = x if x < x1 else x1
        y1 = y if y < y1 else y1
        x2 = x if x > x2 else x2
        y2 = y if y > y2 else y2

    return (x2 - x1) + (y2 - y1)


class Core(object):
    """The rectangular boundary of a die.

    Attributes
    ----------
    x_min, y_min, x_max, y_max : int
        The (inclusive) extent of the boundary in database units.
    """

    __slots__ = ["x_min", "y_min", "x_max", "y_max"]

    def __init__(self, x_min, y_min, x_max, y_max):
        if x_min > x_max or y_min > y_max:
            raise ValueError(
                "Boundary ({}, {}, {}, {}) has negative extent.".format(
                    x_min, y_min, x_max, y_max))
        self.x_min = x_min
        self.y_min = y_min
        self.x_max = x_max
        self.y_max = y_max

    @property
    def width(self):
        return self.x_max - self.x_min

    @property
    def height(self):
        return self.y_max - self.y_min

    def edge_of(self, position):
        """Get the edge a position lies on.

        Corners are attributed to the bottom or top edge.

        Returns
        -------
        :py:class:`~ioplace.edges.Edges` or None
            None if the position is not on the boundary.
        """
        x, y = position
        if not (self.x_min <= x <= self.x_max and
                self.y_min <= y <= self.y_max):
            return None
        if y == self.y_min:
            return Edges.bottom
        elif y == self.y_max:
            return Edges.top
        elif x == self.x_min:
            return Edges.left
        elif x == self.x_max:
            return Edges.right
        else:
            return None

    def mirrored_position(self, position):
        """Reflect a boundary position onto the opposite edge of the die.

        Positions on the bottom (top) edge keep their x-coordinate and move to
        the top (bottom) edge. Positions on the left (right) edge keep their
        y-coordinate and move to the right (left) edge.

        Raises
        ------
        ValueError
            If the position does not lie on the boundary.
        """
        x, y = position
        edge = self.edge_of(position)
        if edge is Edges.bottom:
            return (x, self.y_max)
        elif edge is Edges.top:
            return (x, self.y_min)
        elif edge is Edges.left:
            return (self.x_max, y)
        elif edge is Edges.right:
            return (self.x_min, y)
        else:
            raise ValueError(
                "{} is not on the die boundary.".format(position))

    def __repr__(self):
        return "<{} ({}, {}) - ({}, {})>".format(
            self.__class__.__name__,
            self.x_min, self.y_min, self.x_max, self.y_max)
