"""Identifiers for the edges of a die."""

from enum import IntEnum


class Edges(IntEnum):
    """Enumeration of the four edges of a rectangular die.

    The edges are numbered anticlockwise starting from the bottom edge, in the
    same order as slots are conventionally generated around the periphery.
    """

    bottom = 0
    right = 1
    top = 2
    left = 3

    @property
    def opposite(self):
        """The edge on the other side of the die."""
        return Edges((self + 2) % 4)

    @property
    def is_horizontal(self):
        """True for the bottom and top edges (along which x varies)."""
        return self in (Edges.bottom, Edges.top)

    @property
    def reverses_group_order(self):
        """True for edges on which ordered pin groups are laid out in reverse
        slot order.

        Slots on the top and left edges are generated walking anticlockwise,
        i.e. in decreasing coordinate order, so an ordered group must be
        filled back-to-front to keep its members in increasing coordinate
        order.
        """
        return self in (Edges.top, Edges.left)
