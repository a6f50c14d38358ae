"""The I/O pins to be placed, their groups and mirror relations and the
wirelength cost of placing a pin at a given position.
"""

from .geometry import hpwl

from .matching.cost_matrix import FAIL


class Interval(object):
    """A range of the die boundary to which a pin is restricted.

    Attributes
    ----------
    edge : :py:class:`~ioplace.edges.Edges`
    begin, end : int
        The inclusive range of coordinates along the edge (x-coordinates for
        horizontal edges, y-coordinates for vertical ones).
    """

    __slots__ = ["edge", "begin", "end"]

    def __init__(self, edge, begin, end):
        self.edge = edge
        self.begin = min(begin, end)
        self.end = max(begin, end)

    def contains(self, core, position):
        """Test whether a boundary position lies within this interval."""
        if core.edge_of(position) != self.edge:
            return False
        x, y = position
        coordinate = x if self.edge.is_horizontal else y
        return self.begin <= coordinate <= self.end

    def __repr__(self):
        return "<{} {} [{}, {}]>".format(self.__class__.__name__,
                                         self.edge.name, self.begin, self.end)


class IOPin(object):
    """A top-level I/O terminal to be placed on the die boundary.

    Attributes
    ----------
    name : str
    term : object
        The external identity of the terminal. Used as the key of mirror
        relations. Defaults to the pin's name.
    sinks : [(x, y), ...]
        Positions of the cells connected to the pin's net.
    constraint : :py:class:`~ioplace.netlist.Interval` or None
        If given, the pin may only be placed within this interval.
    position : (x, y) or None
    layer : int or None
    placed : bool
    group : int or None
        Index of the :py:class:`~ioplace.netlist.PinGroup` the pin belongs to.
    """

    __slots__ = ["name", "term", "sinks", "constraint",
                 "position", "layer", "placed", "group"]

    def __init__(self, name, sinks=(), constraint=None, term=None):
        self.name = name
        self.term = term if term is not None else name
        self.sinks = [tuple(s) for s in sinks]
        self.constraint = constraint
        self.position = None
        self.layer = None
        self.placed = False
        self.group = None

    @property
    def in_group(self):
        return self.group is not None

    def place(self, slot):
        """Place the pin at a slot's position and layer."""
        self.position = slot.position
        self.layer = slot.layer
        self.placed = True

    def __repr__(self):
        if self.placed:
            return "<{} {} at {} layer {}>".format(
                self.__class__.__name__, self.name, self.position, self.layer)
        else:
            return "<{} {} (unplaced)>".format(self.__class__.__name__,
                                               self.name)


class PinGroup(object):
    """A set of pins which must occupy contiguous slots.

    Attributes
    ----------
    pin_indices : [int, ...]
        Member pins, in the order they should appear along the boundary.
    order : bool
        If True, the member order must be preserved. On the top and left edges
        this means filling the group's slots back-to-front.
    """

    __slots__ = ["pin_indices", "order"]

    def __init__(self, pin_indices, order=False):
        self.pin_indices = list(pin_indices)
        self.order = order

    def __len__(self):
        return len(self.pin_indices)

    def __iter__(self):
        return iter(self.pin_indices)

    def __repr__(self):
        return "<{} {}{}>".format(self.__class__.__name__, self.pin_indices,
                                  " ordered" if self.order else "")


class Netlist(object):
    """The collection of I/O pins to place.

    Attributes
    ----------
    core : :py:class:`~ioplace.geometry.Core`
        The die boundary, used to evaluate pin constraints.
    pins : [:py:class:`~ioplace.netlist.IOPin`, ...]
    groups : [:py:class:`~ioplace.netlist.PinGroup`, ...]
    mirrored : {term: term, ...}
        Mirror relations, recorded in both directions.
    """

    def __init__(self, core, pins=()):
        self.core = core
        self.pins = []
        self.groups = []
        self.mirrored = {}
        self._term_to_index = {}

        for pin in pins:
            self.add_pin(pin)

    def add_pin(self, pin):
        """Add a pin, returning its index."""
        if pin.term in self._term_to_index:
            raise ValueError("Duplicate terminal {!r}.".format(pin.term))
        self._term_to_index[pin.term] = len(self.pins)
        self.pins.append(pin)
        return len(self.pins) - 1

    def add_group(self, pin_indices, order=False):
        """Declare a group of pins, returning the group's index.

        Raises
        ------
        ValueError
            If a pin is already a member of another group or has a mirror
            partner.
        """
        group = PinGroup(pin_indices, order)
        for index in group:
            if self.pins[index].in_group:
                raise ValueError("Pin {} is already in group {}.".format(
                    self.pins[index].name, self.pins[index].group))
            if self.pins[index].term in self.mirrored:
                raise ValueError("Mirrored pin {} cannot be grouped.".format(
                    self.pins[index].name))
        group_index = len(self.groups)
        for index in group:
            self.pins[index].group = group_index
        self.groups.append(group)
        return group_index

    def add_mirrored_pair(self, pin_index_a, pin_index_b):
        """Require two pins to be placed at mirrored positions.

        Raises
        ------
        ValueError
            If either pin is a member of a group.
        """
        for index in (pin_index_a, pin_index_b):
            if self.pins[index].in_group:
                raise ValueError("Grouped pin {} cannot be mirrored.".format(
                    self.pins[index].name))
        term_a = self.pins[pin_index_a].term
        term_b = self.pins[pin_index_b].term
        self.mirrored[term_a] = term_b
        self.mirrored[term_b] = term_a

    def pin_index(self, term):
        """Get the index of the pin with a given terminal."""
        return self._term_to_index[term]

    def mirrored_pin_index(self, pin_index):
        """Get the index of a pin's mirror partner, or None if it has none."""
        term = self.mirrored.get(self.pins[pin_index].term)
        if term is None:
            return None
        return self._term_to_index[term]

    def compute_cost(self, pin_index, position):
        """Estimate the wirelength of a pin's net if the pin were placed at a
        given position.

        Returns
        -------
        int
            The half-perimeter wire length of the net including the pin, or
            :py:data:`~ioplace.matching.cost_matrix.FAIL` if the pin's
            constraint forbids the position.
        """
        pin = self.pins[pin_index]
        if (pin.constraint is not None and
                not pin.constraint.contains(self.core, position)):
            return FAIL
        return hpwl(pin.sinks + [tuple(position)])

    def __len__(self):
        return len(self.pins)

    def __getitem__(self, pin_index):
        return self.pins[pin_index]

    def __iter__(self):
        return iter(self.pins)
