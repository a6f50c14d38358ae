"""Candidate pin positions (slots) around the die boundary and the sections
which partition them.

Slots for every edge are held in a single list; a
:py:class:`~ioplace.slots.Section` refers to a contiguous, inclusive range of
indices into that list.
"""

from .exceptions import InvalidSectionError


class Slot(object):
    """A candidate position for a single I/O pin.

    Attributes
    ----------
    position : (x, y)
        Location of the slot on the die boundary.
    layer : int
        The routing layer of the slot.
    blocked : bool
        If True, the slot must not be assigned a pin.
    used : bool
        True once a pin has been placed in the slot.
    """

    __slots__ = ["position", "layer", "blocked", "used"]

    def __init__(self, position, layer, blocked=False, used=False):
        self.position = tuple(position)
        self.layer = layer
        self.blocked = blocked
        self.used = used

    @property
    def free(self):
        """True if the slot is neither blocked nor used."""
        return not (self.blocked or self.used)

    def __repr__(self):
        return "<{} {} layer {}{}{}>".format(
            self.__class__.__name__, self.position, self.layer,
            " blocked" if self.blocked else "",
            " used" if self.used else "")


def count_unblocked(slots, begin, end):
    """Count the unblocked slots in the inclusive range [begin, end]."""
    return sum(1 for i in range(begin, end + 1) if not slots[i].blocked)


def find_slot_index(slots, position, layer):
    """Find the index of the slot at a given position and layer.

    Parameters
    ----------
    slots : [:py:class:`~ioplace.slots.Slot`, ...]
    position : (x, y)
    layer : int

    Returns
    -------
    int or None
        The lowest matching index, or None if no slot is at that position on
        that layer.
    """
    position = tuple(position)
    for i, slot in enumerate(slots):
        if slot.position == position and slot.layer == layer:
            return i
    return None


def block_used_slots(slots):
    """Mark every used slot as blocked.

    Run between matching passes so that slots consumed by an earlier pass are
    not offered again.

    Returns
    -------
    int
        The number of slots newly blocked.
    """
    newly_blocked = 0
    for slot in slots:
        if slot.used and not slot.blocked:
            slot.blocked = True
            newly_blocked += 1
    return newly_blocked


class Section(object):
    """A contiguous range of slots on one edge together with the pins and pin
    groups to be matched within it.

    A section is consumed by a single matching pass. Use
    :py:meth:`.renew` to obtain a fresh section for a subsequent pass.

    Attributes
    ----------
    begin_slot : int
        Index of the first slot in the section.
    end_slot : int
        Index of the last slot in the section (inclusive).
    edge : :py:class:`~ioplace.edges.Edges`
        The edge the slots lie on.
    pin_indices : [int, ...]
        Indices of the pins (in the :py:class:`~ioplace.netlist.Netlist`) to
        match in this section, in matching order.
    pin_groups : [int, ...]
        Indices of the pin groups to match in this section, in matching order.
    num_slots : int
        The number of currently unblocked slots in the section. Decremented as
        grouped pins consume slots.
    """

    __slots__ = ["begin_slot", "end_slot", "edge", "pin_indices",
                 "pin_groups", "num_slots"]

    def __init__(self, slots, begin_slot, end_slot, edge,
                 pin_indices=(), pin_groups=()):
        """Define a section over a list of slots.

        Parameters
        ----------
        slots : [:py:class:`~ioplace.slots.Slot`, ...]
            Used to count the unblocked slots in the section.
        begin_slot : int
        end_slot : int
        edge : :py:class:`~ioplace.edges.Edges`
        pin_indices : iterable([int, ...])
        pin_groups : iterable([int, ...])

        Raises
        ------
        InvalidSectionError
            If the range is empty or not within the list of slots.
        """
        if not 0 <= begin_slot <= end_slot < len(slots):
            raise InvalidSectionError(
                "Section [{}, {}] is not within the {} available "
                "slots.".format(begin_slot, end_slot, len(slots)))

        self.begin_slot = begin_slot
        self.end_slot = end_slot
        self.edge = edge
        self.pin_indices = list(pin_indices)
        self.pin_groups = list(pin_groups)
        self.num_slots = count_unblocked(slots, begin_slot, end_slot)

    def renew(self, slots, pin_indices=None, pin_groups=None):
        """Produce a fresh copy of this section with its unblocked slot count
        recomputed from the current state of the slots.

        Parameters
        ----------
        slots : [:py:class:`~ioplace.slots.Slot`, ...]
        pin_indices : iterable([int, ...]) or None
            If given, replaces the pins of the new section.
        pin_groups : iterable([int, ...]) or None
            If given, replaces the pin groups of the new section.
        """
        return Section(
            slots, self.begin_slot, self.end_slot, self.edge,
            self.pin_indices if pin_indices is None else pin_indices,
            self.pin_groups if pin_groups is None else pin_groups)

    def __contains__(self, slot_index):
        return self.begin_slot <= slot_index <= self.end_slot

    def __repr__(self):
        return "<{} {} [{}, {}] with {} pins and {} groups>".format(
            self.__class__.__name__, self.edge.name,
            self.begin_slot, self.end_slot,
            len(self.pin_indices), len(self.pin_groups))
