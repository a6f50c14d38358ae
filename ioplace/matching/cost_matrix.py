"""Construction of the cost matrices solved by the assignment solver.

Rows of a matrix correspond to places where something may be put (unblocked
slots, or windows of contiguous unblocked slots for pin groups) and columns to
the things being placed (pins or pin groups). Rows are in slot order and
columns in the order they are listed by the
:py:class:`~ioplace.slots.Section`.
"""

import numpy as np

from ..slots import find_slot_index


"""The cost of a placement which is not permitted.

Real costs must be non-negative and strictly smaller than this value. It is
the largest 32-bit signed integer: large enough that no wirelength sum reaches
it, small enough that the solver's floating point accumulation over a matrix
filled with it cannot overflow.
"""
FAIL = 2 ** 31 - 1


class CostMatrix(object):
    """A cost matrix along with the meaning of its rows and columns.

    Attributes
    ----------
    costs : :py:class:`numpy.ndarray`
        An ``(len(rows), len(columns))`` array of int64 costs.
    rows : [int, ...]
        The slot index of each row. For group matrices this is the index of the
        first slot (the anchor) of the row's window.
    columns : [int, ...]
        The pin index (or group index) of each column.
    group_size : int or None
        The width of the windows of a group matrix; None for pin matrices.
    """

    __slots__ = ["costs", "rows", "columns", "group_size"]

    def __init__(self, costs, rows, columns, group_size=None):
        self.costs = costs
        self.rows = rows
        self.columns = columns
        self.group_size = group_size

    @property
    def shape(self):
        return self.costs.shape

    def row_assigned_to(self, column, assignment):
        """Get the first row a solver assigned to a given column.

        Parameters
        ----------
        column : int
            A column number (not a pin or group index).
        assignment : [int or UNASSIGNED, ...]
            The column chosen for each row.

        Returns
        -------
        int or None
            None if no row was assigned the column.
        """
        for row, assigned in enumerate(assignment):
            if assigned == column:
                return row
        return None

    def __repr__(self):
        return "<{} {}x{}>".format(self.__class__.__name__, *self.shape)


def _checked(cost):
    if cost < 0:
        raise ValueError("Costs must be non-negative, got {}.".format(cost))
    return cost


def _mirror_unavailable(core, slots, slot):
    """True if a slot's mirror image is an existing slot which is not free."""
    slot_index = find_slot_index(
        slots, core.mirrored_position(slot.position), slot.layer)
    return slot_index is not None and not slots[slot_index].free


def build_pin_matrix(netlist, slots, section, core=None):
    """Build the cost matrix for placing a section's ungrouped pins.

    One row is produced per unblocked slot in the section and one column per
    ungrouped, unplaced pin.

    Parameters
    ----------
    netlist : :py:class:`~ioplace.netlist.Netlist`
    slots : [:py:class:`~ioplace.slots.Slot`, ...]
    section : :py:class:`~ioplace.slots.Section`
    core : :py:class:`~ioplace.geometry.Core` or None
        **Optional.** When matching mirrored pins, the die boundary. Slots
        whose mirror image is a slot which is blocked or used are then left
        out since the partner pin could not be placed there.

    Returns
    -------
    :py:class:`.CostMatrix` or None
        None when the section has no usable slots or no pins to place.
    """
    rows = [i for i in range(section.begin_slot, section.end_slot + 1)
            if not slots[i].blocked and
            not (core is not None and
                 _mirror_unavailable(core, slots, slots[i]))]
    columns = [i for i in section.pin_indices
               if not netlist[i].in_group and not netlist[i].placed]
    if not rows or not columns:
        return None

    costs = np.empty((len(rows), len(columns)), dtype=np.int64)
    for row, slot_index in enumerate(rows):
        position = slots[slot_index].position
        for column, pin_index in enumerate(columns):
            costs[row, column] = _checked(
                netlist.compute_cost(pin_index, position))

    return CostMatrix(costs, rows, columns)


def group_windows(slots, begin, end, group_size):
    """List the anchors of the fully-unblocked, non-overlapping windows of
    ``group_size`` slots in the inclusive range [begin, end].

    Windows are stepped ``group_size`` slots at a time from ``begin``; a
    window which would extend beyond ``end`` is not considered.
    """
    if group_size <= 0:
        return []
    return [anchor
            for anchor in range(begin, end - group_size + 2, group_size)
            if not any(slots[i].blocked
                       for i in range(anchor, anchor + group_size))]


def group_cost(netlist, group, position):
    """Total cost of placing every member of a group at a position.

    Returns :py:data:`FAIL` if any member may not be placed there. Feasible
    totals are capped just below :py:data:`FAIL`.
    """
    total = 0
    for pin_index in group:
        cost = _checked(netlist.compute_cost(pin_index, position))
        if cost == FAIL:
            return FAIL
        total += cost
    return min(total, FAIL - 1)


def build_group_matrix(netlist, slots, section):
    """Build the cost matrix for placing a section's pin groups.

    Every group is given a window as wide as the section's largest unplaced
    group. One row is produced per fully-unblocked window and one column per
    group with no placed members. Cells hold the total cost of the group's
    members evaluated at the window's first slot.

    Parameters
    ----------
    netlist : :py:class:`~ioplace.netlist.Netlist`
    slots : [:py:class:`~ioplace.slots.Slot`, ...]
    section : :py:class:`~ioplace.slots.Section`

    Returns
    -------
    :py:class:`.CostMatrix` or None
        None when no group needs placing or no window is available.
    """
    columns = [g for g in section.pin_groups
               if not any(netlist[i].placed for i in netlist.groups[g])]
    group_size = max((len(netlist.groups[g]) for g in columns), default=0)
    rows = group_windows(slots, section.begin_slot, section.end_slot,
                         group_size)
    if not rows or not columns:
        return None

    costs = np.empty((len(rows), len(columns)), dtype=np.int64)
    for row, anchor in enumerate(rows):
        position = slots[anchor].position
        for column, group_index in enumerate(columns):
            costs[row, column] = group_cost(
                netlist, netlist.groups[group_index], position)

    return CostMatrix(costs, rows, columns, group_size)
