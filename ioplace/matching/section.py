"""Placement of the pins of a single section by minimum-cost matching.

Each pass over a section proceeds in three phases: a cost matrix is built for
the section (:py:mod:`~ioplace.matching.cost_matrix`), the matrix is solved
(:py:mod:`~ioplace.matching.solver`) and finally the solver's assignment is
translated back into slot indices and the pins are placed.

A typical use looks like::

    assigner = SectionAssigner(section, netlist, core, slots)
    assigner.find_assignment()
    assigner.extract_pins(placed)

Or, for pin groups::

    assigner = SectionAssigner(section, netlist, core, slots)
    assigner.find_group_assignment()
    assigner.extract_groups(placed)
"""

import logging

from ..edges import Edges

from ..exceptions import MirroredPositionError

from ..slots import find_slot_index

from .cost_matrix import FAIL, build_pin_matrix, build_group_matrix

from .solver import default_solver


logger = logging.getLogger(__name__)


class SectionAssigner(object):
    """Matches the pins (or pin groups) of one section to its slots.

    An assigner (like the section it works on) is intended to be used for a
    single pass only.

    Attributes
    ----------
    section : :py:class:`~ioplace.slots.Section`
    netlist : :py:class:`~ioplace.netlist.Netlist`
    core : :py:class:`~ioplace.geometry.Core`
        Provides the mirror transform for mirrored pins.
    slots : [:py:class:`~ioplace.slots.Slot`, ...]
        The complete list of slots which the section indexes. Slots are marked
        used (and, for groups, blocked) as pins are placed.
    matrix : :py:class:`~ioplace.matching.cost_matrix.CostMatrix` or None
        The matrix of the current pass, None before a pass or when the section
        had nothing to match.
    assignment : [int or UNASSIGNED, ...] or None
        The solver's output for the current pass.
    """

    def __init__(self, section, netlist, core, slots,
                 solver=default_solver, solver_kwargs={}):
        """
        Parameters
        ----------
        solver : :py:class:`~ioplace.matching.solver.Solver`
            The class of assignment solver to use.
        solver_kwargs : dict
            Optional solver-specific keyword arguments for the solver's
            constructor.
        """
        self.section = section
        self.netlist = netlist
        self.core = core
        self.slots = slots
        self.solver = solver(**solver_kwargs)

        self.matrix = None
        self.assignment = None

    def _solve(self):
        if self.matrix is None:
            logger.debug("Nothing to match in %r.", self.section)
            self.assignment = None
        else:
            self.assignment = self.solver.solve(self.matrix.costs)

    def _discard(self):
        self.matrix = None
        self.assignment = None

    def find_assignment(self, mirrored=False):
        """Build and solve the cost matrix for the section's ungrouped pins.

        If ``mirrored`` is True, slots whose mirror image is blocked or used
        are not offered to the solver.
        """
        self.matrix = build_pin_matrix(self.netlist, self.slots, self.section,
                                       self.core if mirrored else None)
        self._solve()

    def find_group_assignment(self):
        """Build and solve the cost matrix for the section's pin groups."""
        self.matrix = build_group_matrix(self.netlist, self.slots,
                                         self.section)
        self._solve()

    def _mirror_slot(self, slot):
        """Get the slot mirroring a given slot.

        Raises
        ------
        MirroredPositionError
            If no slot exists at the mirrored position on the same layer.
        """
        position = self.core.mirrored_position(slot.position)
        slot_index = find_slot_index(self.slots, position, slot.layer)
        if slot_index is None:
            raise MirroredPositionError(position, slot.layer)
        return self.slots[slot_index]

    def extract_pins(self, placed, mirrored=False):
        """Place the section's ungrouped pins as chosen by
        :py:meth:`.find_assignment`.

        Pins assigned a slot at which they have a
        :py:data:`~ioplace.matching.cost_matrix.FAIL` cost are still placed
        there, but a warning is logged. Pins the solver left unassigned remain
        unplaced.

        Parameters
        ----------
        placed : list
            Every pin placed is appended to this list.
        mirrored : bool
            If True, only pins with a mirror partner are placed and each is
            placed along with its partner, the partner going to the slot at
            the mirrored position.

        Returns
        -------
        int
            The number of pins placed (including mirror partners).

        Raises
        ------
        MirroredPositionError
            If no slot exists at a mirror partner's position. Neither pin of
            the offending pair is modified.
        """
        if self.matrix is None:
            return 0

        num_placed = 0
        for column, pin_index in enumerate(self.matrix.columns):
            pin = self.netlist[pin_index]
            mirror_index = self.netlist.mirrored_pin_index(pin_index)
            if pin.placed or (mirrored and mirror_index is None):
                continue
            if mirrored and self.netlist[mirror_index].placed:
                # Left for the fallback, which places it opposite its partner
                logger.debug("Mirror partner of I/O pin %s is already placed.",
                             pin.name)
                continue

            row = self.matrix.row_assigned_to(column, self.assignment)
            if row is None:
                logger.debug("No slot available for I/O pin %s in %r.",
                             pin.name, self.section)
                continue

            slot = self.slots[self.matrix.rows[row]]
            if slot.used:
                # Taken by the mirror partner of an earlier pin in this pass
                logger.warning("Slot at %s for I/O pin %s is already in use. "
                               "The pin is left unplaced.",
                               slot.position, pin.name)
                continue

            if mirrored:
                mirror_pin = self.netlist[mirror_index]
                mirror_slot = self._mirror_slot(slot)
                if not mirror_slot.free:
                    logger.warning("Mirrored slot at %s for I/O pin %s is not "
                                   "available. The pair is left unplaced.",
                                   mirror_slot.position, mirror_pin.name)
                    continue

            if self.matrix.costs[row, column] == FAIL:
                logger.warning("I/O pin %s cannot be placed in the specified "
                               "region. Not enough space.", pin.name)
            if mirrored and self.netlist.compute_cost(
                    mirror_index, mirror_slot.position) == FAIL:
                logger.warning("I/O pin %s cannot be placed in the specified "
                               "region. Not enough space.", mirror_pin.name)

            pin.place(slot)
            slot.used = True
            placed.append(pin)
            num_placed += 1

            if mirrored:
                mirror_pin.place(mirror_slot)
                mirror_slot.used = True
                placed.append(mirror_pin)
                num_placed += 1

        self._discard()
        return num_placed

    def extract_groups(self, placed):
        """Place the section's pin groups as chosen by
        :py:meth:`.find_group_assignment`.

        Each group occupies consecutive slots starting at the first slot of
        its window. When the group's order flag is set and the section lies on
        the top or left edge the members are placed back-to-front. The slots
        taken are marked used *and* blocked and the section's count of
        unblocked slots is updated.

        Parameters
        ----------
        placed : list
            Every pin placed is appended to this list.

        Returns
        -------
        int
            The number of pins placed.
        """
        if self.matrix is None:
            return 0

        reverse = Edges(self.section.edge).reverses_group_order

        num_placed = 0
        for column, group_index in enumerate(self.matrix.columns):
            group = self.netlist.groups[group_index]

            row = self.matrix.row_assigned_to(column, self.assignment)
            if row is None:
                logger.debug("No window available for I/O pin group %d in "
                             "%r.", group_index, self.section)
                continue

            if self.matrix.costs[row, column] == FAIL:
                logger.warning("I/O pin group %d cannot be placed in the "
                               "specified region. Not enough space.",
                               group_index)

            anchor = self.matrix.rows[row]
            if reverse and group.order:
                offsets = range(len(group) - 1, -1, -1)
            else:
                offsets = range(len(group))

            for pin_index, offset in zip(group, offsets):
                slot_index = anchor + offset
                slot = self.slots[slot_index]
                pin = self.netlist[pin_index]

                pin.place(slot)
                slot.used = True
                slot.blocked = True
                if slot_index in self.section:
                    self.section.num_slots -= 1
                placed.append(pin)
                num_placed += 1

        self._discard()
        return num_placed
