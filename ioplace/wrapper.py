"""High-level wrapper running a complete I/O pin placement flow.
"""

import logging

from .slots import block_used_slots

from .fallback import place_fallback_pins

from .matching.section import SectionAssigner

from .matching.solver import default_solver


logger = logging.getLogger(__name__)


def place_io_pins(netlist, core, slots, sections,
                  solver=default_solver, solver_kwargs={}, fallback=True):
    """Place all I/O pins of a netlist into the given slots.

    The sections are matched in the order given, in up to four passes:

    1. Pin groups, for sections listing any.
    2. Pins with a mirror partner, each placed along with its partner, when
       the netlist declares mirrored pins.
    3. All other ungrouped pins.
    4. Optionally, a greedy fallback pass
       (:py:func:`~ioplace.fallback.place_fallback_pins`) placing anything
       the preceding passes could not.

    Before each section is matched any slots used so far are blocked, so no
    slot is ever given to two pins. Sections are finalised one at a time
    meaning each pin is placed by exactly one section.

    This function produces INFO level logging describing the progress of each
    pass.

    Parameters
    ----------
    netlist : :py:class:`~ioplace.netlist.Netlist`
    core : :py:class:`~ioplace.geometry.Core`
    slots : [:py:class:`~ioplace.slots.Slot`, ...]
        All slots around the die. Modified to record used and blocked slots.
    sections : [:py:class:`~ioplace.slots.Section`, ...]
        A partitioning of the slots into sections along with the pins and
        groups to match in each. The sections are not modified.
    solver : :py:class:`~ioplace.matching.solver.Solver`
        **Optional.** The class of assignment solver to use.
    solver_kwargs : dict
        **Optional.** Solver-specific arguments for the solver.
    fallback : bool
        **Optional.** If True (the default), pins left over after the
        matching passes are placed greedily.

    Returns
    -------
    [:py:class:`~ioplace.netlist.IOPin`, ...]
        The pins placed, in the order they were placed. Pins which remain
        unplaced can be found by comparing this against the netlist.

    Raises
    ------
    MirroredPositionError
        If no slot exists at the mirrored position of a mirrored pin. The
        flow is abandoned.
    """
    placed = []
    num_to_place = sum(1 for pin in netlist if not pin.placed)

    def match(section, groups, mirrored=False):
        block_used_slots(slots)
        assigner = SectionAssigner(section, netlist, core, slots,
                                   solver, solver_kwargs)
        if groups:
            assigner.find_group_assignment()
            return assigner.extract_groups(placed)
        else:
            assigner.find_assignment(mirrored)
            return assigner.extract_pins(placed, mirrored)

    num_placed = 0
    for section in sections:
        if section.pin_groups:
            num_placed += match(section.renew(slots, pin_indices=()), True)
    if netlist.groups:
        logger.info("Placed %d grouped I/O pins.", num_placed)

    if netlist.mirrored:
        num_placed = 0
        for section in sections:
            pin_indices = [i for i in section.pin_indices
                           if netlist.mirrored_pin_index(i) is not None]
            if pin_indices:
                num_placed += match(
                    section.renew(slots, pin_indices, pin_groups=()),
                    False, mirrored=True)
        logger.info("Placed %d mirrored I/O pins.", num_placed)

    num_placed = 0
    for section in sections:
        pin_indices = [i for i in section.pin_indices
                       if netlist.mirrored_pin_index(i) is None]
        if pin_indices:
            num_placed += match(
                section.renew(slots, pin_indices, pin_groups=()), False)
    logger.info("Placed %d I/O pins by matching.", num_placed)

    if fallback:
        block_used_slots(slots)
        num_placed = place_fallback_pins(netlist, core, slots, placed)
        if num_placed:
            logger.info("Placed %d remaining I/O pins greedily.", num_placed)

    num_unplaced = num_to_place - len(placed)
    if num_unplaced:
        logger.warning("%d of %d I/O pins could not be placed.",
                       num_unplaced, num_to_place)
    else:
        logger.info("All %d I/O pins placed.", num_to_place)

    return placed
