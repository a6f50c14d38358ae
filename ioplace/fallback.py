"""A greedy placer for pins left unplaced by the section matching passes.

Sections are matched independently and may simply run out of slots, leaving
some pins and groups without a position. This placer considers every free
slot on the die regardless of section and places each leftover group and pin
in turn at the cheapest location still available.
"""

import logging

from .exceptions import MirroredPositionError

from .slots import find_slot_index

from .matching.cost_matrix import FAIL, group_cost


logger = logging.getLogger(__name__)


def _free_windows(core, slots, size):
    """Generate the anchors of all runs of ``size`` consecutive free slots
    lying on a single edge."""
    for anchor in range(len(slots) - size + 1):
        edge = core.edge_of(slots[anchor].position)
        if all(slots[i].free and core.edge_of(slots[i].position) == edge
               for i in range(anchor, anchor + size)):
            yield anchor


def _cheapest(candidates):
    """Select the (cost, ...) tuple with the lowest cost, preferring the
    earliest on a tie. Returns None if there are no candidates."""
    best = None
    for candidate in candidates:
        if best is None or candidate[0] < best[0]:
            best = candidate
    return best


def _place_group(netlist, core, slots, group_index, placed):
    group = netlist.groups[group_index]
    best = _cheapest(
        (group_cost(netlist, group, slots[anchor].position), anchor)
        for anchor in _free_windows(core, slots, len(group)))
    if best is None:
        logger.error("I/O pin group %d cannot be placed: no %d consecutive "
                     "free slots remain.", group_index, len(group))
        return 0

    cost, anchor = best
    if cost == FAIL:
        logger.warning("I/O pin group %d cannot be placed in the specified "
                       "region. Not enough space.", group_index)

    edge = core.edge_of(slots[anchor].position)
    if group.order and edge is not None and edge.reverses_group_order:
        offsets = range(len(group) - 1, -1, -1)
    else:
        offsets = range(len(group))

    for pin_index, offset in zip(group, offsets):
        slot = slots[anchor + offset]
        netlist[pin_index].place(slot)
        slot.used = True
        slot.blocked = True
        placed.append(netlist[pin_index])
    return len(group)


def _mirror_candidates(netlist, core, slots, pin_index, mirror_index):
    """Generate (cost, slot_index, mirror_slot_index) for every free slot
    whose mirror image is also a free slot."""
    for slot_index, slot in enumerate(slots):
        if not slot.free or core.edge_of(slot.position) is None:
            continue
        mirror_slot_index = find_slot_index(
            slots, core.mirrored_position(slot.position), slot.layer)
        if (mirror_slot_index is None or mirror_slot_index == slot_index or
                not slots[mirror_slot_index].free):
            continue
        cost = netlist.compute_cost(pin_index, slot.position)
        mirror_cost = netlist.compute_cost(
            mirror_index, slots[mirror_slot_index].position)
        if FAIL in (cost, mirror_cost):
            cost = FAIL
        else:
            cost += mirror_cost
        yield (cost, slot_index, mirror_slot_index)


def _place_pin(netlist, core, slots, pin_index, placed):
    pin = netlist[pin_index]
    mirror_index = netlist.mirrored_pin_index(pin_index)

    if mirror_index is not None and netlist[mirror_index].placed:
        # The partner is already fixed so only one position is possible
        partner = netlist[mirror_index]
        position = core.mirrored_position(partner.position)
        slot_index = find_slot_index(slots, position, partner.layer)
        if slot_index is None:
            raise MirroredPositionError(position, partner.layer)
        if slots[slot_index].free:
            best = (netlist.compute_cost(pin_index, position), slot_index,
                    None)
        else:
            best = None
    elif mirror_index is not None:
        best = _cheapest(_mirror_candidates(netlist, core, slots,
                                            pin_index, mirror_index))
    else:
        best = _cheapest((netlist.compute_cost(pin_index, slot.position), i,
                          None)
                         for i, slot in enumerate(slots) if slot.free)

    if best is None:
        logger.error("I/O pin %s cannot be placed: no free slots remain.",
                     pin.name)
        return 0

    cost, slot_index, mirror_slot_index = best
    if cost == FAIL:
        logger.warning("I/O pin %s cannot be placed in the specified region. "
                       "Not enough space.", pin.name)

    pin.place(slots[slot_index])
    slots[slot_index].used = True
    placed.append(pin)
    if mirror_slot_index is None:
        return 1

    mirror_pin = netlist[mirror_index]
    mirror_pin.place(slots[mirror_slot_index])
    slots[mirror_slot_index].used = True
    placed.append(mirror_pin)
    return 2


def place_fallback_pins(netlist, core, slots, placed):
    """Place every remaining unplaced pin and pin group greedily.

    Groups are placed first, each at the cheapest run of consecutive free
    slots on a single edge. Ungrouped pins are then placed one at a time at
    their cheapest free slot; a pin with a mirror partner is placed together
    with its partner at the cheapest free slot whose mirror image is also
    free.

    Pins which cannot be placed at all are reported as errors in the log and
    left unplaced.

    Parameters
    ----------
    netlist : :py:class:`~ioplace.netlist.Netlist`
    core : :py:class:`~ioplace.geometry.Core`
    slots : [:py:class:`~ioplace.slots.Slot`, ...]
    placed : list
        Every pin placed is appended to this list.

    Returns
    -------
    int
        The number of pins placed.

    Raises
    ------
    MirroredPositionError
        If a pin's mirror partner is already placed but no slot exists at the
        pin's mirrored position.
    """
    num_placed = 0

    for group_index, group in enumerate(netlist.groups):
        if not any(netlist[i].placed for i in group):
            num_placed += _place_group(netlist, core, slots, group_index,
                                       placed)

    for pin_index, pin in enumerate(netlist):
        if not pin.placed and not pin.in_group:
            num_placed += _place_pin(netlist, core, slots, pin_index, placed)

    return num_placed
