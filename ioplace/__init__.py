"""Placement of a chip's I/O pins into slots around the die boundary.

Pins are matched to slots section by section using minimum-cost bipartite
matching over an estimated wirelength cost. Pin groups (placed in contiguous
slots) and mirrored pin pairs (placed at reflected positions) are supported.

Users are referred to :py:func:`~ioplace.wrapper.place_io_pins` for the
complete flow.
"""

from ioplace.version import __version__

from ioplace.edges import Edges
from ioplace.geometry import Core
from ioplace.slots import Slot, Section
from ioplace.netlist import IOPin, PinGroup, Interval, Netlist

from ioplace.matching import FAIL, UNASSIGNED, SectionAssigner

# High-Level Wrapper
from ioplace.wrapper import place_io_pins
