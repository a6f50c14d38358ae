import pytest

from ioplace.geometry import Core
from ioplace.netlist import IOPin, Netlist
from ioplace.slots import Slot


class TableNetlist(Netlist):
    """A netlist whose costs are looked up in a table rather than computed.

    The table maps (pin_index, (x, y)) to a cost.
    """

    def __init__(self, core, pins, table):
        super(TableNetlist, self).__init__(core, pins)
        self.table = table

    def compute_cost(self, pin_index, position):
        return self.table[(pin_index, tuple(position))]


@pytest.fixture
def core():
    return Core(0, 0, 100, 100)


@pytest.fixture
def bottom_slots():
    """Eleven slots along the bottom edge of a 100x100 die."""
    return [Slot((x, 0), 1) for x in range(0, 101, 10)]


@pytest.fixture
def make_table_netlist(core):
    """Produces netlists of unnamed pins whose costs are given as a matrix
    with one row per position and one column per pin."""
    def make(positions, matrix):
        num_pins = len(matrix[0])
        table = {(pin_index, tuple(position)): row[pin_index]
                 for position, row in zip(positions, matrix)
                 for pin_index in range(num_pins)}
        pins = [IOPin("pin{}".format(i)) for i in range(num_pins)]
        return TableNetlist(core, pins, table)
    return make


@pytest.fixture
def perimeter():
    """A 100x100 die with slots every 10 units along its bottom edge (indices
    0-10, increasing x) and top edge (indices 11-21, decreasing x)."""
    core = Core(0, 0, 100, 100)
    slots = ([Slot((x, 0), 1) for x in range(0, 101, 10)] +
             [Slot((x, 100), 1) for x in range(100, -1, -10)])
    return core, slots
