import pytest

from ioplace.edges import Edges
from ioplace.exceptions import InvalidSectionError
from ioplace.slots import \
    Slot, Section, count_unblocked, find_slot_index, block_used_slots


def test_slot_free():
    assert Slot((0, 0), 1).free
    assert not Slot((0, 0), 1, blocked=True).free
    assert not Slot((0, 0), 1, used=True).free


def test_slot_position_is_tuple():
    assert Slot([3, 4], 1).position == (3, 4)


def test_slot_repr():
    assert "blocked" in repr(Slot((0, 0), 1, blocked=True))
    assert "used" in repr(Slot((0, 0), 1, used=True))
    assert "blocked" not in repr(Slot((0, 0), 1))


def test_count_unblocked(bottom_slots):
    bottom_slots[1].blocked = True
    bottom_slots[2].blocked = True
    # Used slots still count as unblocked
    bottom_slots[3].used = True
    assert count_unblocked(bottom_slots, 0, 10) == 9
    assert count_unblocked(bottom_slots, 1, 2) == 0
    assert count_unblocked(bottom_slots, 0, 0) == 1


def test_find_slot_index():
    slots = [Slot((0, 0), 1), Slot((10, 0), 1), Slot((10, 0), 2),
             Slot((10, 0), 2)]
    assert find_slot_index(slots, (0, 0), 1) == 0
    assert find_slot_index(slots, (10, 0), 1) == 1
    # The first match is returned
    assert find_slot_index(slots, [10, 0], 2) == 2
    # Position and layer must both match
    assert find_slot_index(slots, (0, 0), 2) is None
    assert find_slot_index(slots, (20, 0), 1) is None


def test_block_used_slots(bottom_slots):
    bottom_slots[0].used = True
    bottom_slots[1].used = True
    bottom_slots[1].blocked = True
    bottom_slots[2].blocked = True

    assert block_used_slots(bottom_slots) == 1

    assert [s.blocked for s in bottom_slots[:4]] == [True, True, True, False]
    # Blocking does not mark anything used
    assert not bottom_slots[2].used


@pytest.mark.parametrize("begin,end", [(-1, 3), (3, 2), (0, 11), (11, 11)])
def test_section_invalid_range(bottom_slots, begin, end):
    with pytest.raises(InvalidSectionError):
        Section(bottom_slots, begin, end, Edges.bottom)


def test_section(bottom_slots):
    bottom_slots[4].blocked = True
    section = Section(bottom_slots, 2, 6, Edges.bottom,
                      pin_indices=iter([3, 1]), pin_groups=[0])
    assert section.begin_slot == 2
    assert section.end_slot == 6
    assert section.edge is Edges.bottom
    assert section.pin_indices == [3, 1]
    assert section.pin_groups == [0]
    assert section.num_slots == 4

    assert 2 in section
    assert 6 in section
    assert 1 not in section
    assert 7 not in section

    assert "bottom" in repr(section)


def test_section_renew(bottom_slots):
    section = Section(bottom_slots, 0, 3, Edges.top, [0, 1], [2])
    assert section.num_slots == 4

    bottom_slots[0].blocked = True
    renewed = section.renew(bottom_slots)
    assert renewed is not section
    assert renewed.num_slots == 3
    assert (renewed.begin_slot, renewed.end_slot) == (0, 3)
    assert renewed.edge is Edges.top
    assert renewed.pin_indices == [0, 1]
    assert renewed.pin_groups == [2]

    # The original is left untouched
    assert section.num_slots == 4

    # Pins and groups may be replaced
    renewed = section.renew(bottom_slots, pin_indices=[1], pin_groups=())
    assert renewed.pin_indices == [1]
    assert renewed.pin_groups == []
    renewed = section.renew(bottom_slots, pin_groups=[])
    assert renewed.pin_indices == [0, 1]
    assert renewed.pin_groups == []
