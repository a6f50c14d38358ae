"""Exceptions which the pin placers can throw to indicate standard types of
problem.

Note that the conditions a placement pass can recover from (e.g. a pin whose
only available slots are all infeasible) are reported via :py:mod:`logging`
and never raised.
"""


class PinPlacementError(Exception):
    """Base class for all errors raised while placing I/O pins."""
    pass


class MirroredPositionError(PinPlacementError):
    """Indication that the mirror image of a placed pin does not correspond to
    a free slot.

    This signals an inconsistency between the slot table and the mirrored pin
    pairs requested and is not recoverable by the placer.

    Attributes
    ----------
    position : (x, y)
        The mirrored position which was sought.
    layer : int
        The layer on which a slot was sought.
    """

    def __init__(self, position, layer):
        self.position = position
        self.layer = layer
        super(MirroredPositionError, self).__init__(
            "Mirrored position {} at layer {} is not a valid position for "
            "pin placement.".format(position, layer))


class InvalidSectionError(PinPlacementError):
    """Indication that a section does not describe a valid range of slots."""
    pass
