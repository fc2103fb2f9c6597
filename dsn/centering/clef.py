"""
Notes that change a viewport's margin offsets. An offset is added to the computed margin before the side's factor is
applied (see utils.offset_and_scale); i.e. offsets let the user nudge the margins without touching the centering math.

Changes to the offsets do not by themselves change what's on screen; they take effect on the next recenter.
"""


class MarginNote(object):
    pass


class SetMarginOffset(MarginNote):
    def __init__(self, side, value):
        self.side = side
        self.value = value


class IncreaseMarginOffset(MarginNote):
    def __init__(self, side, delta=1):
        self.side = side
        self.delta = delta


class DecreaseMarginOffset(MarginNote):
    """Decreasing is bounded from below; for the left side at 1, for the right side at 0."""

    def __init__(self, side, delta=1):
        self.side = side
        self.delta = delta
