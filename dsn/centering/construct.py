from dsn.centering.clef import (
    DecreaseMarginOffset,
    IncreaseMarginOffset,
    SetMarginOffset,
)
from dsn.centering.structure import LEFT, RIGHT

# The lowest values a decrease can bring the offsets to.
DECREASE_FLOOR = {
    LEFT: 1,
    RIGHT: 0,
}


def play_margin_note(note, offsets, config):
    """:: note, MarginOffsets, CenteringConfig => MarginOffsets

    Increases and decreases are relative to the effective offset, i.e. to the configured one if the viewport has no
    override of its own yet.

    >>> from dsn.centering.structure import CenteringConfig, MarginOffsets
    >>> config = CenteringConfig(margin_left_offset=3)
    >>> offsets = play_margin_note(IncreaseMarginOffset(LEFT, 2), MarginOffsets(), config)
    >>> offsets
    MarginOffsets(5, None)
    >>> play_margin_note(DecreaseMarginOffset(LEFT, 10), offsets, config)
    MarginOffsets(1, None)
    >>> play_margin_note(DecreaseMarginOffset(RIGHT), offsets, config)
    MarginOffsets(5, 0)
    >>> play_margin_note(SetMarginOffset(RIGHT, -4), offsets, config)
    MarginOffsets(5, -4)
    """
    if note.side not in (LEFT, RIGHT):
        raise Exception("Unknown side (programming error): %s" % note.side)

    current = offsets.effective(note.side, config)

    if isinstance(note, SetMarginOffset):
        return offsets.with_side(note.side, note.value)

    elif isinstance(note, IncreaseMarginOffset):
        return offsets.with_side(note.side, current + note.delta)

    elif isinstance(note, DecreaseMarginOffset):
        return offsets.with_side(note.side, max(DECREASE_FLOOR[note.side], current - note.delta))

    raise Exception("Illegal note (programming error): %s" % note)
