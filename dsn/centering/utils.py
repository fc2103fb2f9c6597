"""
The geometry of centering. All functions below are pure: they take the dimensions as sampled from the host (widths and
offsets in the host's units, typically columns) and a CenteringConfig, and return margins.

All results are rounded down to ints, to ensure we never ask for fractional columns.

## Relative vs. absolute

Relative centering centers the content within the viewport itself: both margins are half of what's left of the
viewport after taking out the desired width.

Absolute centering centers the content within the frame, i.e. as if the viewport were as wide as the frame. The
viewport's own position in the frame is subtracted out again; a viewport that sits to the right of another one needs no
left margin beyond the minimal one, because the other viewport is already in between it and the frame's edge.

    +--------------------------------------------+
    |Frame              margin                   |
    |<---------------->                          |
    |+--------------+-----------------------+    |
    ||other viewport|this viewport          |    |
    |+--------------+-----------------------+    |
    |<------------->                             |
    | left_offset                                |
    +--------------------------------------------+
"""
from math import floor

from dsn.centering.errors import InvalidConfigError
from dsn.centering.structure import MarginPair


def desired_width(viewport_width, config):
    """
    The width we want the content to have.

    A positive max_size is taken literally, whatever the scale:
    >>> from dsn.centering.structure import CenteringConfig
    >>> desired_width(120, CenteringConfig(max_size=100, max_scale=0.5))
    100

    Otherwise the width is a fraction of the viewport:
    >>> desired_width(100, CenteringConfig(max_size=0, max_scale=0.75))
    75
    >>> desired_width(99, CenteringConfig(max_size=None, max_scale=0.5))
    49

    Without a usable scale there's nothing to derive the width from:
    >>> desired_width(100, CenteringConfig(max_size=0, max_scale=0))
    Traceback (most recent call last):
    ...
    dsn.centering.errors.InvalidConfigError: max_scale must be positive when no max_size is given (got 0)
    """
    if config.max_size is not None and config.max_size > 0:
        return config.max_size

    if config.max_scale is None or config.max_scale <= 0:
        raise InvalidConfigError(
            "max_scale must be positive when no max_size is given (got %s)" % config.max_scale)

    return floor(config.max_scale * viewport_width)


def offset_and_scale(raw_margin, left_offset=0, left_factor=1.0, right_offset=0, right_factor=1.0):
    """
    Turns a single raw margin into a (possibly asymmetric) pair, by adding the offset and multiplying by the factor of
    each side. Unset offsets and factors (None) have no effect.

    >>> offset_and_scale(10)
    MarginPair(left=10, right=10)
    >>> offset_and_scale(10, 2, 1.5, None, None)
    MarginPair(left=18, right=10)
    >>> offset_and_scale(10, right_offset=-3, right_factor=0.5)
    MarginPair(left=10, right=3)
    """
    left_offset = 0 if left_offset is None else left_offset
    right_offset = 0 if right_offset is None else right_offset
    left_factor = 1.0 if left_factor is None else left_factor
    right_factor = 1.0 if right_factor is None else right_factor

    return MarginPair(
        floor((raw_margin + left_offset) * left_factor),
        floor((raw_margin + right_offset) * right_factor))


def relative_margins(viewport_width, config):
    """
    Centers the content within the viewport.

    >>> from dsn.centering.structure import CenteringConfig
    >>> relative_margins(120, CenteringConfig(max_size=100))
    MarginPair(left=10, right=10)

    An odd amount of room is rounded down:
    >>> relative_margins(121, CenteringConfig(max_size=100))
    MarginPair(left=10, right=10)

    There's no clamping: a viewport that's narrower than the desired width simply yields negative margins.
    >>> relative_margins(90, CenteringConfig(max_size=100))
    MarginPair(left=-5, right=-5)
    """
    raw_margin = floor(0.5 * (viewport_width - desired_width(viewport_width, config)))

    return offset_and_scale(
        raw_margin,
        config.margin_left_offset,
        config.margin_left_factor,
        config.margin_right_offset,
        config.margin_right_factor)


def absolute_margins(viewport_width, frame_width, viewport_left_offset, config):
    """
    Centers the content within the frame; returns None if there's no room to center (the caller should then leave the
    margins alone).

    A viewport at the left edge of the frame gets the full margin on the left, and none on the right (because its right
    edge is still half a frame away from the frame's right edge):
    >>> from dsn.centering.structure import CenteringConfig
    >>> absolute_margins(100, 200, 0, CenteringConfig(max_size=100))
    MarginPair(left=50, right=0)

    A viewport flush against the right edge of the frame gets the mirror image; except that the left margin never drops
    below 1:
    >>> absolute_margins(100, 200, 100, CenteringConfig(max_size=100))
    MarginPair(left=1, right=50)

    No room:
    >>> print(absolute_margins(100, 90, 0, CenteringConfig(max_size=100)))
    None
    """
    desired = desired_width(viewport_width, config)
    right_edge = viewport_left_offset + viewport_width

    margin = floor(0.5 * (frame_width - desired))
    if margin <= 0:
        return None

    # The viewport's own offset is subtracted out per side; the left side keeps at least 1.
    left = floor(max(1, margin - viewport_left_offset))
    right = floor(max(0, margin - (frame_width - right_edge)))
    return MarginPair(left, right)


def scale_margins(margins, config):
    """
    Applies the offsets and factors of the config to each side of an already computed pair.

    >>> from dsn.centering.structure import CenteringConfig
    >>> scale_margins(MarginPair(50, 0), CenteringConfig(margin_left_offset=2, margin_right_factor=2.0))
    MarginPair(left=52, right=0)
    """
    left, _ = offset_and_scale(margins.left, config.margin_left_offset, config.margin_left_factor)
    _, right = offset_and_scale(
        margins.right, right_offset=config.margin_right_offset, right_factor=config.margin_right_factor)
    return MarginPair(left, right)


def compute_margins(dimensions, config):
    """
    The margins for the given dimensions, using the strategy the config asks for. None means: leave the margins alone.

    >>> from dsn.centering.structure import CenteringConfig, Dimensions
    >>> compute_margins(Dimensions(120, 300, 0), CenteringConfig(max_size=100))
    MarginPair(left=10, right=10)
    >>> compute_margins(Dimensions(100, 200, 0), CenteringConfig(max_size=100, use_absolute_centering=True))
    MarginPair(left=50, right=0)
    """
    if config.use_absolute_centering:
        margins = absolute_margins(
            dimensions.viewport_width, dimensions.frame_width, dimensions.viewport_left_offset, config)

        if margins is None:
            return None

        return scale_margins(margins, config)

    return relative_margins(dimensions.viewport_width, config)
