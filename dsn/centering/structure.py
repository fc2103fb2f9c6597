from collections import namedtuple
from copy import copy


LEFT = 0
RIGHT = 1

# A pair of margins, in the host's units (typically: columns). In a snapshot of a viewport's original margins either
# side may be None, meaning "no margin was set"; freshly computed pairs always have ints on both sides.
MarginPair = namedtuple('MarginPair', ('left', 'right'))

# Sampled from the host on every computation; never kept around across events.
Dimensions = namedtuple('Dimensions', ('viewport_width', 'frame_width', 'viewport_left_offset'))

# What hosts send to the layout-change subscribers: "something about the layout of this viewport changed".
LayoutChange = namedtuple('LayoutChange', ('viewport_id',))


class CenteringConfig(object):
    """The tunable parameters of centering. Owned by the host (see config.py); the core only reads them."""

    def __init__(
            self,
            min_size=80,
            max_size=0,
            max_scale=0.75,
            single_window_only=True,
            use_absolute_centering=False,
            ignored_content_ids=(),
            margin_left_offset=0,
            margin_right_offset=0,
            margin_left_factor=1.0,
            margin_right_factor=1.0,
            margin_step=1):

        self.min_size = min_size

        # 0 (or None) means: derive the desired width from max_scale
        self.max_size = max_size
        self.max_scale = max_scale

        self.single_window_only = single_window_only
        self.use_absolute_centering = use_absolute_centering
        self.ignored_content_ids = frozenset(ignored_content_ids)

        self.margin_left_offset = margin_left_offset
        self.margin_right_offset = margin_right_offset
        self.margin_left_factor = margin_left_factor
        self.margin_right_factor = margin_right_factor

        self.margin_step = margin_step

    def replace(self, **kwargs):
        """Creates a copy of the config, with some values (as provided) changed."""
        result = copy(self)
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError("Unknown centering option: %s" % key)
            if key == 'ignored_content_ids':
                value = frozenset(value)
            setattr(result, key, value)
        return result

    def offset_for_side(self, side):
        return self.margin_left_offset if side == LEFT else self.margin_right_offset

    def __repr__(self):
        return "CenteringConfig(min=%s, max=%s, scale=%s, single=%s, absolute=%s)" % (
            self.min_size, self.max_size, self.max_scale, self.single_window_only, self.use_absolute_centering)


class MarginOffsets(object):
    """The live, per-viewport margin offsets. None on a side means: not overridden, use the configured offset."""

    def __init__(self, left=None, right=None):
        self.left = left
        self.right = right

    def for_side(self, side):
        return self.left if side == LEFT else self.right

    def with_side(self, side, value):
        if side == LEFT:
            return MarginOffsets(value, self.right)
        return MarginOffsets(self.left, value)

    def effective(self, side, config):
        """The offset to use for `side`; falls back to the configured one if there is no override."""
        value = self.for_side(side)
        if value is None:
            return config.offset_for_side(side)
        return value

    def __eq__(self, other):
        return isinstance(other, MarginOffsets) and (self.left, self.right) == (other.left, other.right)

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "MarginOffsets(%s, %s)" % (self.left, self.right)


class ViewportState(object):
    """Session state for a single viewport on which centering is active. Owned by the CenteringController."""

    def __init__(self, viewport_id, owner_content_id, original_margins, disposer=None, offsets=None):
        self.viewport_id = viewport_id
        self.owner_content_id = owner_content_id
        self.original_margins = original_margins
        self.disposer = disposer
        self.offsets = offsets if offsets is not None else MarginOffsets()
        self.active = True

    def __repr__(self):
        return "ViewportState(%r, %r, %s, %s)" % (
            self.viewport_id, self.owner_content_id, self.original_margins, self.offsets)
