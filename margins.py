import logging

from utils import pmts

from dsn.centering.structure import MarginPair

logger = logging.getLogger(__name__)


def _clamped(value):
    if value is None:
        return None
    return max(0, value)


class MarginApplier(object):
    """Writes margins to a host's viewports. While centering is active for a viewport, this is the only thing that writes
    its margins.

    Viewports are referred to by id only, and resolved by the host on every call; if the host no longer knows the id it
    raises ViewportGoneError, which we let through to the controller.
    """

    def __init__(self, host):
        self.host = host

    def apply(self, viewport_id, margins):
        pmts(margins, MarginPair)

        left, right = _clamped(margins.left), _clamped(margins.right)
        logger.debug("Applying margins (%s, %s) to %r", left, right, viewport_id)
        self.host.set_margins(viewport_id, left, right)

    def snapshot(self, viewport_id):
        left, right = self.host.get_margins(viewport_id)
        return MarginPair(left, right)

    def restore(self, viewport_id, snapshot):
        # Not clamped: whatever was there before we started is put back as-is, None (unset) included.
        self.host.set_margins(viewport_id, snapshot.left, snapshot.right)
