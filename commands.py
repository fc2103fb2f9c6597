"""
The commands a user can give to control centering; thin wrappers around the CenteringController, such that a GUI only
needs to map keys (or menu items) to them.
"""
import logging

from dsn.centering.clef import DecreaseMarginOffset, IncreaseMarginOffset, SetMarginOffset
from dsn.centering.errors import AlreadyActiveError
from dsn.centering.structure import LEFT, RIGHT

logger = logging.getLogger(__name__)


class CenteringCommands(object):

    def __init__(self, controller):
        self.controller = controller

    def _step(self):
        return self.controller.host.get_config().margin_step

    def toggle(self, viewport_id):
        """Returns whether centering is active afterwards."""
        if self.controller.is_active(viewport_id):
            self.controller.deactivate(viewport_id)
            return False

        self.controller.activate(viewport_id)
        return True

    def enable(self, viewport_id):
        try:
            self.controller.activate(viewport_id)
        except AlreadyActiveError as e:
            logger.info("%s", e)

    def disable(self, viewport_id):
        self.controller.deactivate(viewport_id)

    def recenter(self, viewport_id):
        return self.controller.manual_recenter(viewport_id)

    def set_margin_left(self, viewport_id, value):
        return self.controller.adjust_margin(viewport_id, SetMarginOffset(LEFT, value))

    def set_margin_right(self, viewport_id, value):
        return self.controller.adjust_margin(viewport_id, SetMarginOffset(RIGHT, value))

    def inc_margin_left(self, viewport_id):
        return self.controller.adjust_margin(viewport_id, IncreaseMarginOffset(LEFT, self._step()))

    def inc_margin_right(self, viewport_id):
        return self.controller.adjust_margin(viewport_id, IncreaseMarginOffset(RIGHT, self._step()))

    def dec_margin_left(self, viewport_id):
        return self.controller.adjust_margin(viewport_id, DecreaseMarginOffset(LEFT, self._step()))

    def dec_margin_right(self, viewport_id):
        return self.controller.adjust_margin(viewport_id, DecreaseMarginOffset(RIGHT, self._step()))
