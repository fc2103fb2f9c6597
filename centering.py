"""
Keeps the content of viewports centered while their layout changes.

The controller talks to a host (the thing that actually owns the viewports, e.g. a kivy application, or
test_utils.FakeHost) through the following duck-typed interface. Viewports are referred to by opaque ids; any of the
per-viewport calls raise ViewportGoneError if the id no longer resolves to a live viewport.

* get_viewport_width(viewport_id), get_frame_width(viewport_id), get_viewport_left_offset(viewport_id)
* get_visible_viewports(), get_displayed_content_id(viewport_id)
* get_margins(viewport_id) -> (left, right), set_margins(viewport_id, left, right)
* subscribe_layout_change(viewport_id, callback), unsubscribe_layout_change(viewport_id, callback)
* get_config() -> CenteringConfig; read anew on every computation.
"""
import logging
from functools import partial

from dsn.centering.construct import play_margin_note
from dsn.centering.errors import AlreadyActiveError, InvalidConfigError, ViewportGoneError
from dsn.centering.structure import Dimensions, LEFT, RIGHT, ViewportState
from dsn.centering.utils import compute_margins

from margins import MarginApplier

logger = logging.getLogger(__name__)


TOO_SMALL_FOR_MIN_SIZE = "too small (min-size)"
TOO_SMALL_FOR_MAX_SIZE = "too small (max-size)"
NOT_A_SINGLE_VIEWPORT = "not a single viewport"
NOT_ACTIVE = "not active"
NO_ROOM = "no room to center"
INVALID_CONFIG = "invalid configuration"
VIEWPORT_GONE = "viewport gone"


class CenteringController(object):

    def __init__(self, host, applier=None):
        self.host = host
        self.applier = applier if applier is not None else MarginApplier(host)

        # viewport_id => ViewportState; an id is in here iff centering is active for it.
        self.states = {}

    def is_active(self, viewport_id):
        return viewport_id in self.states

    def active_viewports(self):
        return list(self.states.keys())

    def activate(self, viewport_id):
        if viewport_id in self.states:
            # Leave the existing state (and the original margins it holds) alone.
            raise AlreadyActiveError(viewport_id)

        original_margins = self.applier.snapshot(viewport_id)
        content_id = self.host.get_displayed_content_id(viewport_id)

        self.host.subscribe_layout_change(viewport_id, self.on_layout_changed)
        disposer = partial(self.host.unsubscribe_layout_change, viewport_id, self.on_layout_changed)

        state = ViewportState(viewport_id, content_id, original_margins, disposer)
        self.states[viewport_id] = state
        logger.debug("Centering activated for %r (original margins: %s)", viewport_id, original_margins)

        # Nothing to restore yet: the margins are the original ones we just took a snapshot of.
        reason = self._recenter_or_drop(state, restore=False)
        if reason is not None:
            logger.info("Not centering %r: %s", viewport_id, reason)

    def deactivate(self, viewport_id):
        state = self.states.pop(viewport_id, None)
        if state is None:
            return

        state.active = False
        try:
            self.applier.restore(viewport_id, state.original_margins)
        except ViewportGoneError:
            logger.debug("Viewport %r disappeared before its margins could be restored", viewport_id)
        finally:
            self._dispose(state)

        logger.debug("Centering deactivated for %r", viewport_id)

    def deactivate_all(self):
        for viewport_id in self.active_viewports():
            self.deactivate(viewport_id)

    def on_layout_changed(self, event=None):
        """Recenters all active viewports; `event` is informational only, because a change in one viewport (e.g. it
        being closed) may affect the eligibility of the others."""
        for viewport_id in self.active_viewports():
            state = self.states.get(viewport_id)
            if state is None:
                # dropped while handling an earlier viewport in this same loop
                continue

            try:
                content_id = self.host.get_displayed_content_id(viewport_id)
            except ViewportGoneError:
                self._drop(state)
                continue

            if content_id != state.owner_content_id:
                logger.debug("Skipping %r: it now shows %r instead of %r",
                             viewport_id, content_id, state.owner_content_id)
                continue

            reason = self._recenter_or_drop(state)
            if reason is not None:
                logger.debug("Not centering %r: %s", viewport_id, reason)

    def manual_recenter(self, viewport_id):
        """Recenters a single viewport, whatever it's currently showing. Returns None if margins were applied, and the
        reason as a human-readable string otherwise."""
        state = self.states.get(viewport_id)
        if state is None:
            logger.info("Not centering %r: %s", viewport_id, NOT_ACTIVE)
            return NOT_ACTIVE

        try:
            state.owner_content_id = self.host.get_displayed_content_id(viewport_id)
        except ViewportGoneError:
            self._drop(state)
            return VIEWPORT_GONE

        reason = self._recenter_or_drop(state)
        if reason is not None:
            logger.info("Not centering %r: %s", viewport_id, reason)
        return reason

    def adjust_margin(self, viewport_id, note):
        """Plays a margin note (see dsn.centering.clef) on the viewport's offsets. Does not recenter by itself."""
        state = self.states.get(viewport_id)
        if state is None:
            logger.info("Ignoring margin adjustment for %r: %s", viewport_id, NOT_ACTIVE)
            return False

        state.offsets = play_margin_note(note, state.offsets, self.host.get_config())
        logger.debug("Margin offsets for %r are now %s", viewport_id, state.offsets)
        return True

    def is_eligible(self, viewport_id):
        return self.ineligibility_reason(viewport_id) is None

    def ineligibility_reason(self, viewport_id):
        return self._ineligibility_reason(viewport_id, self.host.get_config())

    def _ineligibility_reason(self, viewport_id, config):
        width = self.host.get_viewport_width(viewport_id)

        # Both checks apply independently, even if min_size > max_size.
        if width < (config.min_size or 0):
            return TOO_SMALL_FOR_MIN_SIZE

        if width < (config.max_size or 0):
            return TOO_SMALL_FOR_MAX_SIZE

        if config.single_window_only and self._other_viewport_visible(viewport_id, config):
            return NOT_A_SINGLE_VIEWPORT

        return None

    def _other_viewport_visible(self, viewport_id, config):
        for other_id in self.host.get_visible_viewports():
            if other_id == viewport_id:
                continue

            try:
                content_id = self.host.get_displayed_content_id(other_id)
            except ViewportGoneError:
                # Closed while we were looking; it's not visible anymore.
                continue

            if content_id not in config.ignored_content_ids:
                return True

        return False

    def _recenter_or_drop(self, state, restore=True):
        try:
            return self._recenter(state, restore)
        except ViewportGoneError:
            self._drop(state)
            return VIEWPORT_GONE

    def _recenter(self, state, restore=True):
        """Restore, then recompute, then apply. The restore always comes first, such that earlier margins never
        compound with new ones, and an ineligible viewport is left in its original state."""
        viewport_id = state.viewport_id
        if restore:
            self.applier.restore(viewport_id, state.original_margins)

        config = self.host.get_config()

        reason = self._ineligibility_reason(viewport_id, config)
        if reason is not None:
            return reason

        dimensions = Dimensions(
            self.host.get_viewport_width(viewport_id),
            self.host.get_frame_width(viewport_id),
            self.host.get_viewport_left_offset(viewport_id))

        effective_config = config.replace(
            margin_left_offset=state.offsets.effective(LEFT, config),
            margin_right_offset=state.offsets.effective(RIGHT, config))

        try:
            margins = compute_margins(dimensions, effective_config)
        except InvalidConfigError as e:
            logger.warning("Not centering %r: %s", viewport_id, e)
            return INVALID_CONFIG

        if margins is None:
            return NO_ROOM

        self.applier.apply(viewport_id, margins)
        return None

    def _drop(self, state):
        """Implicit deactivation, for viewports that are gone: there's nothing left to restore."""
        logger.info("Viewport %r is gone; centering deactivated", state.viewport_id)
        self.states.pop(state.viewport_id, None)
        state.active = False
        self._dispose(state)

    def _dispose(self, state):
        if state.disposer is None:
            return

        try:
            state.disposer()
        except ViewportGoneError:
            logger.debug("Viewport %r gone before unsubscribing; nothing left to unsubscribe", state.viewport_id)

        state.disposer = None
