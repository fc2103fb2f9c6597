"""
Utils for testing.
"""
from channel import Channel
from config import ConfigStore

from dsn.centering.errors import ViewportGoneError
from dsn.centering.structure import LayoutChange


class FakeViewport(object):
    def __init__(self, width, content_id, left_offset, margins):
        self.width = width
        self.content_id = content_id
        self.left_offset = left_offset
        self.margins = margins
        self.visible = True
        self.channel = Channel()

        # How often were the margins written? Useful to check that nothing happens when nothing should.
        self.margin_writes = 0


class FakeHost(object):
    """An in-memory host for the CenteringController: viewports are plain objects in a dict, layout changes are
    broadcast over a Channel per viewport.

    >>> host = FakeHost(frame_width=120)
    >>> host.add_viewport('a', 120, margins=(2, 2))
    >>> host.get_margins('a')
    (2, 2)
    >>> host.close('a')
    >>> host.get_margins('a')
    Traceback (most recent call last):
    ...
    dsn.centering.errors.ViewportGoneError: Viewport 'a' is gone
    """

    def __init__(self, frame_width=200, config_store=None):
        self.frame_width = frame_width
        self.config_store = config_store if config_store is not None else ConfigStore()
        self.viewports = {}

    def add_viewport(self, viewport_id, width, content_id=None, left_offset=0, margins=(None, None)):
        content_id = content_id if content_id is not None else "content-%s" % viewport_id
        self.viewports[viewport_id] = FakeViewport(width, content_id, left_offset, margins)

    def _viewport(self, viewport_id):
        if viewport_id not in self.viewports:
            raise ViewportGoneError(viewport_id)
        return self.viewports[viewport_id]

    # ## The host interface as used by the controller

    def get_viewport_width(self, viewport_id):
        return self._viewport(viewport_id).width

    def get_frame_width(self, viewport_id):
        self._viewport(viewport_id)
        return self.frame_width

    def get_viewport_left_offset(self, viewport_id):
        return self._viewport(viewport_id).left_offset

    def get_visible_viewports(self):
        return [viewport_id for viewport_id, viewport in self.viewports.items() if viewport.visible]

    def get_displayed_content_id(self, viewport_id):
        return self._viewport(viewport_id).content_id

    def get_margins(self, viewport_id):
        return self._viewport(viewport_id).margins

    def set_margins(self, viewport_id, left, right):
        viewport = self._viewport(viewport_id)
        viewport.margins = (left, right)
        viewport.margin_writes += 1

    def subscribe_layout_change(self, viewport_id, callback):
        self._viewport(viewport_id).channel.connect(callback)

    def unsubscribe_layout_change(self, viewport_id, callback):
        self._viewport(viewport_id).channel.disconnect(callback)

    def get_config(self):
        return self.config_store.get_config()

    # ## Changing the layout; each of these notifies the subscribers

    def subscriber_count(self, viewport_id):
        return len(self._viewport(viewport_id).channel)

    def notify(self, viewport_id):
        self._viewport(viewport_id).channel.broadcast(LayoutChange(viewport_id))

    def notify_all(self):
        for viewport_id in list(self.viewports):
            self.notify(viewport_id)

    def resize(self, viewport_id, width, left_offset=None):
        viewport = self._viewport(viewport_id)
        viewport.width = width
        if left_offset is not None:
            viewport.left_offset = left_offset
        self.notify(viewport_id)

    def resize_frame(self, frame_width):
        self.frame_width = frame_width
        self.notify_all()

    def show(self, viewport_id, content_id):
        self._viewport(viewport_id).content_id = content_id
        self.notify(viewport_id)

    def set_visible(self, viewport_id, visible):
        self._viewport(viewport_id).visible = visible
        self.notify_all()

    def close(self, viewport_id):
        """Removes the viewport; the remaining ones are told that the layout changed. Subscribers of the closed viewport
        are not told anything: from here on, it's simply gone."""
        del self.viewports[viewport_id]
        self.notify_all()
