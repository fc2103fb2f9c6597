"""
Hosting centered viewports in kivy.

The viewports are TextInput widgets. Centering thinks in columns, kivy in pixels; we translate using the width of a
single character in the widget's font (which is exact for monospaced fonts, and a decent approximation otherwise). The
margins are the left and right components of the TextInput's padding.
"""
from kivy.core.text import Label

from dsn.centering.errors import ViewportGoneError
from dsn.centering.structure import LayoutChange


class KivyViewportHost(object):

    def __init__(self, config_store, window):
        self.config_store = config_store
        self.window = window

        self.widgets = {}
        self.content_ids = {}

        # (viewport_id, callback) => the function that's actually bound to the widget's properties
        self.bindings = {}

        # (font_name, font_size) => width of a single column in pixels
        self.column_widths = {}

    def register(self, viewport_id, widget, content_id):
        self.widgets[viewport_id] = widget
        self.content_ids[viewport_id] = content_id

    def unregister(self, viewport_id):
        for key in [key for key in self.bindings if key[0] == viewport_id]:
            self._unbind(viewport_id, self.bindings.pop(key))

        self.content_ids.pop(viewport_id, None)
        return self.widgets.pop(viewport_id, None)

    def _widget(self, viewport_id):
        if viewport_id not in self.widgets:
            raise ViewportGoneError(viewport_id)
        return self.widgets[viewport_id]

    def _column_width(self, widget):
        key = (widget.font_name, widget.font_size)
        if key not in self.column_widths:
            label = Label(text='M', font_name=widget.font_name, font_size=widget.font_size, padding=(0, 0))
            label.refresh()
            self.column_widths[key] = max(1, label.texture.width)

        return self.column_widths[key]

    def _to_columns(self, widget, pixels):
        return int(pixels // self._column_width(widget))

    # ## The host interface as used by the controller

    def get_viewport_width(self, viewport_id):
        widget = self._widget(viewport_id)
        return self._to_columns(widget, widget.width)

    def get_frame_width(self, viewport_id):
        return self._to_columns(self._widget(viewport_id), self.window.width)

    def get_viewport_left_offset(self, viewport_id):
        widget = self._widget(viewport_id)
        x, _ = widget.to_window(widget.x, widget.y)
        return self._to_columns(widget, max(0, x))

    def get_visible_viewports(self):
        return [
            viewport_id for viewport_id, widget in self.widgets.items()
            if widget.get_root_window() is not None and widget.width > 0]

    def get_displayed_content_id(self, viewport_id):
        self._widget(viewport_id)
        return self.content_ids[viewport_id]

    def get_margins(self, viewport_id):
        # In columns, but not rounded: restoring should give back the exact original padding.
        widget = self._widget(viewport_id)
        column_width = float(self._column_width(widget))
        return (widget.padding[0] / column_width, widget.padding[2] / column_width)

    def set_margins(self, viewport_id, left, right):
        widget = self._widget(viewport_id)
        column_width = self._column_width(widget)

        _, top, _, bottom = widget.padding
        widget.padding = [
            (left or 0) * column_width,
            top,
            (right or 0) * column_width,
            bottom,
        ]

    def subscribe_layout_change(self, viewport_id, callback):
        widget = self._widget(viewport_id)

        def on_change(instance, value):
            callback(LayoutChange(viewport_id))

        widget.bind(size=on_change, pos=on_change)
        self.bindings[(viewport_id, callback)] = on_change

    def unsubscribe_layout_change(self, viewport_id, callback):
        on_change = self.bindings.pop((viewport_id, callback), None)
        if on_change is not None:
            self._unbind(viewport_id, on_change)

    def _unbind(self, viewport_id, on_change):
        widget = self.widgets.get(viewport_id)
        if widget is not None:
            widget.unbind(size=on_change, pos=on_change)

    def get_config(self):
        return self.config_store.get_config()
