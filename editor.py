import logging
from sys import argv
from os.path import isfile

from kivy.app import App
from kivy.config import Config
from kivy.core.window import Window
from kivy.logger import Logger
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.textinput import TextInput

from centering import CenteringController
from commands import CenteringCommands
from config import ConfigStore

from widgets.centering import KivyViewportHost
from widgets.layout_constants import get_font_size, SPACING

Config.set('kivy', 'exit_on_escape', '0')


class CenteringEditorGUI(App):
    """Side-by-side panes of text, each of which can be centered. The keys (all with ctrl):

    * e: toggle centering of the focussed pane;   l: recenter it
    * [ and ]: less/more margin on the left;       ; and ': less/more margin on the right
    * n: split (open the same file in a new pane); w: close the focussed pane
    """

    def __init__(self, filenames):
        super(CenteringEditorGUI, self).__init__()

        self.filenames = filenames
        self.config_store = ConfigStore()
        self.next_viewport_id = 0

    def build_config(self, config):
        # Only fills in what the application's ini file doesn't have yet.
        self.config_store.set_defaults(config)

    def build(self):
        self.config_store.load(self.config)

        self.host = KivyViewportHost(self.config_store, Window)
        self.controller = CenteringController(self.host)
        self.commands = CenteringCommands(self.controller)

        self.horizontal_layout = BoxLayout(spacing=SPACING, orientation='horizontal')

        for filename in self.filenames:
            self.open_pane(filename)

        Window.bind(on_key_down=self.on_key_down)
        return self.horizontal_layout

    def on_stop(self):
        self.controller.deactivate_all()

    def open_pane(self, filename):
        text = ""
        if isfile(filename):
            with open(filename) as f:
                text = f.read()

        pane = TextInput(text=text, font_name='RobotoMono-Regular', font_size=get_font_size())

        viewport_id = self.next_viewport_id
        self.next_viewport_id += 1

        self.host.register(viewport_id, pane, filename)
        self.horizontal_layout.add_widget(pane)
        pane.focus = True
        return viewport_id

    def close_pane(self, viewport_id):
        if len(self.host.widgets) <= 1:
            Logger.info("Editor: not closing the last pane")
            return

        # Give back the original margins while the widget is still ours to change.
        self.controller.deactivate(viewport_id)

        pane = self.host.unregister(viewport_id)
        self.horizontal_layout.remove_widget(pane)

    def focussed_viewport(self):
        for viewport_id, widget in self.host.widgets.items():
            if widget.focus:
                return viewport_id

        return next(iter(self.host.widgets), None)

    def on_key_down(self, window, key, scancode, codepoint, modifiers):
        if modifiers != ['ctrl'] or codepoint is None:
            return False

        viewport_id = self.focussed_viewport()
        if viewport_id is None:
            return False

        margin_commands = {
            '[': self.commands.dec_margin_left,
            ']': self.commands.inc_margin_left,
            ';': self.commands.dec_margin_right,
            "'": self.commands.inc_margin_right,
        }

        if codepoint == 'e':
            active = self.commands.toggle(viewport_id)
            Logger.info("Editor: centering %s for pane %s", "on" if active else "off", viewport_id)

        elif codepoint == 'l':
            reason = self.commands.recenter(viewport_id)
            if reason is not None:
                Logger.info("Editor: pane %s not centered: %s", viewport_id, reason)

        elif codepoint in margin_commands:
            # margin changes only take effect on the next recenter; in the GUI we want to see them right away.
            if margin_commands[codepoint](viewport_id):
                self.commands.recenter(viewport_id)

        elif codepoint == 'n':
            self.open_pane(self.host.get_displayed_content_id(viewport_id))

        elif codepoint == 'w':
            self.close_pane(viewport_id)

        else:
            return False

        return True


def main():
    if len(argv) < 2:
        print("Usage: ", argv[0], "FILENAME [FILENAME...]")
        exit()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    CenteringEditorGUI(argv[1:]).run()


if __name__ == "__main__":
    main()
