from kivy.app import App
from kivy.config import Config
from kivy.logger import Logger
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.label import Label

from widgets.repositioning import RepositioningController
from widgets.repositioning_scroll_view import RepositioningScrollView

Config.set('kivy', 'exit_on_escape', '0')

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor incididunt ut labore et dolore "
    "magna aliqua. Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo "
    "consequat. Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. "
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt mollit anim id est laborum.")

PARAGRAPHS = 50


class ParagraphLabel(Label):
    """A label that wraps its text to its own width and is as high as the wrapped text."""

    def __init__(self, **kwargs):
        super(ParagraphLabel, self).__init__(size_hint_y=None, halign='left', valign='top', **kwargs)
        self.bind(width=self.on_width_change)
        self.bind(texture_size=self.on_texture_size_change)

    def on_width_change(self, instance, width):
        self.text_size = (width, None)

    def on_texture_size_change(self, instance, texture_size):
        self.height = texture_size[1]


class RepositioningDemo(App):

    def position_updated(self, position):
        Logger.info("Demo: now at %s" % position)

    def build(self):
        self.controller = RepositioningController(
            initial_index=5,
            initial_alignment=0.5,
            trigger_initial_restore=True,
            on_position_updated=self.position_updated,
        )

        content = BoxLayout(orientation='vertical', size_hint_y=None, padding=10, spacing=10)
        content.bind(minimum_height=content.setter('height'))

        for i in range(PARAGRAPHS):
            content.add_widget(ParagraphLabel(text="%s %s" % (i, LOREM)))

        scroll_view = RepositioningScrollView(controller=self.controller)
        scroll_view.add_widget(content)
        return scroll_view


def main():
    RepositioningDemo().run()


if __name__ == "__main__":
    main()
