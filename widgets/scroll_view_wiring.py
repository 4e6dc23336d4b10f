"""
What a RepositioningScrollView reports to its RepositioningController: which content it scrolls, and when the window
changes shape.

Kept apart from the ScrollView itself (and from kivy.core.window), so that it can be used with any object that has
Kivy's `bind`/`unbind` and a `size`.
"""

from widgets.kivy_tree import KivyScrollHost, KivyTreeProvider

LANDSCAPE = 'landscape'
PORTRAIT = 'portrait'


def orientation_for_size(width, height):
    return LANDSCAPE if height > 0 and width / height > 1 else PORTRAIT


class ScrollViewWiring(object):

    def __init__(self, controller, scroll_view, window):
        self.controller = controller
        self.scroll_view = scroll_view
        self.window = window

        # The first metrics change of a rotation arrives before the relayout, i.e. in the orientation we're in now.
        self.controller.orientation = orientation_for_size(*window.size)

        self.window.bind(on_resize=self.on_window_resize)

    def content_added(self, content):
        self.controller.attach(KivyTreeProvider(content), KivyScrollHost(self.scroll_view, content), content)

    def content_removed(self):
        self.controller.detach()

    def parent_changed(self, parent):
        # Kivy's bind does not add a callback that is already bound.
        if parent is None:
            self.window.unbind(on_resize=self.on_window_resize)
        else:
            self.window.bind(on_resize=self.on_window_resize)

    def on_window_resize(self, window, width, height):
        self.controller.metrics_changed(orientation_for_size(width, height))
