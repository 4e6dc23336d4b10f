from kivy.core.window import Window
from kivy.uix.scrollview import ScrollView

from widgets.scroll_view_wiring import ScrollViewWiring


class RepositioningScrollView(ScrollView):
    """A vertically scrolling ScrollView that keeps its position in its content when the window changes shape; see
    RepositioningController. Children are expected to span the full width of the view."""

    def __init__(self, **kwargs):
        self.controller = kwargs.pop('controller')
        self.wiring = ScrollViewWiring(self.controller, self, Window)

        kwargs.setdefault('do_scroll_x', False)
        super(RepositioningScrollView, self).__init__(**kwargs)

        self.bind(scroll_y=self.controller.on_raw_scroll)
        self.bind(parent=self.on_parent_change)

    def add_widget(self, widget, *args, **kwargs):
        super(RepositioningScrollView, self).add_widget(widget, *args, **kwargs)
        self.wiring.content_added(widget)

    def remove_widget(self, widget, *args, **kwargs):
        super(RepositioningScrollView, self).remove_widget(widget, *args, **kwargs)
        self.wiring.content_removed()

    def on_parent_change(self, instance, parent):
        self.wiring.parent_changed(parent)
