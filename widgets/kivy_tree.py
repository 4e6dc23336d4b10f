"""
Kivy renditions of the collaborators that the RepositioningController works through.

Both are duck-typed on Kivy's widget API (children, parent, height, top, to_window; ScrollView's scroll_y) rather than
on Kivy's classes, so that the conversions can be exercised without a window.
"""

from dsn.viewports.utils import (
    bounded_viewport,
    document_fraction_for_viewport_position,
    viewport_position_for_document_fraction,
)

from scanner import TreeProvider


def widget_key(widget):
    """Kivy widgets have no notion of a key; we use an optional `key` attribute."""
    return getattr(widget, 'key', None)


def window_top(widget):
    return widget.to_window(widget.x, widget.top)[1]


class KivyTreeProvider(TreeProvider):

    def __init__(self, content, key=widget_key):
        """`content` is the widget that's being scrolled (the ScrollView's only child)."""
        self.content = content
        self._key = key

    def _is_in_content(self, widget):
        while widget is not None:
            if widget is self.content:
                return True
            widget = widget.parent

        return False

    def children(self, node):
        # Kivy puts the most recently added widget first; layouts draw them in order of addition.
        return list(reversed(node.children))

    def parent(self, node):
        if node is self.content:
            return None
        return node.parent

    def key(self, node):
        return self._key(node)

    def height(self, node):
        if not self._is_in_content(node):
            return None
        return node.height

    def offset_to_reveal(self, node):
        if not self._is_in_content(node):
            return None

        # Window coordinates grow upwards; scroll offsets grow downwards from the top of the content.
        return window_top(self.content) - window_top(node)

    def line_height(self, node):
        # Labels render through a core label (`_label`), which knows the font's metrics.
        core_label = getattr(node, '_label', None)
        if core_label is None:
            return None

        return core_label.get_extents('Wq')[1] * node.line_height

    def text(self, node):
        return node.text

    def text_box(self, node):
        """Labels draw their texture (the lines plus the label's padding) centered on the widget. The placement of the
        lines within a `text_size` higher than they need (see `valign`) is not taken into account."""
        height = self.height(node)
        if height is None:
            return None

        padding_top, padding_bottom = node.padding[1], node.padding[3]
        texture_height = node.texture_size[1]

        inset = (height - texture_height) / 2 + padding_top
        return inset, texture_height - padding_top - padding_bottom


class KivyScrollHost(object):
    """Scroll positions in pixels from the top of the content, on top of a ScrollView's scroll_y (1 being the top)."""

    def __init__(self, scroll_view, content):
        self.scroll_view = scroll_view
        self.content = content

    def has_geometry(self):
        return self.content.parent is self.scroll_view and self.scroll_view.height > 0

    def current_offset(self):
        document_fraction = 1 - self.scroll_view.scroll_y
        if self.content.height <= self.scroll_view.height:
            document_fraction = None

        return viewport_position_for_document_fraction(
            self.content.height, self.scroll_view.height, document_fraction)

    def jump_to(self, offset):
        position = bounded_viewport(self.content.height, self.scroll_view.height, offset)
        document_fraction = document_fraction_for_viewport_position(
            self.content.height, self.scroll_view.height, position)

        self.scroll_view.scroll_y = 1 if document_fraction is None else 1 - document_fraction
