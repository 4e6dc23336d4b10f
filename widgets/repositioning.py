from kivy.clock import Clock
from kivy.logger import Logger

from channel import Channel
from config import get_debounce_duration, get_trigger_initial_restore

from dsn.positions.clef import AnchorToTextInstance, CapturePosition
from dsn.positions.construct import play_position_note, target_offset_for_position
from dsn.positions.structure import NO_INDEX, TrackedPosition, filter_policy_for

from scanner import scan


class RepositioningController(object):
    """Keeps a scrolled view at the same place in its content, even when the content's layout changes.

    On scroll events (debounced), the controller remembers which record is at the top of the viewport, and how far
    into it we are (a TrackedPosition). When told that the layout has changed, it waits for the next frame (so that the
    new layout is in place) and scrolls to wherever that same record and alignment are now.

    The controller works through explicit handles that are handed to it in `attach`: a TreeProvider for the content, a
    scroll host (current_offset / has_geometry / jump_to), and the root of the scrolled content. Until then, all
    operations are no-ops.
    """

    def __init__(self, initial_index=None, initial_alignment=None, ignored_keys=(), only_children_of=None,
                 on_position_updated=None, trigger_initial_restore=None, debounce_duration=None, clock=None):

        self.position = TrackedPosition(
            NO_INDEX if initial_index is None else initial_index,
            0 if initial_alignment is None else initial_alignment)

        self.filter_policy = filter_policy_for(ignored_keys, only_children_of)

        self.trigger_initial_restore = (
            get_trigger_initial_restore() if trigger_initial_restore is None else trigger_initial_restore)
        self.debounce_duration = get_debounce_duration() if debounce_duration is None else debounce_duration

        self.clock = Clock if clock is None else clock

        # Observers of position updates connect here; they receive the new TrackedPosition.
        self.position_channel = Channel()
        if on_position_updated is not None:
            self.position_channel.connect(on_position_updated)

        self.tree_provider = None
        self.scroll_host = None
        self.content_root = None

        # Jumps made by ourselves raise a scroll event too; that one should not lead to a capture.
        self._ignore_next_scroll = False

        # Orientation as last reported through metrics_changed.
        self.orientation = None

        self._settle_trigger = self.clock.create_trigger(self._on_scroll_settled, self.debounce_duration)
        self._restore_trigger = self.clock.create_trigger(self._restore_after_layout, 0)

    @property
    def current_index(self):
        return self.position.index

    @property
    def current_alignment(self):
        return self.position.alignment

    def attach(self, tree_provider, scroll_host, content_root):
        self.tree_provider = tree_provider
        self.scroll_host = scroll_host
        self.content_root = content_root

        if self.trigger_initial_restore:
            self._restore_trigger()

    def detach(self):
        self._settle_trigger.cancel()
        self._restore_trigger.cancel()

        self.tree_provider = None
        self.scroll_host = None
        self.content_root = None

    def _has_geometry(self):
        return self.scroll_host is not None and self.scroll_host.has_geometry()

    def _scan(self, record_text=False):
        return scan(self.tree_provider, self.content_root, self.filter_policy, record_text=record_text)

    # ## Section for incoming events
    def on_raw_scroll(self, *args):
        # Debouncing: each raw event pushes the settle moment back.
        self._settle_trigger.cancel()
        self._settle_trigger()

    def _on_scroll_settled(self, dt):
        if self._ignore_next_scroll:
            self._ignore_next_scroll = False
            return

        self.capture()
        self.position_channel.broadcast(self.position)

    def metrics_changed(self, orientation):
        """A change in the window's metrics. A rotation is announced twice: once before and once after the relayout.
        The first one finds the orientation unchanged: we use it to record our position while it's still valid. The
        second one comes with the new orientation: we restore after the next frame."""

        if orientation == self.orientation:
            self.capture()
            return

        self.orientation = orientation
        self._restore_trigger()

    def layout_changed(self):
        self._restore_trigger()

    def _restore_after_layout(self, dt):
        self.restore()

    # ## Section for the actual positioning
    def capture(self):
        if not self._has_geometry():
            return

        note = CapturePosition(self.scroll_host.current_offset(), self._scan())
        self.position = play_position_note(note, self.position)

        Logger.debug("Reposition: captured %s" % self.position)

    def restore(self):
        """Scrolls to the tracked position; returns the offset jumped to, or None if there was nothing to do."""
        if not self._has_geometry():
            return None

        if not self.position.is_anchored:
            return None

        target = target_offset_for_position(self.position, self._scan())

        Logger.info("Reposition: restoring %s at offset %s" % (self.position, target))

        self._ignore_next_scroll = True
        self.scroll_host.jump_to(target)
        return target

    def find_text_instance(self, pattern, occurrence):
        """Scrolls to the record holding the `occurrence`-th match of `pattern` (a case-insensitive regular
        expression, counted over the whole content). If there are not that many matches, nothing happens."""
        if not self._has_geometry():
            return None

        note = AnchorToTextInstance(pattern, occurrence, self._scan(record_text=True))
        position = play_position_note(note, self.position)

        if position is self.position:
            Logger.debug("Reposition: fewer than %s matches for %r" % (occurrence, pattern))
            return None

        Logger.info("Reposition: match %s of %r is in record %s" % (occurrence, pattern, position.index))
        self.position = position
        self.position_channel.broadcast(self.position)
        return self.restore()
