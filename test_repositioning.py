import unittest

from dsn.positions.structure import IgnoredKeys, OnlyChildrenOf, TrackedPosition
from test_utils import FakeClock, FakeScrollHost, Node, NodeTreeProvider, layout, text_node
from widgets.repositioning import RepositioningController

PARAGRAPHS = 10


def paragraphs(lines):
    """Paragraphs of `lines` lines of 20, each in a padding of 10; i.e. each block is 20 * lines + 20 high and its text
    starts 10 below the block's top."""
    texts = [
        text_node(lines, text="Lorem ipsum" if i % 2 == 0 else "dolor sit amet")
        for i in range(PARAGRAPHS)]

    root = Node([Node([text], padding=10) for text in texts])
    layout(root)
    return root, texts


def reflow(root, texts, lines):
    for text in texts:
        text.height = text.line_height * lines
    layout(root)


class RepositioningTestCase(unittest.TestCase):

    def setUp(self):
        # Portrait: blocks of 120, i.e. block i starts at 120 * i, its text at 120 * i + 10
        self.root, self.texts = paragraphs(5)
        self.clock = FakeClock()
        self.host = FakeScrollHost()
        self.updates = []

    def controller(self, **kwargs):
        kwargs.setdefault('debounce_duration', 0.3)
        kwargs.setdefault('trigger_initial_restore', False)
        controller = RepositioningController(clock=self.clock, on_position_updated=self.updates.append, **kwargs)
        controller.attach(NodeTreeProvider(), self.host, self.root)
        return controller

    def scroll_to(self, controller, offset):
        self.host.offset = offset
        controller.on_raw_scroll()

    def test_initial_values(self):
        controller = RepositioningController(clock=self.clock)
        self.assertEqual(-1, controller.current_index)
        self.assertEqual(0, controller.current_alignment)

        controller = RepositioningController(initial_index=5, initial_alignment=0.5, clock=self.clock)
        self.assertEqual(5, controller.current_index)
        self.assertEqual(0.5, controller.current_alignment)

    def test_configured_defaults(self):
        controller = RepositioningController(clock=self.clock)
        self.assertEqual(0.3, controller.debounce_duration)
        self.assertFalse(controller.trigger_initial_restore)
        self.assertIsInstance(controller.filter_policy, IgnoredKeys)

        controller = RepositioningController(only_children_of='body', clock=self.clock)
        self.assertIsInstance(controller.filter_policy, OnlyChildrenOf)

    def test_debounce_coalesces_scroll_events(self):
        controller = self.controller()

        for offset in (100, 200, 300, 400, 500):
            self.scroll_to(controller, offset)
            self.clock.advance(0.1)

        self.assertEqual([], self.updates)

        self.clock.advance(0.3)
        self.assertEqual(1, len(self.updates))

        # captured at the last offset: 20 pixels into the 5th block
        self.assertEqual(4, controller.current_index)
        self.assertAlmostEqual(20 / 120, controller.current_alignment)
        self.assertIs(controller.position, self.updates[0])

    def test_capture_without_geometry_is_a_no_op(self):
        controller = self.controller(initial_index=2, initial_alignment=0.5)
        self.host.geometry = False

        self.scroll_to(controller, 500)
        self.clock.advance(0.3)
        self.assertEqual(TrackedPosition(2, 0.5), controller.position)

    def test_capture_on_empty_tree(self):
        self.root.children = []
        controller = self.controller()

        controller.capture()
        self.assertEqual(TrackedPosition(-1, 0), controller.position)

    def test_restore(self):
        controller = self.controller(initial_index=2, initial_alignment=0.5)

        # 240 + 60 = 300; that's 50 into the text (starting at 250), i.e. halfway a line; ties go to the next line
        self.assertEqual(310, controller.restore())
        self.assertEqual([310], self.host.jumps)

        # restoring does not change what we track
        self.assertEqual(TrackedPosition(2, 0.5), controller.position)

    def test_restored_jump_does_not_capture(self):
        controller = self.controller(initial_index=2, initial_alignment=0.5)
        controller.restore()

        # the echo of our own jump
        controller.on_raw_scroll()
        self.clock.advance(0.3)
        self.assertEqual([], self.updates)
        self.assertEqual(TrackedPosition(2, 0.5), controller.position)

        # the user scrolling again
        self.scroll_to(controller, 130)
        self.clock.advance(0.3)
        self.assertEqual(1, len(self.updates))
        self.assertEqual(1, controller.current_index)

    def test_restore_no_ops(self):
        unattached = RepositioningController(initial_index=2, clock=self.clock)
        self.assertIsNone(unattached.restore())

        self.assertIsNone(self.controller().restore())

        controller = self.controller(initial_index=2)
        self.host.geometry = False
        self.assertIsNone(controller.restore())

        self.assertEqual([], self.host.jumps)

    def test_restore_on_empty_tree_goes_to_top(self):
        self.root.children = []
        controller = self.controller(initial_index=2, initial_alignment=0.5)

        self.assertEqual(0, controller.restore())
        self.assertEqual([0], self.host.jumps)

    def test_restore_beyond_last_record(self):
        controller = self.controller(initial_index=PARAGRAPHS + 3, initial_alignment=0)
        self.assertEqual(120 * (PARAGRAPHS - 1), controller.restore())

    def test_rotation(self):
        controller = self.controller()
        controller.orientation = 'portrait'

        # 30 into the 4th block, i.e. at the start of the second line of its text
        self.host.offset = 390
        controller.metrics_changed('portrait')
        self.assertEqual(TrackedPosition(3, 0.25), controller.position)

        # Landscape: blocks of 80
        reflow(self.root, self.texts, 3)
        controller.metrics_changed('landscape')
        self.assertEqual([], self.host.jumps)

        self.clock.advance()
        # 240 + 20 is 10 into the text: we go to the start of its first line
        self.assertEqual([250], self.host.jumps)

        self.assertEqual(TrackedPosition(3, 0.25), controller.position)
        self.assertEqual('landscape', controller.orientation)

    def test_layout_changes_restore_once_after_the_next_frame(self):
        controller = self.controller(initial_index=1, initial_alignment=0)

        controller.layout_changed()
        controller.layout_changed()
        self.assertEqual([], self.host.jumps)

        self.clock.advance()
        self.assertEqual([120], self.host.jumps)

    def test_initial_restore(self):
        controller = self.controller(initial_index=5, initial_alignment=0, trigger_initial_restore=True)
        self.assertEqual([], self.host.jumps)

        self.clock.advance()
        self.assertEqual([600], self.host.jumps)
        self.assertEqual(5, controller.current_index)

    def test_detach_cancels_pending_work(self):
        controller = self.controller(initial_index=1)
        self.scroll_to(controller, 500)
        controller.layout_changed()

        controller.detach()
        self.clock.advance(1)

        self.assertEqual([], self.updates)
        self.assertEqual([], self.host.jumps)

    def test_find_text_instance(self):
        controller = self.controller()

        # "lorem" is in the even paragraphs; the 3rd one is paragraph 4
        self.assertEqual(480, controller.find_text_instance("lorem", 3))
        self.assertEqual([480], self.host.jumps)
        self.assertEqual(TrackedPosition(4, 0), controller.position)
        self.assertEqual([TrackedPosition(4, 0)], self.updates)

    def test_find_text_instance_not_found(self):
        controller = self.controller(initial_index=1, initial_alignment=0.5)

        self.assertIsNone(controller.find_text_instance("lorem", PARAGRAPHS))
        self.assertEqual([], self.host.jumps)
        self.assertEqual(TrackedPosition(1, 0.5), controller.position)
        self.assertEqual([], self.updates)

    def test_observers(self):
        controller = self.controller()
        seen = []
        controller.position_channel.connect(seen.append)

        self.scroll_to(controller, 250)
        self.clock.advance(0.3)

        self.assertEqual([TrackedPosition(2, 10 / 120)], seen)
        self.assertEqual(seen, self.updates)


if __name__ == '__main__':
    unittest.main()
