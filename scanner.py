"""
The scanner collapses a live tree of rendered nodes into the flat, ordered list of PositionalRecords that the positions
dsn works on.

The tree itself is never owned or retained: it is accessed through a TreeProvider, and walked anew on every scan,
because the only thing we care about is its shape _right now_ (typically: right after a relayout).

Only leaves are turned into records, but a leaf is rarely the whole visual block. A text in a padding in a column has
the text as its leaf, but the visual block (what the user sees as "one paragraph") is the padding. We therefore walk up
from the leaf for as long as we are the only child of our parent, and take the size and position of the node we end up
at. The text-specific measurements are still taken on the leaf itself, because line boundaries are a property of the
text, not of the padding around it.
"""

from kivy.logger import Logger

from dsn.positions.structure import FilterPolicy, OnlyChildrenOf, PositionalRecord
from utils import pmts


class TreeProvider(object):
    """Read-only access to a tree of rendered nodes. Nodes are opaque to the scanner; all it knows of them is what it
    can ask the provider.

    Geometry-related methods return None for nodes that cannot (currently) be measured, e.g. because they are not
    attached to the scrolled content.
    """

    def children(self, node):
        """The children of `node`, in document order."""
        raise NotImplementedError()

    def parent(self, node):
        """The parent of `node`, or None at the top of the tree."""
        raise NotImplementedError()

    def key(self, node):
        """The identifying key of `node`, or None if it has none."""
        raise NotImplementedError()

    def height(self, node):
        raise NotImplementedError()

    def offset_to_reveal(self, node):
        """The scroll offset at which the top of `node` coincides with the top of the viewport."""
        raise NotImplementedError()

    def line_height(self, node):
        """The height of a single line if `node` is a text node; None otherwise."""
        raise NotImplementedError()

    def text(self, node):
        """The plain text of a text node."""
        raise NotImplementedError()

    def text_box(self, node):
        """(inset from the top of `node`, height) of the lines of text inside a text node, or None if it cannot be
        measured. By default the text fills the node."""
        height = self.height(node)
        if height is None:
            return None
        return 0, height


def find_by_key(provider, node, key):
    """Depth first; `node` itself is considered too."""
    if provider.key(node) == key:
        return node

    for child in provider.children(node):
        result = find_by_key(provider, child, key)
        if result is not None:
            return result

    return None


def visit_leaves(provider, root, filter_policy):
    """Generates the measurable leaves under `root` in document order."""
    pmts(filter_policy, FilterPolicy)

    if isinstance(filter_policy, OnlyChildrenOf):
        start = find_by_key(provider, root, filter_policy.key)
        if start is None:
            return
    else:
        start = root

    def visit(node):
        for child in provider.children(node):
            if not filter_policy.admits(provider.key(child)):
                continue

            if len(provider.children(child)) > 0:
                yield from visit(child)

            elif provider.height(child) is not None:
                yield child

    yield from visit(start)


def merged_ancestor(provider, leaf, root):
    """Walks up from `leaf` for as long as the parent has no other children; never beyond `root`."""
    node = leaf
    while node is not root:
        parent = provider.parent(node)
        if parent is None or len(provider.children(parent)) > 1:
            break
        node = parent

    return node


def record_for_leaf(provider, leaf, root, record_text):
    block = merged_ancestor(provider, leaf, root)

    size = provider.height(block)
    reveal_offset = provider.offset_to_reveal(block)
    if size is None or reveal_offset is None:
        return None

    line_height = provider.line_height(leaf)
    if line_height is None:
        return PositionalRecord(reveal_offset, size)

    text_box = provider.text_box(leaf)
    leaf_offset = provider.offset_to_reveal(leaf)
    if text_box is None or leaf_offset is None:
        return None

    text_inset, text_extent = text_box
    text_reveal_offset = leaf_offset + text_inset

    return PositionalRecord(
        reveal_offset,
        size,
        line_height=line_height,
        text_extent=text_extent,
        text_reveal_offset=text_reveal_offset,
        content=provider.text(leaf) if record_text else '',
    )


def scan(provider, root, filter_policy, record_text=False):
    """Returns the PositionalRecords for the tree under `root`, sorted by reveal_offset.

    `root` is the top of the scrolled content; no record will be merged beyond it. Leaves that cannot be measured are
    left out; an empty result means there is nothing to anchor to.
    """
    records = []
    for leaf in visit_leaves(provider, root, filter_policy):
        record = record_for_leaf(provider, leaf, root, record_text)
        if record is not None:
            records.append(record)

    # The provider's document order is not guaranteed to be the visual order.
    records.sort(key=lambda r: r.reveal_offset)

    Logger.debug("Reposition: scanned %d records (%s)" % (len(records), filter_policy))
    return records
