from utils import pmts


class PositionalRecord(object):

    def __init__(self, reveal_offset, size, line_height=0, text_extent=0, text_reveal_offset=0, content=''):
        """A single visually distinct block in the scanned tree.

        `reveal_offset` and `size` describe the block as a whole (i.e. the leaf merged with its wrapping ancestors); the
        text-related attributes describe the text leaf itself, and are only meaningful if `is_text`.

        `content` is only filled in when the scan was explicitly asked to record text.
        """
        self.reveal_offset = reveal_offset
        self.size = size
        self.line_height = line_height
        self.text_extent = text_extent
        self.text_reveal_offset = text_reveal_offset
        self.content = content

    @property
    def is_text(self):
        return self.line_height > 0

    def __repr__(self):
        if self.is_text:
            return "PositionalRecord(%s, %s, text: %s, %s, %s)" % (
                self.reveal_offset, self.size, self.line_height, self.text_extent, self.text_reveal_offset)

        return "PositionalRecord(%s, %s)" % (self.reveal_offset, self.size)


NO_INDEX = -1


class TrackedPosition(object):

    def __init__(self, index=NO_INDEX, alignment=0):
        pmts(index, int)

        self.index = index
        self.alignment = alignment

    @property
    def is_anchored(self):
        return self.index >= 0

    def __eq__(self, other):
        return (isinstance(other, TrackedPosition) and
                self.index == other.index and self.alignment == other.alignment)

    def __repr__(self):
        return "TrackedPosition(%s, %s)" % (self.index, self.alignment)


class FilterPolicy(object):
    pass


class IgnoredKeys(FilterPolicy):
    """Skip any node (and everything below it) with one of the given keys. Note that None is a valid entry, which means
    that all unkeyed nodes are skipped, i.e. only keyed nodes are scanned."""

    def __init__(self, keys):
        self.keys = list(keys)

    def admits(self, key):
        return key not in self.keys

    def __repr__(self):
        return "IgnoredKeys(%s)" % self.keys


class OnlyChildrenOf(FilterPolicy):
    """Scan only below the node with the given key."""

    def __init__(self, key):
        self.key = key

    def admits(self, key):
        return True

    def __repr__(self):
        return "OnlyChildrenOf(%s)" % self.key


def filter_policy_for(ignored_keys, only_children_of):
    """The two ways of filtering are mutually exclusive; `only_children_of` wins if both are given."""
    if only_children_of is not None:
        return OnlyChildrenOf(only_children_of)
    return IgnoredKeys(ignored_keys)
