from utils import pmts


class PositionNote(object):
    def __init__(self, records):
        # records :: list of PositionalRecord, as returned by the scanner (i.e. sorted by reveal_offset)
        pmts(records, list)
        self.records = records

    def __repr__(self):
        return self.__class__.__name__


class CapturePosition(PositionNote):
    """The viewport has come to rest at `scroll_offset`; remember where that is in terms of the records."""

    def __init__(self, scroll_offset, records):
        super(CapturePosition, self).__init__(records)
        self.scroll_offset = scroll_offset

    def __repr__(self):
        return "CapturePosition(%s)" % self.scroll_offset


class AnchorToTextInstance(PositionNote):
    """Anchor to the record that contains the `occurrence`-th (1-based, counting over all records) case-insensitive
    match of the regular expression `pattern`. The records must have been scanned with their text recorded."""

    def __init__(self, pattern, occurrence, records):
        super(AnchorToTextInstance, self).__init__(records)
        self.pattern = pattern
        self.occurrence = occurrence

    def __repr__(self):
        return "AnchorToTextInstance(%r, %s)" % (self.pattern, self.occurrence)
