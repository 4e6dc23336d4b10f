"""
The dsn 'positions' implements the bookkeeping for keeping a scrolled viewport at the same place in its content when that
content is laid out anew (e.g. a phone is rotated, and all paragraphs reflow into different heights).

A raw scroll offset is useless across such a change: 800 pixels into the portrait layout is somewhere else entirely in
the landscape layout. Instead we remember a position in terms of the content itself: the index of the record (a visually
distinct block, as produced by the scanner) that sits at the top of the viewport, and the alignment: how far into that
record the viewport's top is, as a fraction of the record's size. After the relayout we scan again, look up the record
at the same index, and apply the same fraction to its new size.

For text we do one more thing: the restored position is snapped to a line boundary, because a line that is cut in half
at the top of the viewport is the most visible sign of an imprecise restoration.

The pieces:

* structure: PositionalRecord (one per scanned block) and TrackedPosition (index & alignment), plus the filter policies
  that determine what part of the tree is scanned.
* clef: the notes that change the TrackedPosition.
* construct: playing those notes; and the inverse, from a TrackedPosition to a target offset.
* utils: the underlying arithmetic.
"""
