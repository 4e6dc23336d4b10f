"""
All offsets and sizes are scalars along the (vertical) scroll axis, growing downwards from the top of the content.
Unlike in the viewports dsn, nothing is rounded here: restoring a position must be precise to well within a pixel, and
rounding is left to whoever applies the offset.
"""


def anchor_index_for_offset(reveal_offsets, scroll_offset):
    """
    Returns the index of the last record whose top is at or above `scroll_offset`, given the (ascending) reveal offsets
    of all records.

    >>> anchor_index_for_offset([0, 100, 250], 120)
    1
    >>> anchor_index_for_offset([0, 100, 250], 100)
    1

    Before the first record, there is no anchor:
    >>> anchor_index_for_offset([20, 100, 250], 10)
    -1

    Past the top of the last record, we stick to the last record:
    >>> anchor_index_for_offset([0, 100, 250], 900)
    2
    """
    for i, reveal_offset in enumerate(reveal_offsets):
        if reveal_offset > scroll_offset:
            return i - 1

    return len(reveal_offsets) - 1


def alignment_for_offset(reveal_offset, size, scroll_offset):
    """
    How far into a record (of the given `size`, starting at `reveal_offset`) the scroll_offset is, expressed as a
    fraction of that size.

    >>> alignment_for_offset(100, 200, 150)
    0.25

    Records without any size cannot be scrolled into:
    >>> alignment_for_offset(100, 0, 100)
    0
    """
    if size == 0:
        return 0

    return (scroll_offset - reveal_offset) / size


def offset_for_alignment(reveal_offset, size, alignment):
    """The inverse of alignment_for_offset.

    >>> offset_for_alignment(100, 200, 0.25)
    150.0
    """
    return reveal_offset + size * alignment


def snap_to_line(target, line_height, text_extent, text_reveal_offset):
    """
    Moves `target` to the nearest line boundary of a text block, so that no line is cut in half at the top of the
    viewport. The text block starts at `text_reveal_offset` and is `text_extent` high; each line is `line_height` high.

    >>> snap = lambda target: snap_to_line(target, 20, 100, 100)

    Targets at or before the start of the text (e.g. on the padding around it) are left alone:
    >>> snap(100)
    100
    >>> snap(90)
    90

    Inside the first line, we go back to the start of the text:
    >>> snap(105)
    100

    Further down we go to whichever line boundary is nearest:
    >>> snap(125)
    120
    >>> snap(138)
    140

    Ties go forward:
    >>> snap(130)
    140

    ... but never past the start of the last line:
    >>> snap_to_line(138, 20, 40, 100)
    120
    """
    penetration = target - text_reveal_offset

    if penetration <= 0:
        return target

    if penetration < line_height:
        return target - penetration

    before = penetration % line_height
    after = line_height - before

    if before < after:
        return target - before

    if target + after >= text_extent + text_reveal_offset:
        return target - before

    return target + after
