from utils import count_matches, pmts

from dsn.positions.clef import AnchorToTextInstance, CapturePosition
from dsn.positions.structure import NO_INDEX, TrackedPosition
from dsn.positions.utils import (
    alignment_for_offset,
    anchor_index_for_offset,
    offset_for_alignment,
    snap_to_line,
)


def play_position_note(note, structure):
    pmts(structure, TrackedPosition)

    if isinstance(note, CapturePosition):
        if len(note.records) == 0:
            # Nothing to anchor to; whatever we knew before is the best we have.
            return structure

        index = anchor_index_for_offset([r.reveal_offset for r in note.records], note.scroll_offset)
        if index == NO_INDEX:
            return TrackedPosition(NO_INDEX, 0)

        record = note.records[index]
        return TrackedPosition(index, alignment_for_offset(record.reveal_offset, record.size, note.scroll_offset))

    if isinstance(note, AnchorToTextInstance):
        found = 0
        for index, record in enumerate(note.records):
            found += count_matches(note.pattern, record.content)
            if found >= note.occurrence:
                return TrackedPosition(index, 0)

        # Not (often enough) found: we stay where we are.
        return structure

    raise Exception("Unknown Note")


def target_offset_for_position(structure, records):
    """The scroll offset that puts us back at `structure`, given the (freshly scanned) records.

    Returns None if the structure has no anchor (i.e. there is nothing to go back to); 0 if there are no records at
    all (the anchor we had is no longer meaningful, so we go back to the top).
    """
    pmts(structure, TrackedPosition)

    if not structure.is_anchored:
        return None

    if len(records) == 0:
        return 0

    # The tree may have shrunk since we took our position; in that case the last record is the best approximation.
    index = min(structure.index, len(records) - 1)
    record = records[index]

    target = offset_for_alignment(record.reveal_offset, record.size, structure.alignment)

    if record.is_text:
        target = snap_to_line(target, record.line_height, record.text_extent, record.text_reveal_offset)

    return target
