"""Reordering of event blocks inside raw lineup text."""

import logging
from typing import List, Tuple

from lineupcal.core.line_parser import is_header_line

logger = logging.getLogger(__name__)


def _split_blocks(lines: List[str]) -> Tuple[List[List[str]], List[List[str]]]:
    """Partition lines into event blocks and the filler between them.

    A block is a header line plus the line after it, exactly as the parser
    pairs them. Returns (gaps, blocks) with len(gaps) == len(blocks) + 1.
    """
    gaps: List[List[str]] = [[]]
    blocks: List[List[str]] = []
    i = 0
    while i < len(lines):
        if is_header_line(lines[i]):
            blocks.append(lines[i:i + 2])
            gaps.append([])
            i += 2
        else:
            gaps[-1].append(lines[i])
            i += 1
    return gaps, blocks


def count_events(text: str) -> int:
    """Return the number of header/detail blocks in the text."""
    _, blocks = _split_blocks(text.split("\n"))
    return len(blocks)


def move_event(text: str, from_index: int, to_index: int) -> str:
    """Move an event block to another position in the text.

    Blank lines and other non-event lines stay where they are; only the
    blocks are reordered.

    Args:
        text: Raw lineup text.
        from_index: Position of the event to move.
        to_index: Position it should end up at.

    Returns:
        The rewritten text, or the original text if either index is out
        of range.
    """
    gaps, blocks = _split_blocks(text.split("\n"))
    if not (0 <= from_index < len(blocks)) or not (0 <= to_index < len(blocks)):
        return text
    if from_index == to_index:
        return text

    blocks.insert(to_index, blocks.pop(from_index))
    logger.debug("Moved event %d to position %d", from_index, to_index)

    out: List[str] = list(gaps[0])
    for block, gap in zip(blocks, gaps[1:]):
        out.extend(block)
        out.extend(gap)
    return "\n".join(out)


def move_event_up(text: str, index: int) -> str:
    return move_event(text, index, index - 1)


def move_event_down(text: str, index: int) -> str:
    return move_event(text, index, index + 1)
