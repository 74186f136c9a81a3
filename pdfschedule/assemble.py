"""
Assembling raw blocks (PDF tokens -> raw event blocks).

The PDF reader hands us text fragments in content-stream order.
One timetable cell is spread over several fragments and lines and
always ends with the closing bracket of its date list, so:

- fragments on the same line are glued directly
- a change of the vertical position is a line break -> one space
- a fragment that is exactly ']' closes the block
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from pdfschedule.errors import UnterminatedBlockError
from pdfschedule.model import Point, RawBlock, Token

BLOCK_TERMINATOR = "]"


def assemble_blocks(
    tokens: Iterable[Token],
    reference_date: date,
    strict: bool = False,
) -> List[RawBlock]:
    """
    Group tokens into raw blocks, one block per ']' token.

    Tokens after the last ']' are dropped, unless strict is set:
    then a non-empty trailing block raises UnterminatedBlockError.
    """
    blocks: List[RawBlock] = []
    block = RawBlock()
    prev_y: Optional[float] = None

    for token in tokens:
        if block.data == "":
            block.position = Point(token.x, token.y)
        elif token.y != prev_y:
            block.data += " "
        block.data += token.text
        prev_y = token.y

        if token.text == BLOCK_TERMINATOR:
            block.initial_date = reference_date
            blocks.append(block)
            block = RawBlock()

    if strict and block.data:
        raise UnterminatedBlockError(block.data)

    return blocks
