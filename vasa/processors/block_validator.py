# File: vasa/processors/block_validator.py
"""
Planner block validation.
Decides whether a time block fits into a day and produces the updated block set.
"""

import dataclasses
from typing import Iterable, List, Optional

from vasa.models import (
    Accepted, BlockDecision, MINUTES_PER_DAY, Rejected, RejectionReason, TimeBlock, new_id
)

INVALID_DURATION_MESSAGE = "End time must be after start time."
OVERLAP_MESSAGE = "This time overlaps with an existing block."


def validate(existing: Iterable[TimeBlock], candidate: TimeBlock,
             exclude_id: Optional[str] = None) -> BlockDecision:
    """
    Check a candidate block against a day's existing blocks.
    
    Args:
        existing: Blocks already scheduled on the day
        candidate: The new or edited block
        exclude_id: Id of the block being edited, ignored in the overlap check
    
    Returns:
        Accepted with the updated block list, or Rejected with a reason.
        The inputs are never mutated.
    """
    blocks: List[TimeBlock] = list(existing)

    if candidate.end <= candidate.start or candidate.start >= MINUTES_PER_DAY:
        return Rejected(RejectionReason.INVALID_DURATION, INVALID_DURATION_MESSAGE)

    for other in blocks:
        if exclude_id is not None and other.id == exclude_id:
            continue
        if candidate.overlaps_with(other):
            return Rejected(RejectionReason.OVERLAP, OVERLAP_MESSAGE, conflicting_id=other.id)

    if exclude_id is not None and any(b.id == exclude_id for b in blocks):
        # Edit: replace in place, identity preserved
        accepted = dataclasses.replace(candidate, id=exclude_id)
        updated = [accepted if b.id == exclude_id else b for b in blocks]
    else:
        taken = {b.id for b in blocks}
        if candidate.id and candidate.id not in taken:
            accepted = candidate
        else:
            accepted = dataclasses.replace(candidate, id=new_id())
        updated = blocks + [accepted]

    return Accepted(block=accepted, blocks=updated)
