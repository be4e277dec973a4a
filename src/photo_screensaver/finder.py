"""
Search for the next displayable photo.

The finder walks the view pool forward from a candidate slot, wrapping around
at the end, and returns the first slot whose photo can be shown. Failed
probes along the way are recorded on the pool so those slots are skipped for
the rest of the session.
"""

from __future__ import annotations

import logging

from .views import ViewPool

logger = logging.getLogger(__name__)

# Returned when no slot in the whole circuit qualifies.
NOT_FOUND = -1


class PhotoFinder:
    """Bounded circular search over a :class:`ViewPool`."""

    def __init__(self, pool: ViewPool):
        self.pool = pool

    def find_next(self, candidate_idx: int, last_selected_idx: int, previous_idx: int,
                  current_idx: int = -1) -> int:
        """
        Find the next displayable slot, starting at ``candidate_idx``.

        The last selected, the previous and the current slot are held back
        so the show does not flip straight back to a photo that was just on
        screen. They are only returned, in scan order, when nothing else
        qualifies, and they are not probed unless that fallback is needed.

        Args:
            candidate_idx: First slot to consider.
            last_selected_idx: Slot shown before the current one, or -1.
            previous_idx: Slot preceding the current one, or -1.
            current_idx: Slot on screen now, or -1 before the first photo.

        Returns:
            The chosen slot index, or ``NOT_FOUND`` if every slot failed.

        Raises:
            ValueError: If ``candidate_idx`` is not a valid slot index.
        """
        size = len(self.pool)
        if not 0 <= candidate_idx < size:
            raise ValueError(f"Candidate index {candidate_idx} out of range for pool of {size}.")

        excluded = {last_selected_idx, previous_idx, current_idx}
        held_back: list[int] = []
        idx = candidate_idx
        probes = 0
        while probes < size:
            probes += 1
            if idx in excluded:
                held_back.append(idx)
            elif self.pool.resolve(idx):
                return idx
            idx = (idx + 1) % size

        for idx in held_back:
            if self.pool.resolve(idx):
                logger.debug(f"Only recently shown slot {idx} is available, reusing it.")
                return idx

        logger.debug(f"No displayable slot found after {probes} probes from {candidate_idx}.")
        return NOT_FOUND
