"""
View Slots and the Circular View Pool.

A slideshow session presents a fixed number of "views", each bound to one
photo candidate. Whether a view can actually be shown is unknown until a
render is attempted, after which the answer is final for the session.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence

from .exceptions.screensaver_errors import EmptyPoolError

logger = logging.getLogger(__name__)


class Displayable(enum.Enum):
    """Resolution state of a slot's photo."""
    UNKNOWN = "unknown"
    YES = "yes"
    NO = "no"


@dataclass
class ViewSlot:
    """One position in the circular presentation sequence."""
    index: int
    photo_ref: Any
    displayable: Displayable = Displayable.UNKNOWN

    @property
    def resolved(self) -> bool:
        return self.displayable is not Displayable.UNKNOWN


class ViewPool:
    """
    Fixed-size circular sequence of view slots.

    The pool owns the probe used to resolve an UNKNOWN slot. A probe is any
    callable taking the slot's ``photo_ref`` and returning True when the photo
    renders. Each slot is probed at most once per session.
    """

    def __init__(self, photo_refs: Sequence[Any], probe: Callable[[Any], bool]):
        if not photo_refs:
            raise EmptyPoolError("Cannot build a view pool without photos.")
        self._slots: tuple[ViewSlot, ...] = tuple(
            ViewSlot(index=i, photo_ref=ref) for i, ref in enumerate(photo_refs)
        )
        self._probe = probe
        logger.info(f"Built view pool with {len(self._slots)} slots.")

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> ViewSlot:
        self._check_index(index)
        return self._slots[index]

    def __iter__(self) -> Iterator[ViewSlot]:
        return iter(self._slots)

    def next_index(self, index: int) -> int:
        """Index following ``index``, wrapping from the last slot to 0."""
        self._check_index(index)
        return (index + 1) % len(self._slots)

    def prev_index(self, index: int) -> int:
        """Index preceding ``index``, wrapping from 0 to the last slot."""
        self._check_index(index)
        return (index - 1) % len(self._slots)

    def resolve(self, index: int) -> bool:
        """
        Return whether the slot at ``index`` is displayable.

        An UNKNOWN slot is probed and its state fixed; resolved slots are
        answered from their recorded state without probing again.

        Args:
            index: A valid slot index.

        Returns:
            True if the slot's photo is displayable.
        """
        slot = self[index]
        if slot.displayable is Displayable.UNKNOWN:
            try:
                ok = bool(self._probe(slot.photo_ref))
            except Exception as e:
                logger.error(f"Probe of slot {index} raised an error: {e}", exc_info=True)
                ok = False
            slot.displayable = Displayable.YES if ok else Displayable.NO
            if ok:
                logger.debug(f"Slot {index} resolved as displayable.")
            else:
                logger.warning(f"Slot {index} cannot be displayed and will be skipped: {slot.photo_ref}")
        return slot.displayable is Displayable.YES

    def is_exhausted(self) -> bool:
        """True when every slot has been resolved as not displayable."""
        return all(slot.displayable is Displayable.NO for slot in self._slots)

    def counts(self) -> dict[Displayable, int]:
        summary = {state: 0 for state in Displayable}
        for slot in self._slots:
            summary[slot.displayable] += 1
        return summary

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"Slot index {index} out of range for pool of {len(self._slots)}.")
