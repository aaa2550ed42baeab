# logic/reorder.py
"""
Drag-and-drop reordering of summary cards.
The card only becomes draggable while its handle is held, so text on the card stays selectable.
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class ReorderError(ValueError):
    """Invalid drag transition or unknown summary id."""


class DragState(str, Enum):
    IDLE = "idle"
    ARMED = "armed"
    DRAGGING = "dragging"
    DROPPED = "dropped"
    CANCELLED = "cancelled"


class DragController:
    """State machine for one card: idle -> armed -> dragging -> dropped/cancelled."""

    def __init__(self, summary_id: str):
        self.summary_id = summary_id
        self.state = DragState.IDLE
        self.target_id: Optional[str] = None

    @property
    def draggable(self) -> bool:
        return self.state in (DragState.ARMED, DragState.DRAGGING)

    def grab(self) -> None:
        """Drag handle pressed."""
        self.state = DragState.ARMED
        self.target_id = None

    def start(self) -> str:
        """Drag started; returns the id of the summary being moved."""
        if self.state is not DragState.ARMED:
            raise ReorderError(f"Cannot start dragging from state '{self.state.value}'")
        self.state = DragState.DRAGGING
        return self.summary_id

    def drop(self, target_id: str) -> None:
        """Dropped onto another card."""
        if self.state is not DragState.DRAGGING:
            raise ReorderError(f"Cannot drop from state '{self.state.value}'")
        self.state = DragState.DROPPED
        self.target_id = target_id

    def end(self, drop_effect: str = "move") -> DragState:
        """Drag finished; a 'none' drop effect means the user cancelled."""
        if self.state is DragState.DRAGGING or drop_effect == "none":
            self.state = DragState.CANCELLED
            self.target_id = None
        elif self.state is not DragState.DROPPED:
            self.state = DragState.IDLE
        return self.state

    def reset(self) -> None:
        self.state = DragState.IDLE
        self.target_id = None


def reorder_summaries(summaries: Sequence, source_id: str, target_id: str) -> List:
    """
    Move the source summary to the position of the target summary.

    Args:
        summaries: Ordered summary models (anything with an `id`)
        source_id: Id of the dragged summary
        target_id: Id of the summary it was dropped on

    Returns:
        New ordered list; the input is not modified
    """
    ids = [s.id for s in summaries]
    if source_id not in ids:
        raise ReorderError(f"Unknown summary id: {source_id}")
    if target_id not in ids:
        raise ReorderError(f"Unknown summary id: {target_id}")

    items = list(summaries)
    if source_id == target_id:
        return items
    source_idx = ids.index(source_id)
    target_idx = ids.index(target_id)
    moved = items.pop(source_idx)
    items.insert(target_idx, moved)
    logger.debug("Moved summary %s from %d to %d", source_id, source_idx, target_idx)
    return items


def move_summary(summaries: Sequence, summary_id: str, offset: int) -> List:
    """Shift a summary up (negative offset) or down, clamped to the list bounds."""
    ids = [s.id for s in summaries]
    if summary_id not in ids:
        raise ReorderError(f"Unknown summary id: {summary_id}")
    idx = ids.index(summary_id)
    new_idx = max(0, min(len(ids) - 1, idx + offset))
    return reorder_summaries(summaries, summary_id, ids[new_idx])
