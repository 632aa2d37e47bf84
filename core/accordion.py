# =============================================================================
# core/accordion.py - FAQ Accordion State Machine
# =============================================================================
# Single-open accordion over a fixed list of FAQ items.
#
# States:
#     all collapsed  --toggle(i)-->  item i open
#     item i open    --toggle(i)-->  all collapsed
#     item i open    --toggle(j)-->  item j open   (i collapses implicitly)
#
# Heights:
#     Each answer's natural height is measured once, after mount. The
#     rendered height of item i is its measured height when i is open and 0
#     otherwise, so the transition always runs between 0 and a concrete
#     per-item height.
#
# Usage:
#   accordion = Accordion(FAQ_ITEMS)
#   accordion.mount()
#   accordion.toggle(0)
#   view = accordion.render()
# =============================================================================

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from core.layout import TextHeightMeasurer
from core.models import AccordionView, FAQItem, FAQItemView

logger = logging.getLogger(__name__)

EXPANDED_ICON = "×"
COLLAPSED_ICON = "+"


class HeightMeasurer(Protocol):
    def measure(self, item: FAQItem) -> int: ...


def answer_id(index: int) -> str:
    """Id of the answer region; the control's aria-controls points here."""
    return f"faq-answer-{index}"


def control_id(index: int) -> str:
    return f"faq-question-{index}"


class Accordion:
    """
    Open/close state and measured heights for one rendered FAQ list.

    An accordion is owned by a single caller and never shared, so no
    locking is involved. An out-of-range index is a programming error and
    raises IndexError.
    """

    def __init__(
        self,
        items: Sequence[FAQItem],
        measurer: HeightMeasurer | None = None,
    ):
        self.items: tuple[FAQItem, ...] = tuple(items)
        self.open_index: int | None = None
        self.measured_heights: list[int] = []
        self._measurer = measurer or TextHeightMeasurer()
        self._measured = False

    def __len__(self) -> int:
        return len(self.items)

    @property
    def measured(self) -> bool:
        return self._measured

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def mount(self) -> "Accordion":
        """Run the post-layout measurement pass. Returns self for chaining."""
        self.measure()
        return self

    def measure(self) -> list[int]:
        """
        Measure every answer's natural height.

        Runs once; later calls return the heights captured the first time.
        Content is static, so the stored heights never go stale.
        """
        if self._measured:
            return self.measured_heights

        self.measured_heights = [self._measurer.measure(item) for item in self.items]
        self._measured = True
        logger.debug(f"Measured {len(self.measured_heights)} FAQ answers: {self.measured_heights}")
        return self.measured_heights

    def unmount(self) -> None:
        """Drop all state, as when the section leaves the page."""
        self.open_index = None
        self.measured_heights = []
        self._measured = False

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"FAQ index {index} out of range (0..{len(self.items) - 1})")

    def toggle(self, index: int) -> int | None:
        """
        Open `index`, or collapse it when it is already open.

        Opening an item collapses whichever item was open before.

        Returns:
            The new open index (None when everything is collapsed)
        """
        self._check_index(index)
        previous = self.open_index
        self.open_index = None if previous == index else index
        logger.debug(f"FAQ toggle({index}): {previous} -> {self.open_index}")
        return self.open_index

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_expanded(self, index: int) -> bool:
        self._check_index(index)
        return index == self.open_index

    def height_of(self, index: int) -> int | None:
        """
        Rendered height of the answer region for `index`.

        Collapsed items are 0. The open item gets its measured height, or
        None when it was opened before measurement ran.
        """
        if not self.is_expanded(index):
            return 0
        if index >= len(self.measured_heights):
            return None
        return self.measured_heights[index]

    def render(self) -> AccordionView:
        return AccordionView(
            open_index=self.open_index,
            measured=self._measured,
            items=[
                FAQItemView(
                    index=i,
                    question=item.question,
                    answer=item.answer,
                    expanded=self.is_expanded(i),
                    control_id=control_id(i),
                    answer_id=answer_id(i),
                    height_px=self.height_of(i),
                    toggle_icon=EXPANDED_ICON if self.is_expanded(i) else COLLAPSED_ICON,
                )
                for i, item in enumerate(self.items)
            ],
        )
