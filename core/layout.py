# =============================================================================
# core/layout.py - Answer Height Measurement
# =============================================================================
# The accordion animates between 0 and each answer's natural height, which
# differs per item. There is no layout engine on the server, so the natural
# height is derived from the text: wrap the answer to the characters that fit
# the content width, then multiply by the line height and add padding.
# =============================================================================

from __future__ import annotations

import math
import textwrap
from dataclasses import dataclass

from core.models import FAQItem


@dataclass(frozen=True)
class TextHeightMeasurer:
    """
    Estimate the natural pixel height of an answer block.

    Defaults match the FAQ answer styling: a 720px wide column of 16px text
    with 26px line height and 24px bottom padding.
    """
    content_width_px: int = 720
    avg_char_width_px: float = 8.0
    line_height_px: int = 26
    vertical_padding_px: int = 24

    def __post_init__(self):
        if self.content_width_px <= 0 or self.avg_char_width_px <= 0:
            raise ValueError("content width and glyph width must be positive")
        if self.line_height_px < 0 or self.vertical_padding_px < 0:
            raise ValueError("line height and padding must not be negative")

    @property
    def chars_per_line(self) -> int:
        return max(1, math.floor(self.content_width_px / self.avg_char_width_px))

    def line_count(self, text: str) -> int:
        """Number of wrapped lines; blank text still occupies one line."""
        return max(1, len(textwrap.wrap(text, width=self.chars_per_line)))

    def measure(self, item: FAQItem) -> int:
        return self.line_count(item.answer) * self.line_height_px + self.vertical_padding_px
