# =============================================================================
# tests/test_layout.py - Height Measurement Tests
# =============================================================================

import pytest

from core.layout import TextHeightMeasurer
from core.models import FAQItem


class TestTextHeightMeasurer:
    """Natural height from wrapped text."""

    def test_chars_per_line(self):
        assert TextHeightMeasurer().chars_per_line == 90
        assert TextHeightMeasurer(content_width_px=100, avg_char_width_px=8).chars_per_line == 12

    def test_wraps_on_words(self):
        measurer = TextHeightMeasurer(content_width_px=80, avg_char_width_px=8)

        # 10 chars per line: "aaaa bbbb" / "cccc"
        assert measurer.line_count("aaaa bbbb cccc") == 2

    def test_measure_uses_line_height_and_padding(self):
        measurer = TextHeightMeasurer(
            content_width_px=80,
            avg_char_width_px=8,
            line_height_px=26,
            vertical_padding_px=24,
        )
        item = FAQItem(question="Q?", answer="aaaa bbbb cccc")

        assert measurer.measure(item) == 2 * 26 + 24

    def test_longer_answers_are_taller(self):
        measurer = TextHeightMeasurer()
        short = FAQItem(question="Q?", answer="Yes.")
        long = FAQItem(question="Q?", answer="word " * 200)

        assert measurer.measure(long) > measurer.measure(short)

    def test_blank_text_is_one_line(self):
        assert TextHeightMeasurer().line_count("") == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"content_width_px": 0},
            {"avg_char_width_px": 0},
            {"line_height_px": -1},
            {"vertical_padding_px": -5},
        ],
    )
    def test_rejects_invalid_dimensions(self, kwargs):
        with pytest.raises(ValueError):
            TextHeightMeasurer(**kwargs)
