"""Unit tests for pdfrtl.layout.render."""

from conftest import ARABIC_HELLO
from pdfrtl.config import ResolvedMargins
from pdfrtl.layout.lines import LayoutMetrics
from pdfrtl.layout.render import measure_line, render_line, visual_order
from pdfrtl.layout.words import Word

METRICS = LayoutMetrics(
    line_height=10.0,
    page_width=200.0,
    page_height=100.0,
    max_width=160.0,
    space_width=1.0,
    margins=ResolvedMargins(left=20.0, right=20.0, top=20.0, bottom=20.0),
)


class TestRenderLine:
    """Tests for drawing one line word by word."""

    def test_ltr_line_drawn_from_left_margin(self, renderer):
        line = [Word("Hello"), Word("world")]

        start_x = render_line(renderer, line, 30.0, False, None, METRICS)

        assert start_x == 20.0
        assert [(d.text, d.x, d.y) for d in renderer.draws] == [("Hello", 20.0, 30.0), ("world", 26.0, 30.0)]

    def test_rtl_line_mirrored_and_right_aligned(self, renderer):
        line = [Word("one"), Word("two")]

        render_line(renderer, line, 30.0, True, None, METRICS)

        # width 3 + 1 + 3 = 7, right edge at 180
        assert [(d.text, d.x) for d in renderer.draws] == [("two", 173.0), ("one", 177.0)]

    def test_line_object_not_mutated(self, renderer):
        line = [Word("one"), Word("two")]
        render_line(renderer, line, 30.0, True, None, METRICS)
        assert [w.text for w in line] == ["one", "two"]

    def test_direction_hint_follows_each_word(self, renderer):
        line = [Word("Hi"), Word(ARABIC_HELLO, is_rtl=True)]

        render_line(renderer, line, 30.0, False, "left", METRICS)

        assert [d.is_rtl for d in renderer.draws] == [False, True]

    def test_bold_words_switch_weight_when_font_given(self, renderer):
        line = [Word("ab"), Word("cd", is_bold=True), Word("ef")]

        render_line(renderer, line, 30.0, False, "left", METRICS, font="Fake")

        assert [(d.text, d.weight, d.x) for d in renderer.draws] == [
            ("ab", "normal", 20.0),
            ("cd", "bold", 23.0),
            ("ef", "normal", 27.0),  # bold "cd" is 3.0 wide
        ]

    def test_no_font_keeps_current_weight(self, renderer):
        render_line(renderer, [Word("cd", is_bold=True)], 30.0, False, "left", METRICS)

        assert renderer.font_calls == []
        assert renderer.draws[0].weight == "normal"

    def test_center_alignment_uses_bold_aware_width(self, renderer):
        line = [Word("abcd", is_bold=True)]

        start_x = render_line(renderer, line, 30.0, False, "center", METRICS, font="Fake")

        # width 6.0: 20 + (200 - 40 - 6) / 2
        assert start_x == 97.0

    def test_show_logs_reports_line(self, renderer, caplog):
        with caplog.at_level("INFO", logger="pdfrtl.layout.render"):
            render_line(renderer, [Word("Hello")], 30.0, False, None, METRICS, show_logs=True)

        assert "Hello" in caplog.text


class TestMeasureLine:
    """Tests for line width measurement."""

    def test_width_includes_one_space_per_gap(self, renderer):
        assert measure_line(renderer, [Word("ab"), Word("cde"), Word("f")], 1.0, None) == 8.0

    def test_empty_line(self, renderer):
        assert measure_line(renderer, [], 1.0, None) == 0.0

    def test_visual_order(self):
        line = [Word("a"), Word("b"), Word("c")]
        assert [w.text for w in visual_order(line, True)] == ["c", "b", "a"]
        assert visual_order(line, False) == line
