"""Unit tests for ReportComposer"""

import re

import pytest

from clireport.domain.constants import DEFAULT_RULE_CHAR
from clireport.domain.exceptions import ConfigurationError

TIMESTAMP = r"\d{4}-\d{2}-\d{2} - (\d| )\d:\d{2}:\d{2}[AP]M"

CONTROLS = {
    "clear": "\x1b[0m",
    "bold": "\x1b[1m",
    "red": "\x1b[31m",
}


class TestHeader:
    """Test suite for header"""

    def test_does_not_accept_an_invalid_option(self, composer, sink):
        with pytest.raises(ConfigurationError, match="asdf"):
            composer.header(asdf="tests")
        assert sink.writes == []

    def test_title_larger_than_width_fails_before_writing(self, composer, sink):
        with pytest.raises(ConfigurationError, match="too large for width"):
            composer.header(title="xxxxxxxxxxx", width=5)
        assert sink.writes == []

    @pytest.mark.parametrize("options", [
        {"width": "100"},
        {"align": "asdf"},
        {"spacing": -1},
        {"color": "mauve"},
        {"bold": "yes"},
        {"timestamp": "yes"},
        {"rule": "=="},
    ])
    def test_invalid_values_fail_without_output(self, composer, sink, options):
        with pytest.raises(ConfigurationError):
            composer.header(**options)
        assert sink.writes == []

    def test_title_then_one_separator(self, composer, sink):
        """Header writes content first, then spacing"""
        # Act
        composer.header(title="title")

        # Assert
        assert sink.lines == ["title", "\n"]

    def test_default_title(self, composer, sink):
        composer.header()
        assert sink.lines == ["Report", "\n"]

    def test_title_none_writes_no_title(self, composer, sink):
        composer.header(title=None, rule="=", width=3)
        assert sink.lines == ["===", "\n"]

    @pytest.mark.parametrize("options,expected", [
        ({"align": "left"}, "test11test"),
        ({"align": "right"}, " " * 90 + "test11test"),
        ({"align": "right", "width": 50}, " " * 40 + "test11test"),
        ({"align": "center"}, " " * 45 + "test11test" + " " * 45),
        ({"align": "center", "width": 80}, " " * 35 + "test11test" + " " * 35),
    ])
    def test_alignment(self, composer, sink, options, expected):
        composer.header(title="test11test", **options)
        assert sink.lines == [expected, "\n"]

    def test_defined_spacing(self, composer, sink):
        composer.header(title="title", spacing=3)
        assert sink.lines == ["title", "\n\n\n"]

    def test_zero_spacing_suppresses_separator(self, composer, sink):
        composer.header(title="title", spacing=0)
        assert sink.lines == ["title"]

    def test_timestamp_subheading(self, composer, sink):
        composer.header(title="title", timestamp=True)

        assert sink.lines[0] == "title"
        assert re.fullmatch(TIMESTAMP, sink.lines[1])
        assert sink.lines[2] == "\n"

    def test_timestamp_follows_alignment(self, composer, sink):
        composer.header(title="title", align="right", timestamp=True, width=80)

        assert re.fullmatch(r" *title", sink.lines[0])
        assert re.fullmatch(rf" *{TIMESTAMP}", sink.lines[1])
        assert len(sink.lines[1]) == 80

    def test_rule_uses_default_character(self, composer, sink):
        composer.header(rule=True)
        assert sink.lines == ["Report", DEFAULT_RULE_CHAR * 100, "\n"]

    def test_rule_uses_given_character(self, composer, sink):
        composer.header(rule="=")
        assert sink.lines[1] == "=" * 100

    def test_single_red_line(self, composer, sink):
        composer.header(color="red")
        assert sink.lines[0] == CONTROLS["red"] + "Report" + CONTROLS["clear"]

    def test_multiple_red_lines(self, composer, sink):
        composer.header(color="red", rule=True)

        assert sink.lines[0] == CONTROLS["red"] + "Report" + CONTROLS["clear"]
        assert sink.lines[1] == CONTROLS["red"] + DEFAULT_RULE_CHAR * 100 + CONTROLS["clear"]
        assert sink.lines[2] == "\n"

    def test_bold_lines(self, composer, sink):
        composer.header(bold=True, rule=True)

        assert sink.lines[0] == CONTROLS["bold"] + "Report" + CONTROLS["clear"]
        assert sink.lines[1] == CONTROLS["bold"] + DEFAULT_RULE_CHAR * 100 + CONTROLS["clear"]


class TestFooter:
    """Test suite for footer"""

    def test_separator_comes_before_title(self, composer, sink):
        """Footer writes spacing first, unlike header"""
        # Act
        composer.footer(title="title")

        # Assert
        assert sink.lines == ["\n", "title"]

    def test_defined_spacing(self, composer, sink):
        composer.footer(title="title", spacing=3)
        assert sink.lines == ["\n\n\n", "title"]

    def test_title_larger_than_width_fails_before_writing(self, composer, sink):
        with pytest.raises(ConfigurationError):
            composer.footer(title="testtesttest", width=6)
        assert sink.writes == []

    def test_invalid_width(self, composer):
        with pytest.raises(ConfigurationError, match="width"):
            composer.footer(width="asdf")

    def test_invalid_option(self, composer, sink):
        with pytest.raises(ConfigurationError, match="bogus"):
            composer.footer(bogus=1)
        assert sink.writes == []

    @pytest.mark.parametrize("options,expected", [
        ({}, "test12test"),
        ({"align": "right"}, " " * 90 + "test12test"),
        ({"align": "right", "width": 50}, " " * 40 + "test12test"),
        ({"align": "center", "width": 80}, " " * 35 + "test12test" + " " * 35),
    ])
    def test_alignment(self, composer, sink, options, expected):
        composer.footer(title="test12test", **options)
        assert sink.lines == ["\n", expected]

    def test_timestamp_after_title(self, composer, sink):
        composer.footer(title="title", timestamp=True)

        assert sink.lines[:2] == ["\n", "title"]
        assert re.fullmatch(TIMESTAMP, sink.lines[2])

    def test_rule(self, composer, sink):
        composer.footer(rule="=")
        assert sink.lines == ["\n", "Report", "=" * 100]

    def test_red_timestamp(self, composer, sink):
        composer.footer(title="title", timestamp=True, color="red")

        assert sink.lines[1] == CONTROLS["red"] + "title" + CONTROLS["clear"]
        assert re.fullmatch(rf"\x1b\[31m{TIMESTAMP}\x1b\[0m", sink.lines[2])


class TestHorizontalRule:
    """Test suite for horizontal_rule"""

    def test_default_rule(self, composer, sink):
        """A 100-character line of the default character"""
        composer.horizontal_rule()
        assert sink.lines == [DEFAULT_RULE_CHAR * 100]

    def test_asterisk(self, composer, sink):
        composer.horizontal_rule(char="*")
        assert sink.lines == ["*" * 100]

    def test_width(self, composer, sink):
        composer.horizontal_rule(char="=", width=50)
        assert sink.lines == ["=" * 50]

    def test_color_and_bold(self, composer, sink):
        composer.horizontal_rule(color="red")
        composer.horizontal_rule(bold=True)

        assert sink.lines == [
            CONTROLS["red"] + DEFAULT_RULE_CHAR * 100 + CONTROLS["clear"],
            CONTROLS["bold"] + DEFAULT_RULE_CHAR * 100 + CONTROLS["clear"],
        ]

    def test_invalid_options(self, composer, sink):
        with pytest.raises(ConfigurationError, match="asdf"):
            composer.horizontal_rule(asdf=True)
        assert sink.writes == []

    def test_invalid_char(self, composer):
        with pytest.raises(ConfigurationError, match="single printable character"):
            composer.horizontal_rule(char="ab")

    def test_space_is_a_printable_char(self, composer, sink):
        composer.horizontal_rule(char=" ", width=3)
        assert sink.lines == ["   "]


class TestVerticalSpacing:
    """Test suite for vertical_spacing"""

    def test_requires_integer(self, composer):
        with pytest.raises(ConfigurationError):
            composer.vertical_spacing("asdf")

    def test_rejects_negative(self, composer):
        with pytest.raises(ConfigurationError):
            composer.vertical_spacing(-1)

    def test_writes_newlines(self, composer, sink):
        """Zero lines is an empty probe write; n lines is one write of n newlines"""
        composer.vertical_spacing(0)
        composer.vertical_spacing(3)

        assert sink.writes == [("raw", ""), ("line", "\n\n\n")]

    def test_defaults_to_one_line(self, composer, sink):
        composer.vertical_spacing()
        assert sink.lines == ["\n"]


class TestDatetime:
    """Test suite for datetime"""

    def test_default_format_left_aligned(self, composer, sink):
        composer.datetime()
        assert sink.lines == ["2024-03-05 - 02:07:09PM"]

    def test_right_aligned(self, composer, sink):
        composer.datetime(align="right")

        assert re.fullmatch(rf" *{TIMESTAMP}", sink.lines[0])
        assert len(sink.lines[0]) == 100

    def test_center_aligned(self, composer, sink):
        composer.datetime(align="center", width=70)
        assert re.fullmatch(rf" *{TIMESTAMP} *", sink.lines[0])

    def test_modified_format(self, composer, sink):
        composer.datetime(format="%y/%m/%d")
        assert sink.lines == ["24/03/05"]

    def test_timestamp_larger_than_width_fails(self, composer, sink):
        with pytest.raises(ConfigurationError, match="too large for width"):
            composer.datetime(width=8)
        assert sink.writes == []

    @pytest.mark.parametrize("options", [
        {"asdf": True},
        {"align": "right", "width": "asdf"},
        {"align": 1234},
    ])
    def test_invalid_options(self, composer, options):
        with pytest.raises(ConfigurationError):
            composer.datetime(**options)

    def test_color_and_bold(self, composer, sink):
        composer.datetime(color="red")
        composer.datetime(bold=True)

        assert re.fullmatch(rf"\x1b\[31m{TIMESTAMP}\x1b\[0m", sink.lines[0])
        assert re.fullmatch(rf"\x1b\[1m{TIMESTAMP}\x1b\[0m", sink.lines[1])


class TestAligned:
    """Test suite for aligned"""

    def test_accepts_align_and_width(self, composer, sink):
        composer.aligned("test", align="right", width=40)
        assert sink.lines == [" " * 36 + "test"]

    def test_invalid_align(self, composer):
        with pytest.raises(ConfigurationError):
            composer.aligned("test", align=1234)

    def test_invalid_width(self, composer):
        with pytest.raises(ConfigurationError):
            composer.aligned("test", align="right", width="asdf")

    def test_color_and_bold(self, composer, sink):
        composer.aligned("x" * 10, color="red")
        composer.aligned("x" * 10, bold=True)

        assert sink.lines == [
            CONTROLS["red"] + "x" * 10 + CONTROLS["clear"],
            CONTROLS["bold"] + "x" * 10 + CONTROLS["clear"],
        ]

    def test_rejects_fill_option(self, composer, sink):
        """Only align, width, color and bold are accepted"""
        with pytest.raises(ConfigurationError, match="fill"):
            composer.aligned("x", fill=True, width=5)
        assert sink.writes == []
