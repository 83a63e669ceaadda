"""Single-line layout: alignment, padding and width validation."""

from typing import Optional

from clireport.domain.constants import DEFAULT_WIDTH
from clireport.domain.exceptions import ConfigurationError
from clireport.domain.formatters.options import LineOptions, parse_options, validate_text
from clireport.domain.formatters.report_elements import Alignment, LineSpec
from clireport.domain.formatters.style import StyleWrapper


def pad_to_width(text: str, width: int, align: Alignment = Alignment.LEFT, fill: bool = False) -> str:
    """Pad a string to a target width.

    Left-aligned text gets no trailing padding unless fill is set. Centered
    text puts the extra space of an odd padding on the right.

    Args:
        text: String to pad, at most width characters long
        width: Desired width
        align: Alignment direction
        fill: Pad left-aligned text on the right up to width

    Returns:
        Padded string
    """
    padding_needed = width - len(text)
    if padding_needed < 0:
        raise ConfigurationError(f"Text of length {len(text)} does not fit width {width}")

    if align is Alignment.RIGHT:
        return " " * padding_needed + text
    if align is Alignment.CENTER:
        left_pad = padding_needed // 2
        right_pad = padding_needed - left_pad
        return " " * left_pad + text + " " * right_pad
    if fill:
        return text + " " * padding_needed
    return text


class LayoutEngine:
    """Render aligned, padded and styled single lines."""

    def __init__(self, style: Optional[StyleWrapper] = None, default_width: int = DEFAULT_WIDTH):
        self.style = style or StyleWrapper()
        self.default_width = default_width

    def build_spec(self, text: str, **options) -> LineSpec:
        """Validate text and options into a LineSpec.

        Args:
            text: Line content
            **options: width, align, color, bold

        Returns:
            LineSpec whose text fits its width

        Raises:
            ConfigurationError: On unknown options, invalid values or text
                longer than the width
        """
        opts = parse_options(LineOptions, options, "line")
        text = validate_text(text, "text")
        width = opts.width if opts.width is not None else self.default_width
        if len(text) > width:
            raise ConfigurationError(
                f"Content too large for width: {len(text)} characters exceed width {width}"
            )
        return LineSpec(text=text, width=width, align=opts.align, color=opts.color, bold=opts.bold)

    def render(self, spec: LineSpec, fill: bool = False) -> str:
        """Render a validated LineSpec into exactly one line."""
        line = pad_to_width(spec.text, spec.width, spec.align, fill=fill)
        return self.style.wrap(line, color=spec.color, bold=spec.bold)

    def render_line(self, text: str, **options) -> str:
        """Validate and render one line of text.

        Args:
            text: Line content
            **options: width, align, color, bold

        Returns:
            The formatted line
        """
        return self.render(self.build_spec(text, **options))
