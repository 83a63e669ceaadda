"""
CLI Argument Parser

This module handles command-line argument parsing for clireport.
"""

import argparse

from clireport.domain.formatters.report_elements import Alignment, Color


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for clireport CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="clireport",
        description="clireport - render styled text reports in the terminal"
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML settings file (default: $CLIREPORT_CONFIG)"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI styling (also disabled when NO_COLOR is set)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    parser_render = subparsers.add_parser(
        "render",
        help="Render a YAML report document"
    )
    parser_render.add_argument(
        "document",
        help="Path to the report document"
    )

    parser_rule = subparsers.add_parser(
        "rule",
        help="Print a horizontal rule"
    )
    parser_rule.add_argument(
        "--char",
        help="Rule character (default: from settings)"
    )
    parser_rule.add_argument(
        "--width",
        type=int,
        help="Rule width (default: from settings)"
    )
    _add_style_arguments(parser_rule)

    parser_datetime = subparsers.add_parser(
        "datetime",
        help="Print the current date and time"
    )
    parser_datetime.add_argument(
        "--format",
        help="strftime pattern (default: from settings)"
    )
    parser_datetime.add_argument(
        "--align",
        choices=[member.value for member in Alignment],
        default=Alignment.LEFT.value,
        help="Alignment inside the width (default: left)"
    )
    parser_datetime.add_argument(
        "--width",
        type=int,
        help="Line width (default: from settings)"
    )
    _add_style_arguments(parser_datetime)

    return parser


def _add_style_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--color",
        choices=[name.lower() for name in Color.__members__],
        help="Foreground color"
    )
    parser.add_argument(
        "--bold",
        action="store_true",
        help="Render bold"
    )
