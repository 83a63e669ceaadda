#!/usr/bin/env python3
"""
clireport - terminal report rendering

Entry point for the clireport command line tool.
Run with: python3 -m clireport <command>
"""

import logging
import os
import sys

from clireport.cli.commands.render import cmd_render
from clireport.cli.commands.rule import cmd_rule
from clireport.cli.commands.show_datetime import cmd_datetime
from clireport.cli.parser import create_parser
from clireport.domain.config import ReporterSettings, load_settings
from clireport.domain.constants import CONFIG_ENV_VAR, NO_COLOR_ENV_VAR
from clireport.domain.exceptions import ReportError
from clireport.services.composite.reporter import Reporter


def main(argv=None):
    """Main entry point for the script"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Use --config if given, otherwise fall back to the environment
    config_path = args.config or os.environ.get(CONFIG_ENV_VAR, "")
    try:
        settings = load_settings(config_path) if config_path else ReporterSettings()
    except ReportError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.no_color or os.environ.get(NO_COLOR_ENV_VAR):
        settings.color = False

    reporter = Reporter(settings=settings)

    # Route to appropriate command handler
    if args.command == "render":
        return cmd_render(reporter, args.document)
    elif args.command == "rule":
        return cmd_rule(
            reporter,
            char=args.char,
            width=args.width,
            color=args.color,
            bold=args.bold,
        )
    elif args.command == "datetime":
        return cmd_datetime(
            reporter,
            fmt=args.format,
            align=args.align,
            width=args.width,
            color=args.color,
            bold=args.bold,
        )
    else:
        print(f"error: Unknown command: {args.command}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
