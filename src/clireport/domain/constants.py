"""Domain constants for clireport.

Defines default values shared by the layout engine, the report composer,
the section formatters and the settings loader.
"""

# Default line / table width in characters
DEFAULT_WIDTH = 100

# Default horizontal rule character (heavy box-drawing horizontal)
DEFAULT_RULE_CHAR = "━"

# Rule character used for table separators
TABLE_RULE_CHAR = "-"

# Vertical delimiter between bordered table cells
TABLE_BORDER_CHAR = "|"

# Default timestamp pattern (strftime syntax)
DEFAULT_DATETIME_FORMAT = "%Y-%m-%d - %I:%M:%S%p"

# Default header/footer title
DEFAULT_TITLE = "Report"

# Blank-line separator count after a header / before a footer
DEFAULT_SPACING = 1

# Section formatters
FORMATTER_NESTED = "nested"
FORMATTER_PROGRESS = "progress"
DEFAULT_FORMATTER = FORMATTER_NESTED

# Nested formatter defaults
DEFAULT_INDENT_SIZE = 2
DEFAULT_MESSAGE = "working"
DEFAULT_COMPLETE = "complete"
INLINE_SUFFIX = "..."

# Progress formatter default indicator
DEFAULT_INDICATOR = "."

# Environment variables honoured by the CLI
CONFIG_ENV_VAR = "CLIREPORT_CONFIG"
NO_COLOR_ENV_VAR = "NO_COLOR"
