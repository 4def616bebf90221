"""Character sets and regex patterns for Fountain text processing.
"""

__docformat__ = 'google'

import re

## Whitespace
WHITESPACE: str = " \t\n\r\f\v"
"""Default whitespace set: space, tab, newline, carriage return, form feed
and vertical tab.

Fountain source is plain text, so the default is the ASCII set. Broader
sets are loaded by name with `fountain_tools.strings.whitespace_profile`.

Used as the default `whitespace` argument throughout `fountain_tools.strings`."""

DEFAULT_PROFILE: str = 'ascii'
"""Name of the packaged whitespace profile equal to `WHITESPACE`."""

## Lines
LINE_BREAK: str = "\r\n|\r|\n"
""" Uncompiled regex building block representing a single line break.

A carriage return followed by a newline counts as one break, so the
alternation must try it first."""

LINE_BREAK_PATTERN: re.Pattern = re.compile(LINE_BREAK)
"""Used in `fountain_tools.strings.split_lines`."""
