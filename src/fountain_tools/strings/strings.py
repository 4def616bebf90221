"""Whitespace trimming, blank-line tests, line splitting and substring replacement.

All functions are pure and accept any string, including the empty string.
Functions that classify whitespace take an optional `whitespace` argument,
a string of characters to treat as whitespace. The default is
`fountain_tools.patterns.WHITESPACE`.
"""

__docformat__ = 'google'

__all__ = [
    'trim',
    'trim_start',
    'trim_end',
    'is_whitespace_or_empty',
    'replace_all',
    'replace_each',
    'split_lines',
    'whitespace_profile'
]

from functools import cache
from typing import Dict, List
from fountain_tools.lookups import WhitespaceData
from fountain_tools.patterns import WHITESPACE, DEFAULT_PROFILE, LINE_BREAK_PATTERN

def trim(text: str, whitespace: str = WHITESPACE) -> str:
    """
    Remove leading and trailing whitespace, preserving internal whitespace.

    Args:
        text: Any string
        whitespace: Characters to treat as whitespace

    Returns:
        Input string without surrounding whitespace

    Example:
        >>> trim('  INT. HOUSE - DAY  ')
        'INT. HOUSE - DAY'
        >>> trim(' \\t\\n')
        ''
    """
    return text.strip(whitespace)

def trim_start(text: str, whitespace: str = WHITESPACE) -> str:
    """
    Remove leading whitespace only.

    Example:
        >>> trim_start('  Willy Wonka  ')
        'Willy Wonka  '
    """
    return text.lstrip(whitespace)

def trim_end(text: str, whitespace: str = WHITESPACE) -> str:
    """Remove trailing whitespace only."""
    return text.rstrip(whitespace)

def is_whitespace_or_empty(text: str, whitespace: str = WHITESPACE) -> bool:
    """
    Check if a string is empty or made up entirely of whitespace.

    Equivalent to `trim(text, whitespace) == ''`.

    Args:
        text: Any string
        whitespace: Characters to treat as whitespace

    Returns:
        True if input has no characters outside the whitespace set, else False

    Example:
        >>> is_whitespace_or_empty('')
        True
        >>> is_whitespace_or_empty('  \\t ')
        True
        >>> is_whitespace_or_empty(' a ')
        False
    """
    return not text.strip(whitespace)

def replace_all(text: str, old: str, new: str) -> str:
    """
    Replace every occurrence of a substring, scanning left to right.

    Matches never overlap: after a match the search resumes at the end of the
    matched text, and inserted replacements are never searched. An empty
    search string leaves the input unchanged.

    Args:
        text: Any string
        old: Substring to search for (case-sensitive)
        new: Replacement substring

    Returns:
        Input string with all matches replaced

    Example:
        >>> replace_all('banana', 'an', 'X')
        'bXXa'
        >>> replace_all('aaa', 'aa', 'b')
        'ba'
        >>> replace_all('abc', '', 'X')
        'abc'
    """
    if not old:
        return text
    return text.replace(old, new)

def replace_each(replacements: Dict[str, str], text: str) -> str:
    """
    Apply several replacements in order with `replace_all`.

    Each replacement runs on the output of the one before it. Empty keys
    are skipped.

    Args:
        replacements: Mapping of substrings to their replacements
        text: Any string

    Returns:
        Input string with every replacement applied

    Example:
        >>> replace_each({"CONT'D": 'CONT’D', '--': '—'}, "BOB (CONT'D) -- hi")
        'BOB (CONT’D) — hi'
    """
    for old, new in replacements.items():
        text = replace_all(text, old, new)
    return text

def split_lines(text: str) -> List[str]:
    """
    Split raw text into lines on CRLF, CR or LF.

    Unlike `str.splitlines`, a trailing line break yields a final empty
    line and no other separators are recognized.

    Example:
        >>> split_lines('FADE IN:\\r\\n\\rINT. HOUSE\\n')
        ['FADE IN:', '', 'INT. HOUSE', '']
        >>> split_lines('')
        ['']
    """
    return LINE_BREAK_PATTERN.split(text)

@cache
def _profiles() -> WhitespaceData:
    return WhitespaceData()

def whitespace_profile(name: str = DEFAULT_PROFILE) -> str:
    """
    Get the characters of a named whitespace profile.

    Profiles are read once from `fountain_tools/data/whitespace.yaml`.

    Args:
        name: Profile name, such as 'ascii' (the default) or 'unicode'

    Returns:
        String of whitespace characters, for use as a `whitespace` argument

    Raises:
        fountain_tools.lookups.UnknownProfileError: If no profile has that name

    Example:
        >>> trim('\\u3000Scene\\u3000', whitespace_profile('unicode'))
        'Scene'
    """
    return _profiles().characters(name)
