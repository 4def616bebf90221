"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import strings
from . import patterns
from . import lookups

__all__ = [
    'strings',
    'patterns',
    'lookups'
]
