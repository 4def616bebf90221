"""String manipulation utilities for Fountain text processing.

This module provides functions for trimming whitespace, classifying blank
lines, splitting raw input into lines and performing text replacements.
"""

from .strings import __all__
from .strings import *
