"""
hiddenprefs Command Line Interface
"""

from hiddenprefs import __version__

__all__ = ["__version__"]
