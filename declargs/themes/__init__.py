"""
declargs — declarative command-line arguments

Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import OneColors, get_theme

__all__ = [
    "OneColors",
    "get_theme",
]
