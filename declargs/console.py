# declargs — declarative command-line arguments — MIT Licensed
"""Global console instance for declargs output."""
from rich.console import Console

from declargs.themes import get_theme

console = Console(theme=get_theme())
