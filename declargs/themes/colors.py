# declargs — declarative command-line arguments — MIT Licensed
"""
Colour palette used for console output.

`OneColors` exposes hex colour strings usable directly in rich markup
(`f"[{OneColors.DARK_RED}]..."`); `get_theme()` maps semantic style names
used across declargs onto the palette.
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired palette."""

    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"

    GREEN_b = f"bold {GREEN}"
    BLUE_b = f"bold {BLUE}"
    DARK_RED_b = f"bold {DARK_RED}"


def get_theme() -> Theme:
    """Return the rich theme with the semantic styles used by declargs."""
    return Theme(
        {
            "declargs.alias": OneColors.CYAN,
            "declargs.hint": OneColors.LIGHT_YELLOW,
            "declargs.heading": OneColors.BLUE_b,
            "declargs.error": OneColors.LIGHT_RED,
            "declargs.fatal": OneColors.DARK_RED_b,
            "declargs.ok": OneColors.GREEN_b,
            "declargs.dim": OneColors.COMMENT_GREY,
        }
    )
