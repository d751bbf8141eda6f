"""Theme management for archive-man CLI output.

Colors are defined once in a validated Pydantic model and converted
into the Rich theme used by the stderr console for warnings and errors.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme


class ThemeColors(BaseModel):
    """Color configuration for archive-man CLI.

    All colors must be valid hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    warning: str = "#f5b332"
    error: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: ThemeColors instance to convert. If None, uses the defaults.

    Returns:
        Rich Theme instance with the ``warning`` and ``error`` styles.
    """
    if colors is None:
        colors = ThemeColors()

    styles: dict[str, str] = {
        "warning": colors.warning,
        "error": f"bold {colors.error}",
    }

    return Theme(styles)


# Module-level cached theme instance
_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, building and caching it if necessary.

    Returns:
        Cached Rich Theme instance.
    """
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
