"""Unit tests for theme module.

Tests for validation and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

import archive_man.core.theme as theme_module
import pytest
from archive_man.core.theme import ThemeColors, get_rich_theme, get_theme
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.warning == "#f5b332"
        assert colors.error == "#f53263"
        assert set(ThemeColors.model_fields) == {"warning", "error"}

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts valid hex color codes."""
        colors = ThemeColors(warning="#AABBCC", error="#abc")
        assert colors.warning == "#AABBCC"
        assert colors.error == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(warning="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(warning="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(warning="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestGetRichTheme:
    """Tests for get_rich_theme and get_theme."""

    def test_styles_present(self) -> None:
        """The error and warning styles used by the CLI exist."""
        theme = get_rich_theme()

        assert isinstance(theme, Theme)
        assert "error" in theme.styles
        assert "warning" in theme.styles
        assert theme.styles["error"].bold is True

    def test_custom_colors(self) -> None:
        """Custom colors flow into the generated styles."""
        theme = get_rich_theme(ThemeColors(warning="#123456"))

        assert theme.styles["warning"].color is not None
        assert theme.styles["warning"].color.name == "#123456"

    def test_get_theme_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """get_theme builds the theme once."""
        monkeypatch.setattr(theme_module, "_cached_theme", None)

        first = get_theme()
        second = get_theme()

        assert first is second
