"""Color tags, themes and ANSI painting for colorls."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ColorTag(str, Enum):
    """Styling categories used by the listing and the report."""

    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    WHITE = "white"


RESET = "\x1b[0m"

DEFAULT_THEME = "default"
MONO_THEME = "mono"


def _sgr(code):
    return f"\x1b[{code}m"


@dataclass(frozen=True)
class Theme:
    """Maps every color tag to an SGR prefix; an empty prefix means plain text."""

    key: str
    label: str
    styles: dict[ColorTag, str]

    def __post_init__(self):
        missing = [tag.value for tag in ColorTag if tag not in self.styles]
        if missing:
            raise ValueError(f"theme {self.key!r} has no style for: {', '.join(missing)}")

    def paint(self, tag: ColorTag, text: str) -> str:
        """Wrap *text* in the style for *tag*."""
        prefix = self.styles[ColorTag(tag)]
        if not prefix or not text:
            return text
        return f"{prefix}{text}{RESET}"


THEMES = {
    "default": Theme(
        key="default",
        label="Standard ANSI",
        styles={
            ColorTag.BLUE: _sgr(34),
            ColorTag.GREEN: _sgr(32),
            ColorTag.YELLOW: _sgr(33),
            ColorTag.WHITE: _sgr(37),
        },
    ),
    "bright": Theme(
        key="bright",
        label="Bright ANSI",
        styles={
            ColorTag.BLUE: _sgr(94),
            ColorTag.GREEN: _sgr(92),
            ColorTag.YELLOW: _sgr(93),
            ColorTag.WHITE: _sgr(97),
        },
    ),
    "mono": Theme(
        key="mono",
        label="No color",
        styles={tag: "" for tag in ColorTag},
    ),
}


def list_themes():
    """Return themes in deterministic order."""
    order = ("default", "bright", "mono")
    return [THEMES[key] for key in order]


def get_theme(theme_key: Optional[str]) -> Theme:
    """Resolve theme by key with fallback to default."""
    if not theme_key:
        return THEMES[DEFAULT_THEME]
    return THEMES.get(theme_key, THEMES[DEFAULT_THEME])
