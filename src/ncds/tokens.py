"""
Component Tokens

Maps foundation colors onto NCDS components: layout scalars plus one
theme dataclass per component kind (button, input, toggle, checkbox/radio).
"""

from dataclasses import dataclass, fields
from typing import Dict

from . import palette
from .primitives import Color


class _ColorTheme:
    """Shared helpers for theme dataclasses whose fields are all Colors."""

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Convert to dictionary"""
        return {f.name: getattr(self, f.name).to_dict() for f in fields(self)}


# --- Global layout ---
BORDER_RADIUS_SMALL = 4.0
BORDER_RADIUS_MEDIUM = 8.0  # Standard for inputs/buttons
BORDER_RADIUS_LARGE = 12.0


# --- Buttons ---
@dataclass(frozen=True)
class ButtonTheme(_ColorTheme):
    """
    Button colors across interaction states.

    Attributes:
        background: Default background
        text: Label color
        border: Outline color
        background_hover: Background while hovered
        background_pressed: Background while pressed
    """
    background: Color
    text: Color
    border: Color
    background_hover: Color
    background_pressed: Color


# Solid red
BUTTON_PRIMARY = ButtonTheme(
    background=palette.RED_500,
    text=palette.WHITE,
    border=palette.RED_500,
    background_hover=palette.RED_600,
    background_pressed=palette.RED_700,
)

# White with outline
BUTTON_SECONDARY = ButtonTheme(
    background=palette.WHITE,
    text=palette.GRAY_700,
    border=palette.GRAY_300,
    background_hover=palette.GRAY_50,
    background_pressed=palette.GRAY_100,
)

BUTTON_HEIGHT_MD = 44.0  # Standard
BUTTON_HEIGHT_SM = 36.0
BUTTON_HEIGHT_XS = 30.0


# --- Inputs ---
@dataclass(frozen=True)
class InputTheme(_ColorTheme):
    """Text input colors, including focus and error borders."""
    background: Color
    text: Color
    placeholder: Color
    border: Color
    border_focus: Color
    border_error: Color


INPUT_DEFAULT = InputTheme(
    background=palette.WHITE,
    text=palette.GRAY_900,
    placeholder=palette.GRAY_400,
    border=palette.GRAY_200,
    border_focus=palette.RED_500,
    border_error=palette.RED_500,  # Destructive
)

INPUT_HEIGHT = BUTTON_HEIGHT_MD


# --- Toggles ---
@dataclass(frozen=True)
class ToggleTheme(_ColorTheme):
    """Switch track (off/on) and thumb colors."""
    track_off: Color
    track_on: Color
    thumb: Color


TOGGLE_SWITCH = ToggleTheme(
    track_off=palette.GRAY_300,
    track_on=palette.RED_500,
    thumb=palette.WHITE,
)


# --- Checkboxes & radios ---
@dataclass(frozen=True)
class ControlTheme(_ColorTheme):
    border_unchecked: Color
    background_checked: Color
    checkmark: Color


CHECKBOX_DEFAULT = ControlTheme(
    border_unchecked=palette.GRAY_300,
    background_checked=palette.RED_500,
    checkmark=palette.WHITE,
)
