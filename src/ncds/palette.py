"""
Color Palette

Foundation colors of the NCDS design system (Colors guide).
"""

from .primitives import Color

# --- Primary Red (NHN Commerce identity) ---
RED_500 = Color.from_hex(0xEC1D31)  # Primary
RED_600 = Color.from_hex(0xCF1722)  # Hover
RED_700 = Color.from_hex(0xB7131C)  # Pressed

# --- Grays (neutrals) ---
WHITE = Color.from_hex(0xFFFFFF)
GRAY_50 = Color.from_hex(0xF8FAFC)  # Soft background
GRAY_100 = Color.from_hex(0xF1F5F9)
GRAY_200 = Color.from_hex(0xE2E8F0)  # Lines / borders
GRAY_300 = Color.from_hex(0xCBD5E1)
GRAY_400 = Color.from_hex(0x94A3B8)
GRAY_500 = Color.from_hex(0x64748B)  # Muted text
GRAY_600 = Color.from_hex(0x475569)
GRAY_700 = Color.from_hex(0x334155)  # Main text
GRAY_800 = Color.from_hex(0x1E293B)
GRAY_900 = Color.from_hex(0x0F172A)
BLACK = Color.from_hex(0x000000)

# --- Semantic ---
GREEN_500 = Color.from_hex(0x22C55E)  # Success
ORANGE_500 = Color.from_hex(0xF97316)  # Warning
BLUE_500 = Color.from_hex(0x3B82F6)  # Info / link
VIOLET_500 = Color.from_hex(0x8B5CF6)  # Accent
