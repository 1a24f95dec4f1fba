"""
Typography

Font families and text styles (Typography guide).
"""

from .primitives import FontSpec, FontWeight

FONT_FAMILY_SANS = "Commerce Sans"
FONT_FAMILY_INTER = "Inter"

# Display styles
DISPLAY_XL_BOLD = FontSpec(FONT_FAMILY_SANS, 48.0, 60.0, FontWeight.BOLD)
DISPLAY_LG_BOLD = FontSpec(FONT_FAMILY_SANS, 36.0, 44.0, FontWeight.BOLD)
DISPLAY_MD_BOLD = FontSpec(FONT_FAMILY_SANS, 30.0, 38.0, FontWeight.BOLD)

# Body text styles
TEXT_LG_REGULAR = FontSpec(FONT_FAMILY_INTER, 18.0, 28.0, FontWeight.REGULAR)
TEXT_MD_REGULAR = FontSpec(FONT_FAMILY_INTER, 16.0, 24.0, FontWeight.REGULAR)
TEXT_SM_REGULAR = FontSpec(FONT_FAMILY_INTER, 14.0, 20.0, FontWeight.REGULAR)
TEXT_XS_REGULAR = FontSpec(FONT_FAMILY_INTER, 12.0, 18.0, FontWeight.REGULAR)
