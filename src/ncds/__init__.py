"""
NCDS Design Tokens

Immutable colors, typography and component themes of the NCDS design system.
"""

from . import palette, typography, tokens
from .primitives import Color, FontWeight, FontSpec, TokenValueError
from .catalog import TokenCatalog, TokenLookupError, get_catalog

__all__ = [
    'Color', 'FontWeight', 'FontSpec', 'TokenValueError',
    'palette', 'typography', 'tokens',
    'TokenCatalog', 'TokenLookupError', 'get_catalog',
]
