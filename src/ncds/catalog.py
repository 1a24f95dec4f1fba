"""
Token Catalog Module

Read-only lookup of every NCDS token by dotted name, e.g. "palette.RED_500".
"""

from types import ModuleType
from typing import Any, Dict, Optional, Tuple
import threading
import logging

from . import palette, tokens, typography
from .primitives import Color, FontSpec
from .tokens import _ColorTheme

logger = logging.getLogger(__name__)

_GROUPS: Dict[str, ModuleType] = {
    'palette': palette,
    'typography': typography,
    'tokens': tokens,
}

_TOKEN_TYPES = (Color, FontSpec, _ColorTheme, float, str)


class TokenLookupError(KeyError):
    """Raised when a token name or group is not in the catalog."""


def _collect(module: ModuleType) -> Dict[str, Any]:
    """Public upper-case constants of a group module."""
    return {
        name: value
        for name, value in vars(module).items()
        if not name.startswith('_') and name.isupper() and isinstance(value, _TOKEN_TYPES)
    }


class TokenCatalog:
    """
    Token Catalog - Singleton Pattern

    Indexes the palette, typography and tokens modules once; values are the
    module constants themselves, never copies.

    Usage Example:
        catalog = get_catalog()

        red = catalog.get("palette.RED_500")
        height = catalog["tokens.BUTTON_HEIGHT_MD"]
        catalog.names("typography")
    """

    _instance: Optional['TokenCatalog'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'TokenCatalog':
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._tokens = {group: _collect(module) for group, module in _GROUPS.items()}
                    logger.debug(
                        "Token catalog built: %s",
                        ", ".join(f"{g}={len(t)}" for g, t in instance._tokens.items()),
                    )
                    cls._instance = instance
        return cls._instance

    @staticmethod
    def _split(key: str) -> Tuple[str, str]:
        group, _, name = key.partition('.')
        return group, name

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a token by dotted name.

        Args:
            key: "<group>.<NAME>", e.g. "tokens.BUTTON_PRIMARY"
            default: Returned when the token does not exist

        Returns:
            The token constant or the default value.
        """
        group, name = self._split(key)
        try:
            return self._tokens[group][name]
        except KeyError:
            logger.debug("Token not found: %s", key)
            return default

    def __getitem__(self, key: str) -> Any:
        group, name = self._split(key)
        try:
            return self._tokens[group][name]
        except KeyError:
            raise TokenLookupError(key) from None

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        group, name = self._split(key)
        return name in self._tokens.get(group, {})

    def __len__(self) -> int:
        return sum(len(t) for t in self._tokens.values())

    def groups(self) -> Tuple[str, ...]:
        """Group names in declaration order."""
        return tuple(self._tokens)

    def names(self, group: str) -> Tuple[str, ...]:
        """Sorted token names of a group."""
        if group not in self._tokens:
            raise TokenLookupError(group)
        return tuple(sorted(self._tokens[group]))

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        """
        Plain-value view of the whole catalog.

        Colors, font specs and themes are expanded through to_dict(); scalars
        and strings are kept as is. A new dict is built on every call.
        """
        return {
            group: {
                name: value.to_dict() if hasattr(value, 'to_dict') else value
                for name, value in entries.items()
            }
            for group, entries in self._tokens.items()
        }

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (for testing only)."""
        with cls._lock:
            cls._instance = None


def get_catalog() -> TokenCatalog:
    """Return the process-wide token catalog."""
    return TokenCatalog()
