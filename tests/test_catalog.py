"""
Token Catalog Tests
"""

import logging
import threading

import pytest


class TestTokenCatalog:
    """Token catalog lookup tests."""

    def test_singleton(self, catalog):
        from ncds.catalog import TokenCatalog, get_catalog

        assert TokenCatalog() is catalog
        assert get_catalog() is catalog

    def test_concurrent_first_use(self):
        """Threads racing on first use all see one instance."""
        from ncds.catalog import TokenCatalog

        TokenCatalog.reset_instance()
        seen = []
        threads = [threading.Thread(target=lambda: seen.append(TokenCatalog())) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        TokenCatalog.reset_instance()

        assert len(seen) == 8
        assert all(c is seen[0] for c in seen)

    def test_get_returns_module_constants(self, catalog):
        from ncds import palette, tokens, typography

        assert catalog.get("palette.RED_500") is palette.RED_500
        assert catalog.get("typography.TEXT_MD_REGULAR") is typography.TEXT_MD_REGULAR
        assert catalog.get("tokens.BUTTON_PRIMARY") is tokens.BUTTON_PRIMARY
        assert catalog.get("tokens.INPUT_HEIGHT") == 44.0

    def test_get_default(self, catalog):
        assert catalog.get("palette.PINK_500") is None
        assert catalog.get("palette.PINK_500", "fallback") == "fallback"
        assert catalog.get("nosuchgroup.RED_500", 0) == 0
        assert catalog.get("RED_500") is None

    def test_get_miss_is_logged(self, catalog, caplog):
        with caplog.at_level(logging.DEBUG, logger="ncds.catalog"):
            catalog.get("palette.PINK_500")

        assert "palette.PINK_500" in caplog.text

    def test_getitem(self, catalog):
        from ncds import palette
        from ncds.catalog import TokenLookupError

        assert catalog["palette.WHITE"] is palette.WHITE
        with pytest.raises(TokenLookupError):
            catalog["palette.PINK_500"]
        with pytest.raises(KeyError):
            catalog["tokens"]

    def test_contains(self, catalog):
        assert "palette.GRAY_200" in catalog
        assert "tokens.ButtonTheme" not in catalog
        assert "tokens.palette" not in catalog
        assert 42 not in catalog

    def test_groups_and_names(self, catalog):
        assert catalog.groups() == ("palette", "typography", "tokens")
        assert catalog.names("typography") == (
            "DISPLAY_LG_BOLD", "DISPLAY_MD_BOLD", "DISPLAY_XL_BOLD",
            "FONT_FAMILY_INTER", "FONT_FAMILY_SANS",
            "TEXT_LG_REGULAR", "TEXT_MD_REGULAR", "TEXT_SM_REGULAR", "TEXT_XS_REGULAR",
        )
        assert len(catalog.names("palette")) == 19
        assert len(catalog) == 40

    def test_names_unknown_group(self, catalog):
        from ncds.catalog import TokenLookupError

        with pytest.raises(TokenLookupError):
            catalog.names("spacing")

    def test_build_is_logged(self, caplog):
        from ncds.catalog import TokenCatalog

        TokenCatalog.reset_instance()
        with caplog.at_level(logging.DEBUG, logger="ncds.catalog"):
            TokenCatalog()
        TokenCatalog.reset_instance()

        assert "palette=19" in caplog.text


class TestCatalogSnapshot:
    """Catalog values against the documented snapshot."""

    def test_matches_documented_values(self, catalog, documented_snapshot):
        assert catalog.snapshot() == documented_snapshot

    def test_stable_across_calls(self, catalog):
        assert catalog.snapshot() == catalog.snapshot()

    def test_stable_across_rebuilds(self, catalog):
        from ncds.catalog import TokenCatalog

        before = catalog.snapshot()
        TokenCatalog.reset_instance()

        assert TokenCatalog().snapshot() == before

    def test_snapshot_is_a_copy(self, catalog):
        from ncds import palette

        snap = catalog.snapshot()
        snap["palette"]["RED_500"]["r"] = 0
        del snap["tokens"]

        assert catalog.snapshot()["palette"]["RED_500"]["r"] == 236
        assert "tokens" in catalog.snapshot()
        assert palette.RED_500.r == 236

    def test_palette_round_trips_through_hex(self, catalog):
        from ncds.primitives import Color

        for name in catalog.names("palette"):
            color = catalog[f"palette.{name}"]
            assert Color.from_hex(color.hex_value) == color, name
